"""Sensu mutator that records a check's status as a metric point."""

from check_status_metric.core.config import MutatorConfig, validate_config
from check_status_metric.core.exceptions import (
    ConfigError,
    EventDecodeError,
    MissingCheckError,
    MutationError,
    MutatorError,
    TemplateError,
    TemplateRenderError,
)
from check_status_metric.core.models import (
    Check,
    Entity,
    Event,
    MetricPoint,
    MetricTag,
    Metrics,
)
from check_status_metric.core.mutator import mutate

__all__ = [
    "Check",
    "ConfigError",
    "Entity",
    "Event",
    "EventDecodeError",
    "MetricPoint",
    "MetricTag",
    "Metrics",
    "MissingCheckError",
    "MutationError",
    "MutatorConfig",
    "MutatorError",
    "TemplateError",
    "TemplateRenderError",
    "mutate",
    "validate_config",
]
