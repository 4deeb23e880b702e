"""Mutator configuration and validation."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, replace

from check_status_metric.core.exceptions import ConfigError
from check_status_metric.core.models import Event

logger = logging.getLogger(__name__)

PLUGIN_NAME = "sensu-check-status-metric-mutator"
DEFAULT_METRIC_NAME_TEMPLATE = "{{.Check.Name}}.status"
METRIC_NAME_TEMPLATE_ENV = "METRIC_NAME_TEMPLATE"

# Annotations under this prefix override options for a single event
ANNOTATION_KEYSPACE = f"sensu.io/plugins/{PLUGIN_NAME}/config"
METRIC_NAME_TEMPLATE_ANNOTATION = f"{ANNOTATION_KEYSPACE}/metric-name-template"


@dataclass(frozen=True)
class MutatorConfig:
    """Configuration for the check status metric mutator.

    Attributes:
        metric_name_template: Template for naming the metric point for the
            check status.
    """

    metric_name_template: str = DEFAULT_METRIC_NAME_TEMPLATE

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "MutatorConfig":
        """Build a config from environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            MutatorConfig with METRIC_NAME_TEMPLATE applied when set.
        """
        env = os.environ if environ is None else environ
        template = env.get(METRIC_NAME_TEMPLATE_ENV, DEFAULT_METRIC_NAME_TEMPLATE)
        return cls(metric_name_template=template)


def validate_config(config: MutatorConfig) -> None:
    """Check that the config can be used to mutate events.

    Only emptiness is checked; template syntax errors surface at render time.

    Raises:
        ConfigError: If the metric name template is empty.
    """
    if len(config.metric_name_template) == 0:
        raise ConfigError(
            "template is required: set --metric-name-template "
            f"or the {METRIC_NAME_TEMPLATE_ENV} environment variable"
        )


def resolve_config(config: MutatorConfig, event: Event) -> MutatorConfig:
    """Apply per-event annotation overrides to a config.

    Check annotations take precedence over entity annotations.

    Returns:
        The original config if no override is present, else a new config.
    """
    sources = []
    if event.check is not None:
        sources.append(("check", event.check.annotations))
    sources.append(("entity", event.entity.annotations))

    for source, annotations in sources:
        if METRIC_NAME_TEMPLATE_ANNOTATION in annotations:
            template = annotations[METRIC_NAME_TEMPLATE_ANNOTATION]
            logger.debug(
                "metric name template overridden by %s annotation: %r",
                source,
                template,
            )
            return replace(config, metric_name_template=template)
    return config
