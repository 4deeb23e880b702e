"""Run the mutator for one event the way a pipeline host does."""

import logging

from check_status_metric.core.config import (
    MutatorConfig,
    resolve_config,
    validate_config,
)
from check_status_metric.core.exceptions import MutatorError
from check_status_metric.core.models import Event
from check_status_metric.core.mutator import mutate
from check_status_metric.core.ports import TemplateRendererPort

logger = logging.getLogger(__name__)


def run_mutator(
    event: Event,
    config: MutatorConfig,
    renderer: TemplateRendererPort,
) -> Event:
    """Resolve per-event overrides, validate, then mutate the event.

    Args:
        event: Decoded inbound event.
        config: Startup configuration, already validated.
        renderer: Renderer for the metric name template.

    Returns:
        The mutated event.

    Raises:
        ConfigError: If an annotation override empties the template.
        MutationError: If the event cannot be mutated.
    """
    resolved = resolve_config(config, event)
    try:
        if resolved is not config:
            validate_config(resolved)
        return mutate(event, resolved, renderer)
    except MutatorError as e:
        logger.warning(
            "rejected event for entity %s: %s", event.entity.name or "<unknown>", e
        )
        raise
