"""Check status metric mutator.

Derives a metric point from a check event's status so metric handlers can
ingest check health as a time series.
"""

import logging

from check_status_metric.core.config import MutatorConfig
from check_status_metric.core.context import template_context
from check_status_metric.core.exceptions import (
    MissingCheckError,
    TemplateError,
    TemplateRenderError,
)
from check_status_metric.core.models import Event, MetricPoint, MetricTag, Metrics
from check_status_metric.core.ports import TemplateRendererPort

logger = logging.getLogger(__name__)


def status_tags(event: Event) -> list[MetricTag]:
    """Build the descriptive tags for a check status point.

    Args:
        event: An event carrying check data.

    Returns:
        Tags in fixed order: entity, check, state, occurrences,
        occurrences_watermark.
    """
    check = event.check
    assert check is not None
    return [
        MetricTag(name="entity", value=event.entity.name),
        MetricTag(name="check", value=check.name),
        MetricTag(name="state", value=check.state),
        MetricTag(name="occurrences", value=f"{check.occurrences:d}"),
        MetricTag(
            name="occurrences_watermark", value=f"{check.occurrences_watermark:d}"
        ),
    ]


def mutate(
    event: Event,
    config: MutatorConfig,
    renderer: TemplateRendererPort,
) -> Event:
    """Append a check status metric point to an event.

    The event is modified in place. Existing metric points are kept, so
    mutating the same event twice appends two points.

    Args:
        event: The event to mutate.
        config: Mutator configuration holding the metric name template.
        renderer: Renderer used to evaluate the metric name template.

    Returns:
        The same event, with the new point appended to ``event.metrics``.

    Raises:
        MissingCheckError: If the event has no check data.
        TemplateRenderError: If the metric name template fails to render.
    """
    if not event.has_check():
        raise MissingCheckError()
    check = event.check
    assert check is not None

    try:
        metric_name = renderer.render(
            config.metric_name_template, template_context(event)
        )
    except TemplateError as e:
        raise TemplateRenderError(e) from e

    # Normally created upstream when a metrics handler is configured
    if not event.has_metrics():
        event.metrics = Metrics()
    assert event.metrics is not None

    point = MetricPoint(
        name=metric_name,
        value=float(check.status),
        timestamp=event.timestamp,
        tags=status_tags(event),
    )
    event.metrics.points.append(point)
    logger.debug(
        "appended %s=%s for entity %s", point.name, point.value, event.entity.name
    )
    return event
