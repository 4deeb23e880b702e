"""BDD step definitions for check status mutation features."""

from dataclasses import dataclass, field

import pytest
from pytest_bdd import given, parsers, then, when

from check_status_metric.adapters.templating.jinja import GoStyleTemplateRenderer
from check_status_metric.core.config import MutatorConfig, validate_config
from check_status_metric.core.exceptions import (
    ConfigError,
    MissingCheckError,
    MutatorError,
    TemplateRenderError,
)
from check_status_metric.core.models import Check, Entity, Event, MetricPoint, Metrics
from check_status_metric.core.mutator import mutate


@dataclass
class MutationScenarioContext:
    """Shared state between steps in a mutation scenario."""

    config: MutatorConfig = field(default_factory=MutatorConfig)
    renderer: GoStyleTemplateRenderer = field(default_factory=GoStyleTemplateRenderer)
    event: Event | None = None
    error: MutatorError | None = None


@pytest.fixture
def ctx() -> MutationScenarioContext:
    """Fresh scenario context for each test."""
    return MutationScenarioContext()


def _event(ctx: MutationScenarioContext) -> Event:
    assert ctx.event is not None, "no event defined in scenario"
    return ctx.event


# === Given ===
@given(parsers.re(r'the metric name template "(?P<template>.*)"'))
def step_template(ctx: MutationScenarioContext, template: str) -> None:
    ctx.config = MutatorConfig(metric_name_template=template)


@given(
    parsers.parse(
        'an event at {timestamp:d} for entity "{entity}" with check "{check}"'
    )
)
def step_event_with_check(
    ctx: MutationScenarioContext, timestamp: int, entity: str, check: str
) -> None:
    ctx.event = Event(
        timestamp=timestamp, entity=Entity(name=entity), check=Check(name=check)
    )


@given(
    parsers.parse('an event at {timestamp:d} for entity "{entity}" without a check')
)
def step_event_without_check(
    ctx: MutationScenarioContext, timestamp: int, entity: str
) -> None:
    ctx.event = Event(timestamp=timestamp, entity=Entity(name=entity))


@given(
    parsers.parse(
        'the check has status {status:d}, state "{state}", '
        "{occurrences:d} occurrences and watermark {watermark:d}"
    )
)
def step_check_fields(
    ctx: MutationScenarioContext,
    status: int,
    state: str,
    occurrences: int,
    watermark: int,
) -> None:
    check = _event(ctx).check
    assert check is not None
    check.status = status
    check.state = state
    check.occurrences = occurrences
    check.occurrences_watermark = watermark


@given(parsers.parse('the event already has a metric point named "{name}"'))
def step_existing_point(ctx: MutationScenarioContext, name: str) -> None:
    event = _event(ctx)
    point = MetricPoint(name=name, value=85.0, timestamp=event.timestamp)
    event.metrics = Metrics(points=[point])


# === When ===
@when("the event is mutated")
def step_mutate(ctx: MutationScenarioContext) -> None:
    try:
        mutate(_event(ctx), ctx.config, ctx.renderer)
    except MutatorError as e:
        ctx.error = e


@when("the configuration is validated")
def step_validate(ctx: MutationScenarioContext) -> None:
    try:
        validate_config(ctx.config)
    except MutatorError as e:
        ctx.error = e


# === Then ===
@then(
    parsers.re(r"the event should have (?P<n>\d+) metric points?"),
    converters={"n": int},
)
def step_point_count(ctx: MutationScenarioContext, n: int) -> None:
    assert ctx.error is None
    metrics = _event(ctx).metrics
    assert metrics is not None
    assert len(metrics.points) == n


@then("the event should have no metrics")
def step_no_metrics(ctx: MutationScenarioContext) -> None:
    assert _event(ctx).metrics is None


@then(
    parsers.parse(
        'the last metric point should be named "{name}" '
        "with value {value:f} at {timestamp:d}"
    )
)
def step_last_point(
    ctx: MutationScenarioContext, name: str, value: float, timestamp: int
) -> None:
    metrics = _event(ctx).metrics
    assert metrics is not None
    point = metrics.points[-1]
    assert point.name == name
    assert point.value == value
    assert point.timestamp == timestamp


@then(parsers.parse('the first metric point should be named "{name}"'))
def step_first_point(ctx: MutationScenarioContext, name: str) -> None:
    metrics = _event(ctx).metrics
    assert metrics is not None
    assert metrics.points[0].name == name


@then("the last metric point should have tags:")
def step_last_point_tags(
    ctx: MutationScenarioContext, datatable: list[list[str]]
) -> None:
    metrics = _event(ctx).metrics
    assert metrics is not None
    expected = [(row[0], row[1]) for row in datatable[1:]]
    assert [(t.name, t.value) for t in metrics.points[-1].tags] == expected


@then("the mutation should fail because the check is missing")
def step_missing_check(ctx: MutationScenarioContext) -> None:
    assert isinstance(ctx.error, MissingCheckError)


@then("the mutation should fail because the template did not render")
def step_render_failed(ctx: MutationScenarioContext) -> None:
    assert isinstance(ctx.error, TemplateRenderError)
    assert _event(ctx).metrics is None


@then("validation should fail because the template is required")
def step_config_error(ctx: MutationScenarioContext) -> None:
    assert isinstance(ctx.error, ConfigError)
    assert "template is required" in str(ctx.error)
