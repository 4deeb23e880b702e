"""Core domain models for monitoring events and metric points."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class MetricTag:
    """A name/value pair describing a metric point.

    Attributes:
        name: Tag name (e.g., entity, check).
        value: Tag value, always a string.
    """

    name: str
    value: str


@dataclass(frozen=True)
class MetricPoint:
    """A single timestamped metric sample.

    Attributes:
        name: Metric name (e.g., disk.status).
        value: The metric value.
        timestamp: Unix timestamp in seconds.
        tags: Ordered tags describing the sample.
    """

    name: str
    value: float
    timestamp: int
    tags: list[MetricTag] = field(default_factory=list)


@dataclass
class Metrics:
    """The metric collection carried by an event.

    Attributes:
        points: Metric points, in the order they were added.
        handlers: Names of the handlers meant to receive the points.
        extra: Fields not modelled here, kept for re-encoding.
    """

    points: list[MetricPoint] = field(default_factory=list)
    handlers: list[str] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass
class Entity:
    """The monitored entity an event belongs to."""

    name: str
    namespace: str = "default"
    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass
class Check:
    """The result of one check execution.

    Attributes:
        name: Check name.
        status: Exit status code of the check (0 OK, 1 warning, 2 critical).
        state: Check state (passing, failing, flapping).
        occurrences: Consecutive executions with the same status.
        occurrences_watermark: Highest occurrences count of the current run.
        namespace: Namespace the check belongs to.
        labels: Check labels.
        annotations: Check annotations.
        extra: Fields not modelled here, kept for re-encoding.
    """

    name: str
    status: int = 0
    state: str = ""
    occurrences: int = 0
    occurrences_watermark: int = 0
    namespace: str = "default"
    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass
class Event:
    """A check-execution event flowing through the pipeline.

    Events are mutable: mutators append to ``metrics`` in place.

    Attributes:
        timestamp: Unix timestamp in seconds.
        entity: The entity the event belongs to.
        check: Check result, or None for metrics-only events.
        metrics: Attached metric collection, or None.
        extra: Fields not modelled here, kept for re-encoding.
    """

    timestamp: int
    entity: Entity
    check: Check | None = None
    metrics: Metrics | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def has_check(self) -> bool:
        """Return True if the event carries check data."""
        return self.check is not None

    def has_metrics(self) -> bool:
        """Return True if the event carries a metric collection."""
        return self.metrics is not None
