"""Shared test fixtures for all test modules."""

from collections.abc import Callable
from typing import Any

import pytest

from check_status_metric.core.models import Check, Entity, Event, MetricPoint, Metrics
from tests.stubs import StubRenderer


@pytest.fixture
def stub_renderer() -> StubRenderer:
    """Renderer stub returning "stub.status"."""
    return StubRenderer()


@pytest.fixture
def failing_renderer() -> StubRenderer:
    """Renderer stub that always raises TemplateError."""
    return StubRenderer(error="map has no entry for key \"Missing\"")


@pytest.fixture
def make_event() -> Callable[..., Event]:
    """Factory fixture for events with a check.

    Defaults match a warning check named "disk" on entity "host01".
    """

    def _event(
        check_name: str = "disk",
        status: int = 1,
        state: str = "warning",
        occurrences: int = 3,
        occurrences_watermark: int = 3,
        entity_name: str = "host01",
        timestamp: int = 1000,
        points: list[MetricPoint] | None = None,
        with_check: bool = True,
    ) -> Event:
        check = (
            Check(
                name=check_name,
                status=status,
                state=state,
                occurrences=occurrences,
                occurrences_watermark=occurrences_watermark,
            )
            if with_check
            else None
        )
        metrics = Metrics(points=list(points)) if points is not None else None
        return Event(
            timestamp=timestamp,
            entity=Entity(name=entity_name),
            check=check,
            metrics=metrics,
        )

    return _event


@pytest.fixture
def sensu_event_json() -> dict[str, Any]:
    """A Sensu Go event as posted by the backend to a pipe mutator."""
    return {
        "timestamp": 1000,
        "id": "3a5a2f6e-7d0b-4f5e-9a3c-0d3c6f1b2e4a",
        "entity": {
            "entity_class": "agent",
            "system": {"hostname": "host01", "os": "linux"},
            "metadata": {
                "name": "host01",
                "namespace": "default",
                "labels": {"region": "us-east-1"},
            },
        },
        "check": {
            "command": "check-disk-usage -w 80 -c 90",
            "interval": 60,
            "output": "WARNING: / is 85% full",
            "handlers": ["influxdb"],
            "status": 1,
            "state": "failing",
            "occurrences": 3,
            "occurrences_watermark": 3,
            "metadata": {"name": "disk", "namespace": "default"},
        },
        "metrics": {
            "handlers": ["influxdb"],
            "points": [
                {
                    "name": "disk.used_percent",
                    "value": 85.0,
                    "timestamp": 1000,
                    "tags": [{"name": "mount", "value": "/"}],
                }
            ],
        },
    }
