"""JSON codec for Sensu Go events.

Only the fields the mutator works with are modelled. Everything else is
kept in ``extra`` mappings so an event survives a decode/encode cycle.
"""

import json
from collections.abc import Mapping
from typing import Any

from check_status_metric.core.exceptions import EventDecodeError
from check_status_metric.core.models import (
    Check,
    Entity,
    Event,
    MetricPoint,
    MetricTag,
    Metrics,
)

_CHECK_FIELDS = ("status", "state", "occurrences", "occurrences_watermark")


def _require_mapping(value: Any, where: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise EventDecodeError(f"{where} must be a JSON object")
    return value


def _int_field(data: Mapping[str, Any], key: str, where: str) -> int:
    value = data.get(key, 0)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise EventDecodeError(f"{where}.{key} must be an integer")
    return value


def _string_map(value: Any, where: str) -> dict[str, str]:
    if value is None:
        return {}
    return {str(k): str(v) for k, v in _require_mapping(value, where).items()}


def _string_list(value: Any, where: str) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise EventDecodeError(f"{where} must be a list of strings")
    return list(value)


def _split_metadata(
    data: Mapping[str, Any], where: str
) -> tuple[dict[str, Any], dict[str, Any]]:
    """Return (metadata fields, remaining keys) for an entity or check."""
    metadata = dict(_require_mapping(data.get("metadata") or {}, f"{where}.metadata"))
    meta = {
        "name": metadata.pop("name", "") or "",
        "namespace": metadata.pop("namespace", "default") or "default",
        "labels": _string_map(
            metadata.pop("labels", None), f"{where}.metadata.labels"
        ),
        "annotations": _string_map(
            metadata.pop("annotations", None), f"{where}.metadata.annotations"
        ),
    }
    extra = {k: v for k, v in data.items() if k != "metadata"}
    if metadata:
        extra["metadata"] = metadata
    return meta, extra


def _decode_entity(data: Any) -> Entity:
    data = _require_mapping(data if data is not None else {}, "entity")
    meta, extra = _split_metadata(data, "entity")
    return Entity(extra=extra, **meta)


def _decode_check(data: Any) -> Check:
    data = _require_mapping(data, "check")
    meta, extra = _split_metadata(data, "check")
    for key in _CHECK_FIELDS:
        extra.pop(key, None)
    state = data.get("state") or ""
    if not isinstance(state, str):
        raise EventDecodeError("check.state must be a string")
    return Check(
        status=_int_field(data, "status", "check"),
        state=state,
        occurrences=_int_field(data, "occurrences", "check"),
        occurrences_watermark=_int_field(data, "occurrences_watermark", "check"),
        extra=extra,
        **meta,
    )


def _decode_point(data: Any) -> MetricPoint:
    data = _require_mapping(data, "metrics.points[]")
    tags = [
        MetricTag(name=str(tag.get("name", "")), value=str(tag.get("value", "")))
        for tag in (
            _require_mapping(t, "metrics.points[].tags[]")
            for t in data.get("tags") or []
        )
    ]
    try:
        value = float(data.get("value", 0.0))
    except (TypeError, ValueError) as e:
        raise EventDecodeError("metrics.points[].value must be a number") from e
    return MetricPoint(
        name=str(data.get("name", "")),
        value=value,
        timestamp=_int_field(data, "timestamp", "metrics.points[]"),
        tags=tags,
    )


def _decode_metrics(data: Any) -> Metrics:
    data = _require_mapping(data, "metrics")
    extra = {k: v for k, v in data.items() if k not in ("points", "handlers")}
    return Metrics(
        points=[_decode_point(p) for p in data.get("points") or []],
        handlers=_string_list(data.get("handlers"), "metrics.handlers"),
        extra=extra,
    )


def decode_event(raw: str | bytes | Mapping[str, Any]) -> Event:
    """Decode a Sensu Go event.

    Args:
        raw: JSON text, or an already-parsed JSON object.

    Returns:
        The decoded Event. ``check`` and ``metrics`` are None when absent
        or null.

    Raises:
        EventDecodeError: If the input is not valid JSON or not an event
            object.
    """
    if isinstance(raw, (str, bytes)):
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise EventDecodeError(f"invalid event JSON: {e}") from e
    else:
        data = raw
    data = _require_mapping(data, "event")

    check = data.get("check")
    metrics = data.get("metrics")
    extra = {
        k: v
        for k, v in data.items()
        if k not in ("timestamp", "entity", "check", "metrics")
    }
    return Event(
        timestamp=_int_field(data, "timestamp", "event"),
        entity=_decode_entity(data.get("entity")),
        check=_decode_check(check) if check is not None else None,
        metrics=_decode_metrics(metrics) if metrics is not None else None,
        extra=extra,
    )


def _encode_metadata(obj: Entity | Check) -> dict[str, Any]:
    metadata = dict(obj.extra.get("metadata", {}))
    metadata["name"] = obj.name
    metadata["namespace"] = obj.namespace
    if obj.labels:
        metadata["labels"] = obj.labels
    if obj.annotations:
        metadata["annotations"] = obj.annotations
    return metadata


def _encode_point(point: MetricPoint) -> dict[str, Any]:
    return {
        "name": point.name,
        "value": point.value,
        "timestamp": point.timestamp,
        "tags": [{"name": t.name, "value": t.value} for t in point.tags],
    }


def event_to_dict(event: Event) -> dict[str, Any]:
    """Convert an event to its JSON-compatible dict form."""
    obj: dict[str, Any] = dict(event.extra)
    obj["timestamp"] = event.timestamp
    obj["entity"] = {
        **event.entity.extra,
        "metadata": _encode_metadata(event.entity),
    }
    if event.check is not None:
        check = event.check
        obj["check"] = {
            **check.extra,
            "metadata": _encode_metadata(check),
            "status": check.status,
            "state": check.state,
            "occurrences": check.occurrences,
            "occurrences_watermark": check.occurrences_watermark,
        }
    if event.metrics is not None:
        obj["metrics"] = {
            **event.metrics.extra,
            "handlers": event.metrics.handlers,
            "points": [_encode_point(p) for p in event.metrics.points],
        }
    return obj


def encode_event(event: Event) -> str:
    """Encode an event to a JSON string.

    Args:
        event: The event to encode.

    Returns:
        A single JSON object, without trailing newline.
    """
    return json.dumps(event_to_dict(event))
