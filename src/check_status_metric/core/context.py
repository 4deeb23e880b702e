"""Template data context built from an event.

Field names follow the Sensu Go event structure (``.Check.Name``,
``.Entity.Name``) so name templates written for the Go plugin keep working.
Metadata fields are flattened into their owning object.
"""

from dataclasses import fields, is_dataclass
from typing import Any

from check_status_metric.core.models import Event


def go_field_name(name: str) -> str:
    """Convert a snake_case field name to its Go exported form.

    >>> go_field_name("occurrences_watermark")
    'OccurrencesWatermark'
    """
    return "".join(part[:1].upper() + part[1:] for part in name.split("_"))


# User-keyed maps whose keys are exposed unchanged
_VERBATIM_KEYS = frozenset({"labels", "annotations"})


def _passthrough_context(value: Any) -> Any:
    """Expose unmodelled wire data with Go field names, recursively."""
    if isinstance(value, dict):
        return {
            go_field_name(k): v if k in _VERBATIM_KEYS else _passthrough_context(v)
            for k, v in value.items()
        }
    if isinstance(value, list):
        return [_passthrough_context(item) for item in value]
    return value


def _object_context(obj: Any) -> dict[str, Any]:
    context: dict[str, Any] = {}
    for f in fields(obj):
        if f.name == "extra":
            continue
        context[go_field_name(f.name)] = _value_context(getattr(obj, f.name))
    for key, value in obj.extra.items():
        context.setdefault(go_field_name(key), _passthrough_context(value))
    return context


def _value_context(value: Any) -> Any:
    if is_dataclass(value) and hasattr(value, "extra"):
        return _object_context(value)
    if is_dataclass(value):
        return {
            go_field_name(f.name): _value_context(getattr(value, f.name))
            for f in fields(value)
        }
    if isinstance(value, list):
        return [_value_context(item) for item in value]
    return value


def template_context(event: Event) -> dict[str, Any]:
    """Build the data context name templates are rendered against.

    Args:
        event: The event being mutated.

    Returns:
        Nested dicts keyed by Go field names. ``Check`` and ``Metrics`` are
        None when the event lacks them.
    """
    return _object_context(event)
