"""Export-schema serialization for model dataclasses.

Dataclass fields are emitted under camelCase keys. Empty scalars and
collections are omitted, nested records are always emitted, and mapping keys
are sorted so identical input yields identical output.
"""

from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any


def export_key(name: str, metadata: Any = None) -> str:
    """Map a dataclass field name to its export-schema key."""
    if metadata and "key" in metadata:
        return metadata["key"]
    head, *rest = name.rstrip("_").split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, list, dict, tuple)):
        return len(value) == 0
    if isinstance(value, bool):
        return value is False
    if isinstance(value, (int, float)):
        return value == 0
    return False


def to_dict(obj: Any) -> Any:
    """Convert a model object into plain JSON/YAML-safe data."""
    if is_dataclass(obj) and not isinstance(obj, type):
        data: dict[str, Any] = {}
        for f in fields(obj):
            value = getattr(obj, f.name)
            keep = bool(f.metadata.get("keep"))
            if not keep and not is_dataclass(value) and _is_empty(value):
                continue
            data[export_key(f.name, f.metadata)] = to_dict(value)
        return data
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, dict):
        return {str(k): to_dict(obj[k]) for k in sorted(obj)}
    if isinstance(obj, (list, tuple)):
        return [to_dict(item) for item in obj]
    return obj
