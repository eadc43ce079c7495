"""Load DeviceConfiguration documents written in the export schema.

Accepts the camelCase keys produced by ``serialize.to_dict`` (snake_case
field names are accepted too). Unknown keys are ignored so exports from newer
versions still load.
"""

import json
import logging
import types
import typing
from dataclasses import MISSING, fields, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from firewall_dossier.errors import ConfigLoadError
from firewall_dossier.model.device import DeviceConfiguration
from firewall_dossier.model.serialize import export_key

logger = logging.getLogger(__name__)


def _unwrap_optional(hint: Any) -> Any:
    origin = typing.get_origin(hint)
    if origin in (typing.Union, types.UnionType):
        args = [a for a in typing.get_args(hint) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return hint


def _is_optional(hint: Any) -> bool:
    return typing.get_origin(hint) in (typing.Union, types.UnionType) and type(None) in typing.get_args(hint)


def _convert(value: Any, hint: Any, path: str) -> Any:
    if value is None:
        if _is_optional(hint):
            return None
        raise ConfigLoadError(f"{path}: null is not allowed here")
    hint = _unwrap_optional(hint)
    origin = typing.get_origin(hint)

    if origin is list:
        if not isinstance(value, list):
            raise ConfigLoadError(f"{path}: expected a list, got {type(value).__name__}")
        (item_hint,) = typing.get_args(hint)
        return [_convert(item, item_hint, f"{path}[{i}]") for i, item in enumerate(value)]
    if origin is dict:
        if not isinstance(value, dict):
            raise ConfigLoadError(f"{path}: expected a mapping, got {type(value).__name__}")
        _, value_hint = typing.get_args(hint)
        return {str(k): _convert(v, value_hint, f"{path}.{k}") for k, v in value.items()}
    if is_dataclass(hint):
        return from_dict(hint, value, path)
    if isinstance(hint, type) and issubclass(hint, Enum):
        try:
            return hint(value)
        except ValueError as e:
            raise ConfigLoadError(f"{path}: {e}") from e
    if hint is bool:
        if not isinstance(value, bool):
            raise ConfigLoadError(f"{path}: expected a boolean, got {value!r}")
        return value
    if hint is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigLoadError(f"{path}: expected an integer, got {value!r}")
        return value
    if hint is str:
        # YAML turns bare ports and tags into numbers.
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        if not isinstance(value, str):
            raise ConfigLoadError(f"{path}: expected a string, got {value!r}")
        return value
    return value


def from_dict(cls: type, data: Any, path: str = "$") -> Any:
    """Build a dataclass instance of ``cls`` from export-schema data."""
    if not isinstance(data, dict):
        raise ConfigLoadError(f"{path}: expected a mapping, got {type(data).__name__}")

    hints = typing.get_type_hints(cls)
    kwargs: dict[str, Any] = {}
    for f in fields(cls):
        key = export_key(f.name, f.metadata)
        hint = hints[f.name]
        if key in data:
            raw = data[key]
        elif f.name in data:
            raw = data[f.name]
        else:
            raw = None

        # An empty YAML section (`users:`) reads as null; treat it like an absent key.
        if raw is None and not _is_optional(hint):
            if f.default is MISSING and f.default_factory is MISSING:
                raise ConfigLoadError(f"{path}: missing required field '{key}'")
            continue
        kwargs[f.name] = _convert(raw, hint, f"{path}.{key}")
    return cls(**kwargs)


def device_from_dict(data: dict[str, Any]) -> DeviceConfiguration:
    """Build a DeviceConfiguration from a parsed JSON/YAML document."""
    return from_dict(DeviceConfiguration, data)


def load_device(path: str | Path) -> DeviceConfiguration:
    """Read a device document from disk; the suffix selects JSON or YAML."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigLoadError(f"cannot read {path}: {e}") from e

    try:
        if path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigLoadError(f"cannot parse {path}: {e}") from e

    if data is None:
        data = {}
    logger.debug("Loaded device document %s", path)
    return device_from_dict(data)
