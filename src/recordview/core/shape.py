"""
Record shape checks and raw access to the reserved view slots.

* Mutable mappings keep the slots as items, other open records as attributes.
* Fixed records (no instance `__dict__`, read-only mappings, builtin and other
  immutable types, frozen dataclasses, frozen pydantic models) are rejected
  before anything is written.
"""

from __future__ import annotations

import dataclasses
import logging
import sys
from collections.abc import Mapping, MutableMapping
from typing import Any, List, Optional

from pydantic import BaseModel

from ..exceptions import FixedTypeError
from .bundle import RESERVED_KEYS

log = logging.getLogger(__name__)

# Py_TPFLAGS_IMMUTABLETYPE: builtin and extension types refuse new attributes
_IMMUTABLE_TYPE = 1 << 8


def is_legacy_model(record: Any) -> bool:
    """True for pydantic.v1 model instances (only if that module was imported)."""
    v1 = sys.modules.get("pydantic.v1")
    return v1 is not None and isinstance(record, v1.BaseModel)


def fixed_reason(record: Any) -> Optional[str]:
    """Why `record` cannot host view metadata, or None when it is open."""
    if isinstance(record, MutableMapping):
        return None
    if isinstance(record, Mapping):
        return "read-only mapping"
    if isinstance(record, type) and record.__flags__ & _IMMUTABLE_TYPE:
        return f"immutable type {record.__qualname__!r}"
    if isinstance(record, BaseModel):
        return "frozen pydantic model" if record.model_config.get("frozen") else None
    if is_legacy_model(record):
        config = record.__config__
        if not config.allow_mutation or config.frozen:
            return "immutable pydantic.v1 model"
        if config.extra != "allow":
            return "pydantic.v1 model without extra='allow'"
        return None
    if dataclasses.is_dataclass(record) and not isinstance(record, type):
        if record.__dataclass_params__.frozen:  # type: ignore[attr-defined]
            return "frozen dataclass"
    if not hasattr(record, "__dict__"):
        return "no instance __dict__"
    return None


def is_open(record: Any) -> bool:
    return fixed_reason(record) is None


def check_open(record: Any) -> None:
    """Raise FixedTypeError unless `record` accepts extension metadata."""
    reason = fixed_reason(record)
    if reason is not None:
        log.debug("rejecting %s record: %s", type(record).__qualname__, reason)
        raise FixedTypeError(type(record), reason)


# ------------------------------------------------------------------ #
# slot access
# ------------------------------------------------------------------ #
def read_slot(record: Any, key: str, default: Any = None) -> Any:
    if isinstance(record, Mapping):
        return record.get(key, default)
    return getattr(record, key, default)


def write_slot(record: Any, key: str, value: Any) -> None:
    """Store `value` under `key`; errors from the record itself propagate."""
    if isinstance(record, MutableMapping):
        record[key] = value
    else:
        setattr(record, key, value)


# ------------------------------------------------------------------ #
# introspection helpers
# ------------------------------------------------------------------ #
def base_type_names(record: Any) -> List[str]:
    """Names of type(record).__mro__, most specific first."""
    names = []
    for cls in type(record).__mro__:
        if cls.__module__ == "builtins":
            names.append(cls.__qualname__)
        else:
            names.append(f"{cls.__module__}.{cls.__qualname__}")
    return names


def field_names(record: Any) -> List[str]:
    """The record's own field names, reserved view keys excluded."""
    if isinstance(record, Mapping):
        names = list(record)
    elif isinstance(record, BaseModel):
        names = list(type(record).model_fields) + list(record.model_extra or {})
    elif is_legacy_model(record):
        names = list(record.__dict__)
    elif dataclasses.is_dataclass(record) and not isinstance(record, type):
        names = [f.name for f in dataclasses.fields(record)]
    elif isinstance(record, tuple) and hasattr(record, "_fields"):
        names = list(record._fields)
    elif hasattr(record, "__dict__"):
        names = [k for k in vars(record) if not k.startswith("_")]
    else:
        names = []
        for cls in type(record).__mro__:
            slots = cls.__dict__.get("__slots__", ())
            if isinstance(slots, str):
                slots = (slots,)
            for slot in slots:
                if slot.startswith("_") or slot in names:
                    continue
                if hasattr(record, slot):
                    names.append(slot)
    return [n for n in names if n not in RESERVED_KEYS]
