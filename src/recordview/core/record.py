"""
Open record model – *pure Pydantic*.

* `Record` accepts arbitrary fields (`extra="allow"`) and stays mutable, so
  view metadata can always be attached to it.
* `to_record()` projects any object (including fixed ones such as tuples,
  frozen dataclasses or `__slots__` classes) into a new `Record`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Iterable, Optional

from pydantic import BaseModel

from .bundle import field_set
from .shape import field_names


class Record(BaseModel):
    """Open key/value record – fields are whatever the caller puts in."""

    model_config = {"extra": "allow", "frozen": False, "arbitrary_types_allowed": True}

    def add(self, **kv: Any) -> None:
        """Set extra fields; attached view metadata is unaffected."""
        for k, v in kv.items():
            setattr(self, k, v)

    def remove(self, key: str) -> None:
        """Drop an extra field; unknown names and view metadata are ignored."""
        if key in (self.model_extra or {}):
            delattr(self, key)

    def fields(self) -> Dict[str, Any]:
        """Field values as a dict, without view metadata."""
        return self.model_dump()


def _lookup(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def _source_data(obj: Any) -> Dict[str, Any]:
    """Discover fields and values of `obj` (shallow)."""
    return {name: _lookup(obj, name) for name in field_names(obj)}


def to_record(obj: Any, fields: Optional[Iterable[str]] = None) -> Record:
    """
    Copy `obj` into a new open `Record`.

    With `fields`, exactly those fields are projected in that order (missing
    ones become None); otherwise fields are discovered from the object.
    View metadata attached to `obj` is not copied.
    """
    names = field_set(fields)
    if names is not None:
        data = {name: _lookup(obj, name) for name in names}
    else:
        data = _source_data(obj)
        if not data:
            raise TypeError(
                f"Cannot discover fields of {type(obj).__qualname__!r}; "
                "pass fields=[...] explicitly"
            )
    return Record.model_validate(data)
