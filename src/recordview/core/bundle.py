"""
Presentation metadata that lives on a decorated record.

* One frozen `MetadataBundle` per record, stored under `BUNDLE_KEY`.
* Type labels are kept separately under `TYPE_NAMES_KEY` (most specific first).
"""

from __future__ import annotations

from typing import Iterable, Optional, Tuple, Union

from pydantic import BaseModel, field_validator

BUNDLE_KEY = "__recordview__"
TYPE_NAMES_KEY = "__recordview_types__"
RESERVED_KEYS = frozenset({BUNDLE_KEY, TYPE_NAMES_KEY})

FieldSpec = Union[str, Iterable[str], None]


def field_set(fields: FieldSpec) -> Optional[Tuple[str, ...]]:
    """Normalise a field list: bare str ➜ one field, None / empty ➜ None."""
    if fields is None:
        return None
    if isinstance(fields, str):
        return (fields,)
    fields = tuple(fields)
    return fields or None


class MetadataBundle(BaseModel):
    """Default display / sort fields for one record."""

    display_fields: Optional[Tuple[str, ...]] = None
    sort_fields: Optional[Tuple[str, ...]] = None
    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("display_fields", "sort_fields", mode="before")
    @classmethod
    def _normalise(cls, value):
        return field_set(value)

    @classmethod
    def build(
        cls, display_fields: FieldSpec = None, sort_fields: FieldSpec = None
    ) -> Optional["MetadataBundle"]:
        """Return a bundle, or None when neither field set was supplied."""
        display = field_set(display_fields)
        sort = field_set(sort_fields)
        if display is None and sort is None:
            return None
        return cls(display_fields=display, sort_fields=sort)
