"""
recordview.decorator  ──  attach default display / sort fields and type labels.

    from recordview import decorate, get_bundle

    decorate(row, display_fields=["name", "size"], sort_fields="name",
             type_name="Inventory.Item")
    get_bundle(row).display_fields   # ('name', 'size')

Decoration always mutates the record in place; `passthru=True` additionally
returns the same object so calls can be chained or streamed.
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Iterator
from functools import wraps
from typing import Any, Callable, Iterable, List, Optional, TypeVar

from .config import get_settings
from .core.bundle import BUNDLE_KEY, TYPE_NAMES_KEY, FieldSpec, MetadataBundle
from .core.shape import base_type_names, check_open, is_legacy_model, read_slot, write_slot
from .exceptions import LegacyModelWarning

T = TypeVar("T")

log = logging.getLogger(__name__)


def _stored_labels(record: Any) -> List[str]:
    labels = read_slot(record, TYPE_NAMES_KEY)
    if isinstance(labels, (list, tuple)):
        return list(labels)
    return []


def _check_label(type_name: Optional[str]) -> Optional[str]:
    if type_name is not None and not isinstance(type_name, str):
        raise TypeError(f"type_name must be a str, not {type(type_name).__qualname__}")
    return type_name


def _warn_legacy(record: Any) -> None:
    if is_legacy_model(record) and get_settings().legacy_warnings:
        warnings.warn(
            f"{type(record).__qualname__} is a pydantic.v1 model: attached view "
            "metadata is stored in its __dict__ and exported by .dict()/.json(). "
            "Use pydantic 2 models or recordview.Record instead.",
            LegacyModelWarning,
            stacklevel=4,
        )


def _apply(record: Any, bundle: Optional[MetadataBundle], type_name: Optional[str]) -> None:
    if bundle is None and type_name is None:
        log.debug("nothing to attach to %s record", type(record).__qualname__)
        return

    check_open(record)
    _warn_legacy(record)

    if type_name is not None:
        write_slot(record, TYPE_NAMES_KEY, [type_name, *_stored_labels(record)])
    if bundle is not None:
        write_slot(record, BUNDLE_KEY, bundle)  # full overwrite, never merged

    log.debug(
        "decorated %s record: type_name=%s display=%s sort=%s",
        type(record).__qualname__,
        type_name,
        bundle.display_fields if bundle else None,
        bundle.sort_fields if bundle else None,
    )


# ------------------------------------------------------------------ #
# public operations
# ------------------------------------------------------------------ #
def decorate(
    record: T,
    display_fields: FieldSpec = None,
    sort_fields: FieldSpec = None,
    type_name: Optional[str] = None,
    passthru: bool = False,
) -> Optional[T]:
    """
    Attach view metadata to `record` in place.

    * `type_name` is inserted at the front of the record's type-name chain.
    * If either field set is given, a new `MetadataBundle` replaces any
      existing one in full. With neither, the existing bundle is untouched.
    * Returns `record` itself when `passthru` is set, else None.

    Raises TypeError for a non-str `type_name` and FixedTypeError when the
    record's type cannot host the metadata, both before anything is written.
    """
    bundle = MetadataBundle.build(display_fields, sort_fields)
    _apply(record, bundle, _check_label(type_name))
    return record if passthru else None


def _stream(
    records: Iterable[T], bundle: Optional[MetadataBundle], type_name: Optional[str]
) -> Iterator[T]:
    for record in records:
        _apply(record, bundle, type_name)
        yield record


def decorate_many(
    records: Iterable[T],
    display_fields: FieldSpec = None,
    sort_fields: FieldSpec = None,
    type_name: Optional[str] = None,
    passthru: bool = False,
) -> Optional[Iterator[T]]:
    """
    Decorate records one at a time, in arrival order.

    With `passthru` a lazy iterator is returned that yields each record as soon
    as it is decorated; a failing record raises when it is reached and nothing
    after it is read. Without `passthru` the records are consumed immediately
    and None is returned.
    """
    bundle = MetadataBundle.build(display_fields, sort_fields)
    stream = _stream(records, bundle, _check_label(type_name))
    if passthru:
        return stream
    for _ in stream:
        pass
    return None


# ------------------------------------------------------------------ #
# readers
# ------------------------------------------------------------------ #
def get_bundle(record: Any) -> Optional[MetadataBundle]:
    """Return the attached bundle, or None."""
    bundle = read_slot(record, BUNDLE_KEY)
    return bundle if isinstance(bundle, MetadataBundle) else None


def type_names(record: Any) -> List[str]:
    """Attached labels (most recent first) followed by the record's class chain."""
    return _stored_labels(record) + base_type_names(record)


# ------------------------------------------------------------------ #
# reusable recipes
# ------------------------------------------------------------------ #
class Decorator:
    """One validated decoration recipe, applied to many records."""

    def __init__(
        self,
        display_fields: FieldSpec = None,
        sort_fields: FieldSpec = None,
        type_name: Optional[str] = None,
    ):
        self.bundle = MetadataBundle.build(display_fields, sort_fields)
        self.type_name = _check_label(type_name)

    def __repr__(self) -> str:
        return f"Decorator(bundle={self.bundle!r}, type_name={self.type_name!r})"

    def apply(self, record: T, passthru: bool = False) -> Optional[T]:
        _apply(record, self.bundle, self.type_name)
        return record if passthru else None

    def stream(self, records: Iterable[T]) -> Iterator[T]:
        """Lazily decorate and re-yield each record."""
        return _stream(records, self.bundle, self.type_name)

    def __call__(self, record: T) -> T:
        _apply(record, self.bundle, self.type_name)
        return record


def view(
    display_fields: FieldSpec = None,
    sort_fields: FieldSpec = None,
    type_name: Optional[str] = None,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorate whatever the wrapped function returns.

    Lists, tuples and iterators are treated as streams of records (iterators
    stay lazy); any other return value is treated as a single record.
    """
    recipe = Decorator(display_fields, sort_fields, type_name)

    def decorator(fn):
        @wraps(fn)
        def inner(*args, **kwargs):
            result = fn(*args, **kwargs)
            if isinstance(result, Iterator):
                return recipe.stream(result)
            if type(result) in (list, tuple):
                return type(result)(recipe.stream(result))
            return recipe(result)

        return inner

    return decorator
