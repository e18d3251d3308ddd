"""
Public surface for recordview.
Importing this module does **not** configure logging; call
`recordview.configure_logging()` if you want the package's debug output.
"""

from .core.bundle import BUNDLE_KEY, TYPE_NAMES_KEY, MetadataBundle
from .core.record import Record, to_record
from .core.shape import field_names, is_open
from .decorator import Decorator, decorate, decorate_many, get_bundle, type_names, view
from .exceptions import FixedTypeError, LegacyModelWarning, RecordViewError
from .log import configure_logging

__version__ = "0.1.0"

__all__ = [
    "BUNDLE_KEY",
    "TYPE_NAMES_KEY",
    "Decorator",
    "FixedTypeError",
    "LegacyModelWarning",
    "MetadataBundle",
    "Record",
    "RecordViewError",
    "configure_logging",
    "decorate",
    "decorate_many",
    "field_names",
    "get_bundle",
    "is_open",
    "to_record",
    "type_names",
    "view",
]
