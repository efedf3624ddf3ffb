import logging

from .cleaner import clean_object, clean_object_by_type
from .config import Settings, settings
from .errors import InvalidTypeError, MissingArgumentError, ObjectTypeError, UtilsError, is_error, unwrap
from .logging_config import configure_logging
from .text import capitalise_first, capitalize_first

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "clean_object",
    "clean_object_by_type",
    "capitalise_first",
    "capitalize_first",
    "UtilsError",
    "ObjectTypeError",
    "MissingArgumentError",
    "InvalidTypeError",
    "is_error",
    "unwrap",
    "Settings",
    "settings",
    "configure_logging",
]
