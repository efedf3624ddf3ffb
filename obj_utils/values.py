"""Tagged checks over the values found inside an object tree.

Every value is either a mutable container the cleaners may walk into
(a mapping or a list) or a scalar left untouched.
"""
import numbers
from collections.abc import MutableMapping, MutableSequence
from typing import Any

# Marks an argument the caller did not pass, so that ``None`` stays usable.
MISSING: Any = object()


def is_mapping(value: Any) -> bool:
    return isinstance(value, MutableMapping)


def is_sequence(value: Any) -> bool:
    return isinstance(value, MutableSequence) and not isinstance(value, (str, bytes, bytearray))


def is_container(value: Any) -> bool:
    return is_mapping(value) or is_sequence(value)


def type_tag(value: Any) -> str:
    if value is None:
        return "undefined"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, numbers.Number):
        return "number"
    if isinstance(value, str):
        return "string"
    if callable(value):
        return "function"
    return "object"


def matches_type(value: Any, type_name: str) -> bool:
    name = type_name.lower()
    return name == type_tag(value) or name == type(value).__name__.lower()
