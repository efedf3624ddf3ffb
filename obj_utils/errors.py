from typing import Any


class UtilsError(Exception):
    kind = "UtilsError"


class ObjectTypeError(UtilsError, TypeError):
    kind = "TypeError"


class MissingArgumentError(UtilsError, ValueError):
    kind = "MissingArgument"


class InvalidTypeError(UtilsError, TypeError):
    kind = "InvalidType"


def is_error(result: Any) -> bool:
    return isinstance(result, UtilsError)


def unwrap(result: Any) -> Any:
    """Return ``result`` unchanged, or raise it if it is an error value."""
    if isinstance(result, UtilsError):
        raise result
    return result
