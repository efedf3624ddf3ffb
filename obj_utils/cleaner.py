import logging
from typing import Any, Callable, Dict, List, Optional, Set

from .config import settings
from .errors import InvalidTypeError, MissingArgumentError, ObjectTypeError, UtilsError
from .values import MISSING, is_container, is_mapping, matches_type

logger = logging.getLogger(__name__)

Predicate = Callable[[Any], bool]

_MULTI_VALUE_TYPES = (list, tuple, set, frozenset)


def _same_value(value: Any, target: Any) -> bool:
    # Containers compare by identity and bools never equal numbers.
    if value is target:
        return True
    if isinstance(value, bool) or isinstance(target, bool):
        return False
    if isinstance(value, (dict, list, set)) or isinstance(target, (dict, list, set)):
        return False
    return bool(value == target)


def _value_predicate(cleaner: Any, is_array: bool) -> Predicate:
    if isinstance(cleaner, _MULTI_VALUE_TYPES) and not is_array:
        candidates = list(cleaner)
        return lambda value: any(_same_value(value, c) for c in candidates)
    return lambda value: _same_value(value, cleaner)


def _walk(container: Any, predicate: Predicate, recursive: bool, clean_empty: bool, seen: Set[int]) -> int:
    seen.add(id(container))
    removed = 0

    if is_mapping(container):
        for key in list(container.keys()):
            value = container[key]
            if predicate(value):
                del container[key]
                removed += 1
                continue
            if recursive and is_container(value):
                if id(value) not in seen:
                    removed += _walk(value, predicate, recursive, clean_empty, seen)
                if clean_empty and len(value) == 0:
                    del container[key]
                    removed += 1
        return removed

    kept: List[Any] = []
    for value in container:
        if predicate(value):
            removed += 1
            continue
        if recursive and is_container(value):
            # Shared containers are walked once but pruned wherever they appear
            if id(value) not in seen:
                removed += _walk(value, predicate, recursive, clean_empty, seen)
            if clean_empty and len(value) == 0:
                removed += 1
                continue
        kept.append(value)
    if removed:
        container[:] = kept
    return removed


def _resolve_flags(recursive: Optional[bool], clean_empty: Optional[bool]) -> Dict[str, bool]:
    return {
        "recursive": settings.default_recursive if recursive is None else bool(recursive),
        "clean_empty": settings.default_clean_empty if clean_empty is None else bool(clean_empty),
    }


def _fail(error: UtilsError) -> UtilsError:
    logger.debug("returning %s: %s", error.kind, error)
    return error


def clean_object(
    obj: Any,
    cleaner: Any = MISSING,
    is_array: bool = False,
    recursive: Optional[bool] = True,
    clean_empty: Optional[bool] = False,
) -> Any:
    """Remove every entry of ``obj`` whose value equals ``cleaner``.

    A list, tuple or set ``cleaner`` removes values equal to any of its
    members, unless ``is_array`` is set, in which case the container itself
    is the value to remove. ``None`` is a valid cleaner. Nested dicts and
    lists are cleaned too when ``recursive`` is set, and with
    ``clean_empty`` the ones left empty are removed from their parent.

    ``obj`` is mutated and returned. Bad arguments are returned as
    :class:`~obj_utils.errors.UtilsError` values instead of being raised.
    """
    if not is_container(obj):
        return _fail(ObjectTypeError(f'Type of object is not "object": {type(obj).__name__}'))
    if cleaner is MISSING:
        return _fail(MissingArgumentError("Cleaner not provided"))

    flags = _resolve_flags(recursive, clean_empty)
    removed = _walk(obj, _value_predicate(cleaner, is_array), seen=set(), **flags)
    logger.debug("clean_object removed %d entries", removed)
    return obj


def clean_object_by_type(
    obj: Any,
    cleaner: Any = MISSING,
    recursive: Optional[bool] = True,
    clean_empty: Optional[bool] = False,
) -> Any:
    """Remove every entry of ``obj`` whose value is of the named type.

    Type names are matched case-insensitively against the tags "undefined",
    "boolean", "number", "string", "object" and "function", or against the
    value's Python class name. ``None`` is "undefined" only, so cleaning
    "object" keeps it.
    """
    if not is_container(obj):
        return _fail(ObjectTypeError(f'Type of object is not "object": {type(obj).__name__}'))
    if cleaner is MISSING or cleaner is None or cleaner == "":
        return _fail(MissingArgumentError("Cleaner not provided"))
    if not isinstance(cleaner, str):
        return _fail(InvalidTypeError(f'Type of cleaner is not "string": {type(cleaner).__name__}'))

    flags = _resolve_flags(recursive, clean_empty)
    removed = _walk(obj, lambda value: matches_type(value, cleaner), seen=set(), **flags)
    logger.debug("clean_object_by_type(%r) removed %d entries", cleaner, removed)
    return obj
