import logging
import re
from functools import lru_cache
from typing import Any

from .config import settings
from .errors import MissingArgumentError, ObjectTypeError
from .values import MISSING

logger = logging.getLogger(__name__)


@lru_cache(maxsize=8)
def _after_punct_pattern(endings: str) -> re.Pattern:
    return re.compile(f"([{re.escape(endings)}]\\s+)([a-z])")


def capitalise_first(string: Any = MISSING, lowercase: bool = False, capitalise_after_punct: bool = False) -> Any:
    """Capitalise the first letter of ``string``.

    With ``lowercase`` the rest of the string is lower-cased first. With
    ``capitalise_after_punct`` every letter that starts a new sentence, i.e.
    follows an ending mark and whitespace, is capitalised as well::

        >>> capitalise_first("this is good! the end.", True, True)
        'This is good! The end.'

    Returns a new string, or an error value for a missing or non-string
    argument.
    """
    if string is MISSING or string is None or (isinstance(string, str) and not string):
        logger.debug("capitalise_first called without a string")
        return MissingArgumentError("String not provided")
    if not isinstance(string, str):
        logger.debug("capitalise_first called with %s", type(string).__name__)
        return ObjectTypeError(f'Type of string is not "string": {type(string).__name__}')

    if lowercase:
        string = string.lower()
    if capitalise_after_punct:
        pattern = _after_punct_pattern(settings.sentence_endings)
        string = pattern.sub(lambda m: m.group(1) + m.group(2).upper(), string)
    return string[0].upper() + string[1:]


capitalize_first = capitalise_first
