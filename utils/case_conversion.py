"""
=========================================
camelCase <-> snake_case conversion.
=========================================

Bridges application-side naming (camelCase keys) and SQL column naming
(snake_case). The string converters are purely textual: they only look at
ASCII letters and underscores and know nothing about word boundaries.

Functions:
- camel_to_snake_case_string: "firstName" -> "first_name"
- snake_to_camel_case_string: "first_name" -> "firstName"
- camel_to_snake_case_keys: convert the keys of a mapping, recursively
- snake_to_camel_case_keys: convert the keys of a mapping, recursively

Limitations:
    The key converters recurse into nested mappings only. Lists and tuples
    are copied by reference and the mappings inside them keep their
    original keys. Date and time values are opaque leaves.

Usage:
    from utils.case_conversion import snake_to_camel_case_keys

    row = {'user_id': 1, 'created_at': datetime(2024, 1, 1)}
    snake_to_camel_case_keys(row)
    # {'userId': 1, 'createdAt': datetime(2024, 1, 1)}
"""

import re
from collections.abc import Mapping
from datetime import date, time
from typing import Any, Callable, Dict

from core.logger import get_logger

logger = get_logger(__name__)

_UPPERCASE_PATTERN = re.compile(r'[A-Z]')
_UNDERSCORE_LOWER_PATTERN = re.compile(r'_[a-z]')


def camel_to_snake_case_string(s: str) -> str:
    """
    Convert a camelCase string to snake_case.

    Every uppercase letter is replaced by an underscore followed by its
    lowercase form, so "HTTPCode" becomes "_h_t_t_p_code".

    Args:
        s: String to convert

    Returns:
        snake_case string
    """
    return _UPPERCASE_PATTERN.sub(lambda match: f"_{match.group(0).lower()}", s)


def snake_to_camel_case_string(s: str) -> str:
    """
    Convert a snake_case string to camelCase.

    Only an underscore directly followed by a lowercase letter is collapsed;
    "_1", "__" and "_A" are left untouched.

    Args:
        s: String to convert

    Returns:
        camelCase string
    """
    return _UNDERSCORE_LOWER_PATTERN.sub(lambda match: match.group(0)[1].upper(), s)


def _convert_keys(obj: Mapping, convert: Callable[[str], str]) -> Dict[str, Any]:
    converted = {}
    for key, value in obj.items():
        converted_key = convert(key)
        # date, datetime and time are opaque leaves
        if isinstance(value, (date, time)):
            converted[converted_key] = value
        elif isinstance(value, Mapping):
            converted[converted_key] = _convert_keys(value, convert)
        else:
            # scalars, None and sequences (not recursed into)
            converted[converted_key] = value
    return converted


def camel_to_snake_case_keys(obj: Mapping) -> Dict[str, Any]:
    """
    Convert a mapping with camelCase keys to snake_case keys.

    Works recursively on nested mappings but not on lists.

    Args:
        obj: Mapping to convert

    Returns:
        New dict with converted keys and the same values
    """
    converted = _convert_keys(obj, camel_to_snake_case_string)
    logger.debug(f"Converted {len(converted)} top-level key(s) to snake_case")
    return converted


def snake_to_camel_case_keys(obj: Mapping) -> Dict[str, Any]:
    """
    Convert a mapping with snake_case keys to camelCase keys.

    Works recursively on nested mappings but not on lists.

    Args:
        obj: Mapping to convert

    Returns:
        New dict with converted keys and the same values
    """
    converted = _convert_keys(obj, snake_to_camel_case_string)
    logger.debug(f"Converted {len(converted)} top-level key(s) to camelCase")
    return converted
