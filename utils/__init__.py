"""
==========================
Utility Functions Package.
==========================

Naming and data-shape helpers shared by the SQL fragment builders and
their callers.

Modules:
    case_conversion: camelCase <-> snake_case for strings and mapping keys
    array_utils: Index-keyed array objects to lists
"""

__version__ = "0.1.0"
__all__ = [
    'camel_to_snake_case_string',
    'snake_to_camel_case_string',
    'camel_to_snake_case_keys',
    'snake_to_camel_case_keys',
    'array_object_to_array'
]

from .array_utils import array_object_to_array
from .case_conversion import (
    camel_to_snake_case_keys,
    camel_to_snake_case_string,
    snake_to_camel_case_keys,
    snake_to_camel_case_string,
)
