"""
Helpers for array values returned by database drivers.
"""

from typing import Dict, List, TypeVar, Union

T = TypeVar('T')


def array_object_to_array(array_object: Dict[Union[str, int], T]) -> List[T]:
    """
    Convert an index-keyed array object to a list.

    Some drivers return Postgres arrays as objects keyed by the element
    index ({"0": "a", "1": "b"}). Keys are ordered by their numeric value,
    so "2" comes before "10".

    Args:
        array_object: Mapping of integer (or integer string) index to value

    Returns:
        Values in ascending index order
    """
    return [array_object[key] for key in sorted(array_object, key=int)]
