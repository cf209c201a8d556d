"""
Result types returned by the fragment builders.

Fragments are frozen dataclasses and unpack in field order:

    >>> segment, params = get_where_params({'age:gte': 18})
"""

from dataclasses import dataclass, field, fields
from typing import Any, Iterator, List


@dataclass(frozen=True)
class Fragment:
    """Base class for builder results."""

    def __iter__(self) -> Iterator[Any]:
        return iter(getattr(self, f.name) for f in fields(self))


@dataclass(frozen=True)
class WhereFragment(Fragment):
    """WHERE conditions without the WHERE keyword.

    Attributes:
        where_segment: Conditions joined with "\\nAND\\n"
        where_params: Positional parameter values
    """

    where_segment: str = ""
    where_params: List[Any] = field(default_factory=list)


@dataclass(frozen=True)
class InsertFragment(Fragment):
    """Column list and VALUES placeholders for an INSERT.

    Attributes:
        columns_segment: "first_name, age"
        params_segment: "$1, $2"
        values: Positional parameter values
    """

    columns_segment: str = ""
    params_segment: str = ""
    values: List[Any] = field(default_factory=list)


@dataclass(frozen=True)
class SetFragment(Fragment):
    """Assignments for an UPDATE ... SET.

    Attributes:
        sql_segment: "first_name=$1, age=$2"
        values: Positional parameter values
    """

    sql_segment: str = ""
    values: List[Any] = field(default_factory=list)
