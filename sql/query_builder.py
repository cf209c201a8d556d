"""
================================
WHERE-clause fragment builder.
================================

Turns a mapping of conditions into a parameterized WHERE fragment using
PostgreSQL positional placeholders ($1, $2, ...).

Keys are camelCase column names, optionally suffixed with an operator
separated from the column by a colon:

    eq: = (default when no suffix is given)
    neq: <>
    lt: <
    lte: <=
    gt: >
    gte: >=
    like: LIKE
    notLike: NOT LIKE
    ilike: ILIKE
    notIlike: NOT ILIKE
    in: IN
    notIn: NOT IN
    isNull: IS NULL
    isNotNull: IS NOT NULL

Usage:
    from sql.query_builder import get_where_params

    where = get_where_params({'age:gte': 18, 'age:lt': 65})
    # where.where_segment == 'age >= $1\\nAND\\nage < $2'
    # where.where_params == [18, 65]

    query = f"SELECT * FROM users WHERE {where.where_segment}"

Known quirk:
    IN / NOT IN reserve one placeholder per list element but append the
    whole list as a single parameter, so the running count only advances
    by one. A condition following an IN list reuses the second placeholder
    number of that list. The driver is expected to expand the list.
"""

from typing import Any, Dict, List

from core.logger import get_logger
from sql.fragments import WhereFragment
from sql.operators import (
    DEFAULT_OPERATOR,
    LIST_OPERATORS,
    NULL_OPERATORS,
    InvalidOperatorError,
    resolve_operator,
)
from utils.case_conversion import camel_to_snake_case_string

logger = get_logger(__name__)

CONDITION_SEPARATOR = "\nAND\n"


def get_where_params(
    where_params: Dict[str, Any],
    params_offset: int = 0
) -> WhereFragment:
    """
    Convert a mapping of conditions to a WHERE fragment.

    Args:
        where_params: Conditions keyed by "column" or "column:operator",
            in the order they should appear
        params_offset: Number of parameters already bound by fragments that
            precede this one; the first placeholder is $params_offset+1

    Returns:
        WhereFragment with the conditions joined by AND (without the WHERE
        keyword) and the positional parameters. An empty mapping gives an
        empty segment.

    Raises:
        InvalidOperatorError: If a key carries an unknown operator token

    Example:
        >>> get_where_params({'deletedAt:isNull': None, 'status:in': 'a,b'}, params_offset=1)
        WhereFragment(where_segment='deleted_at IS NULL\\nAND\\nstatus IN ($2, $3)',
                      where_params=[['a', 'b']])
    """
    lines: List[str] = []
    params: List[Any] = []

    for key, value in where_params.items():
        field, has_operator, operator_token = key.partition(":")
        comparison_operator = DEFAULT_OPERATOR
        if has_operator:
            try:
                comparison_operator = resolve_operator(key, operator_token)
            except InvalidOperatorError:
                logger.error(f"Invalid comparison operator in WHERE key '{key}'")
                raise

        column = camel_to_snake_case_string(field)

        if comparison_operator in NULL_OPERATORS:
            lines.append(f"{column} {comparison_operator}")
        elif comparison_operator in LIST_OPERATORS:
            array_param = value.split(",")
            start = len(params) + params_offset + 1
            placeholders = ", ".join(
                f"${start + i}" for i in range(len(array_param))
            )
            lines.append(f"{column} {comparison_operator} ({placeholders})")
            params.append(array_param)
        else:
            params.append(value)
            lines.append(f"{column} {comparison_operator} ${len(params) + params_offset}")

    logger.debug(
        f"Built WHERE segment with {len(lines)} condition(s) and "
        f"{len(params)} parameter(s), offset {params_offset}"
    )

    return WhereFragment(
        where_segment=CONDITION_SEPARATOR.join(lines),
        where_params=params
    )
