"""
===========================================
Data Manipulation Language (DML) fragments.
===========================================

Builds the column/placeholder pieces of INSERT and UPDATE statements from
a mapping of camelCase column names to values. Placeholders always start
at $1; build the DML fragment first and offset any WHERE fragment by the
number of values it binds.

Functions:
- get_params_for_insert: column list, VALUES placeholders and values
- get_params_for_set: SET assignments and values

Usage:
    from sql.dml import get_params_for_insert, get_params_for_set
    from sql.query_builder import get_where_params

    insert = get_params_for_insert({'firstName': 'Jo', 'age': 5})
    query = (
        f"INSERT INTO users ({insert.columns_segment}) "
        f"VALUES ({insert.params_segment})"
    )
    # execute(query, insert.values)

    update = get_params_for_set({'age': 6})
    where = get_where_params(
        {'id': 42}, params_offset=len(update.values)
    )
    query = f"UPDATE users SET {update.sql_segment} WHERE {where.where_segment}"
    # execute(query, update.values + where.where_params)
"""

from typing import Any, Dict, List

from core.logger import get_logger
from sql.fragments import InsertFragment, SetFragment
from utils.case_conversion import camel_to_snake_case_string

logger = get_logger(__name__)


def get_params_for_insert(insert_params: Dict[str, Any]) -> InsertFragment:
    """
    Convert a mapping to the components used to insert a new row.

    Args:
        insert_params: Columns and values to insert, in column order

    Returns:
        InsertFragment with:
        - columns_segment: snake_case column names joined by ", "
        - params_segment: $1..$n joined by ", "
        - values: values in the same order
    """
    columns: List[str] = []
    placeholders: List[str] = []
    values: List[Any] = []

    for idx, (column, value) in enumerate(insert_params.items(), start=1):
        columns.append(camel_to_snake_case_string(column))
        placeholders.append(f"${idx}")
        values.append(value)

    logger.debug(f"Built INSERT segments for {len(columns)} column(s)")

    return InsertFragment(
        columns_segment=", ".join(columns),
        params_segment=", ".join(placeholders),
        values=values
    )


def get_params_for_set(set_params: Dict[str, Any]) -> SetFragment:
    """
    Convert a mapping to the components used to update a row.

    Args:
        set_params: Columns and new values

    Returns:
        SetFragment with:
        - sql_segment: "column=$i" assignments joined by ", "
        - values: values in the same order
    """
    assignments: List[str] = []
    values: List[Any] = []

    for idx, (column, value) in enumerate(set_params.items(), start=1):
        assignments.append(f"{camel_to_snake_case_string(column)}=${idx}")
        values.append(value)

    logger.debug(f"Built SET segment for {len(assignments)} column(s)")

    return SetFragment(sql_segment=", ".join(assignments), values=values)
