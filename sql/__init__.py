"""
=============================================
SQL fragment package for parameterized SQL.
=============================================

This package builds SQL text fragments and positional parameter lists
from plain mappings. It is not a query builder or ORM: callers assemble the
full statement and execute it with their own client.

The package follows a clear organization:
    - operators.py: Comparison operator table and InvalidOperatorError
    - fragments.py: Frozen result types returned by the builders
    - query_builder.py: WHERE fragments (get_where_params)
    - dml.py: INSERT and SET fragments
    - tag.py: Passthrough tag for inline SQL literals
    - text_clause.py: Bridge to SQLAlchemy text() named binds

Example:
    >>> from sql import get_where_params, get_params_for_set
    >>>
    >>> update = get_params_for_set({'lastName': 'Doe'})
    >>> where = get_where_params({'id': 7}, params_offset=len(update.values))
    >>> query = f"UPDATE users SET {update.sql_segment} WHERE {where.where_segment}"
    >>> params = update.values + where.where_params
"""

__version__ = "0.1.0"
__all__ = [
    # Operators
    'COMPARISON_OPERATORS', 'InvalidOperatorError',
    # Fragments
    'WhereFragment', 'InsertFragment', 'SetFragment',
    # Builders
    'get_where_params', 'get_params_for_insert', 'get_params_for_set',
    # Tag and SQLAlchemy bridge
    'sql', 'to_named_params', 'to_text_clause'
]

from .dml import get_params_for_insert, get_params_for_set
from .fragments import InsertFragment, SetFragment, WhereFragment
from .operators import COMPARISON_OPERATORS, InvalidOperatorError
from .query_builder import get_where_params
from .tag import sql
from .text_clause import to_named_params, to_text_clause
