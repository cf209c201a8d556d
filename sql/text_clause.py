"""
=====================================
SQLAlchemy bridge for built fragments.
=====================================

The builders emit PostgreSQL positional placeholders ($1, $2, ...), while
SQLAlchemy's text() construct binds named parameters (:name). These helpers
rewrite an assembled statement so it can be run with
connection.execute(text_clause, params).

No engine or connection is created here.

Usage:
    from sqlalchemy import create_engine
    from sql import get_where_params, to_text_clause

    where = get_where_params({'age:gte': 18})
    clause, params = to_text_clause(
        f"SELECT * FROM users WHERE {where.where_segment}",
        where.where_params
    )
    with engine.connect() as conn:
        rows = conn.execute(clause, params).fetchall()
"""

import re
from typing import Any, Dict, Sequence, Tuple

from sqlalchemy import text
from sqlalchemy.sql.elements import TextClause

from core.logger import get_logger

logger = get_logger(__name__)

PLACEHOLDER_PATTERN = re.compile(r"\$(\d+)(::)?")
ESCAPED_CAST = r"\:\:"
PARAM_PREFIX = "p"


def _named_placeholder(match: "re.Match[str]") -> str:
    # text() skips a bind name followed by ":", so the cast must be escaped
    cast = ESCAPED_CAST if match.group(2) else ""
    return f":{PARAM_PREFIX}{match.group(1)}{cast}"


def to_named_params(
    statement: str,
    params: Sequence[Any]
) -> Tuple[str, Dict[str, Any]]:
    """
    Rewrite $n placeholders as :pn and key the parameters by name.

    Parameter counts are not checked against the placeholders: an IN list
    built by get_where_params reserves several placeholders for a single
    entry and is left for the execution layer to report.

    A "::" cast directly after a placeholder is escaped as "\\:\\:" so
    text() still sees the bind: "$1::int" becomes ":p1\\:\\:int", which
    compiles back to ":p1::int".

    Args:
        statement: SQL text using $n placeholders
        params: Positional values, params[0] binds $1

    Returns:
        Tuple of (rewritten SQL text, {"p1": params[0], ...})
    """
    converted = PLACEHOLDER_PATTERN.sub(_named_placeholder, statement)
    named = {f"{PARAM_PREFIX}{idx}": value for idx, value in enumerate(params, start=1)}
    logger.debug(f"Mapped {len(named)} positional parameter(s) to named binds")
    return converted, named


def to_text_clause(
    statement: str,
    params: Sequence[Any]
) -> Tuple[TextClause, Dict[str, Any]]:
    """
    Build a SQLAlchemy TextClause and its parameter dict.

    Args:
        statement: SQL text using $n placeholders
        params: Positional values

    Returns:
        Tuple of (TextClause, named parameters) for connection.execute()
    """
    converted, named = to_named_params(statement, params)
    return text(converted), named
