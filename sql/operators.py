"""
Comparison operators accepted in WHERE keys.

A WHERE key is either a plain column name (equality) or a column name
suffixed with an operator token: ``"age:gte"``, ``"deletedAt:isNull"``.
"""

from types import MappingProxyType

DEFAULT_OPERATOR = "="

COMPARISON_OPERATORS = MappingProxyType({
    'eq': '=',
    'neq': '<>',
    'lt': '<',
    'lte': '<=',
    'gt': '>',
    'gte': '>=',
    'like': 'LIKE',
    'notLike': 'NOT LIKE',
    'ilike': 'ILIKE',
    'notIlike': 'NOT ILIKE',
    'in': 'IN',
    'notIn': 'NOT IN',
    'isNull': 'IS NULL',
    'isNotNull': 'IS NOT NULL',
})

# Operators that take no parameter
NULL_OPERATORS = frozenset({'IS NULL', 'IS NOT NULL'})

# Operators that take a comma-separated list
LIST_OPERATORS = frozenset({'IN', 'NOT IN'})


class InvalidOperatorError(ValueError):
    """Exception raised when a WHERE key carries an unknown operator token.

    Attributes:
        key: The full WHERE key, e.g. "age:between"
        operator_token: The part after the first colon
    """

    def __init__(self, key: str, operator_token: str):
        self.key = key
        self.operator_token = operator_token
        super().__init__(
            f"Invalid comparison operator '{operator_token}' in key '{key}'"
        )


def resolve_operator(key: str, operator_token: str) -> str:
    """
    Look up the SQL text for an operator token.

    Args:
        key: Full WHERE key, used in the error message
        operator_token: Token after the colon

    Returns:
        SQL operator text

    Raises:
        InvalidOperatorError: If the token is not in COMPARISON_OPERATORS
    """
    operator = COMPARISON_OPERATORS.get(operator_token)
    if operator is None:
        raise InvalidOperatorError(key, operator_token)
    return operator
