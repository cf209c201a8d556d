"""
Passthrough tag for inline SQL literals.

``sql`` exists so editors and linters can recognise embedded SQL and
highlight it. It concatenates its input unchanged: it does NOT escape or
quote anything and gives no protection against injection. Bind values
through placeholders instead.

    >>> sql("SELECT * FROM users WHERE id = $1")
    'SELECT * FROM users WHERE id = $1'
    >>> sql(["SELECT * FROM ", " WHERE id = $1"], "users")
    'SELECT * FROM users WHERE id = $1'
"""

from typing import Any, Sequence, Union


def sql(strings: Union[str, Sequence[str]], *values: Any) -> str:
    """
    Join literal segments and interpolated values as raw text.

    Args:
        strings: A single literal, or the literal segments around the values
        *values: Values placed between consecutive segments

    Returns:
        The concatenated text
    """
    if isinstance(strings, str):
        strings = [strings]

    parts = []
    for idx, segment in enumerate(strings):
        parts.append(segment)
        if idx < len(values) and idx < len(strings) - 1:
            parts.append(str(values[idx]))
    return "".join(parts)
