"""Operator normalization.

Callers may spell comparison operators the way they would in code (``==``,
``>=``, ``not_in``); QURI only understands its own short names. This module
holds the alias table and the lookup that maps one onto the other.
"""

from typing import Any, Dict, FrozenSet, Optional

__all__ = (
    "OPERATOR_ALIASES",
    "CANONICAL_OPERATORS",
    "SET_OPERATORS",
    "normalize_operator",
)

# Accepted token -> canonical QURI token (case-sensitive)
OPERATOR_ALIASES: Dict[str, str] = {
    "=": "eq",
    "==": "eq",
    "eq": "eq",
    "!=": "neq",
    "neq": "neq",
    ">": "gt",
    "gt": "gt",
    ">=": "gte",
    "gte": "gte",
    "<": "lt",
    "lt": "lt",
    "<=": "lte",
    "lte": "lte",
    "in": "in",
    "not_in": "nin",
    "nin": "nin",
    "like": "like",
    "between": "between",
}

CANONICAL_OPERATORS: FrozenSet[str] = frozenset(OPERATOR_ALIASES.values())

# Operators that naturally take a list of values. Not enforced.
SET_OPERATORS: FrozenSet[str] = frozenset({"in", "nin", "between"})


def normalize_operator(token: Any) -> Optional[str]:
    """Return the canonical QURI spelling of an operator token.

    Args:
        token: User supplied operator, e.g. ``"=="`` or ``"not_in"``

    Returns:
        The canonical token (``"eq"``, ``"nin"``, ...) or ``None`` when the
        token is not recognized. Never raises.

    Example:
        >>> normalize_operator("==")
        'eq'
    """
    if not isinstance(token, str):
        return None
    return OPERATOR_ALIASES.get(token)
