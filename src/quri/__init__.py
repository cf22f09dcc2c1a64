"""
QURI expression builder.

Exposes `ExpressionGroup` for composing field comparisons into AND/OR groups
and rendering them to a compact QURI filter string.
"""

from .constants import Connective
from .exceptions import (
    CyclicGroupError,
    EncodingError,
    ExpressionError,
    InvalidConnectiveError,
    InvalidOperatorError,
    QuriError,
    RenderError,
)
from .group import Comparison, ExpressionGroup, Renderable, SubGroup
from .operators import normalize_operator

__version__ = "0.1.0"

__all__ = [
    "ExpressionGroup",
    "Comparison",
    "SubGroup",
    "Renderable",
    "Connective",
    "normalize_operator",
    "QuriError",
    "ExpressionError",
    "InvalidOperatorError",
    "InvalidConnectiveError",
    "RenderError",
    "EncodingError",
    "CyclicGroupError",
]
