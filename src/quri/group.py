"""Expression groups.

An `ExpressionGroup` is an ordered list of nodes joined by one connective.
Each node is either a `Comparison` (a field compared against a value) or a
`SubGroup` wrapping another group, and rendering walks the tree into a single
QURI string.

Typical usage:

- Build: `ExpressionGroup().append_comparison("age", ">=", 21)`
- Nest: `group.append_group(ExpressionGroup("or").append_comparison(...))`
- Render: `group.render()` or `str(group)`
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Any, FrozenSet, Optional, Protocol, Tuple, Union, runtime_checkable

from pydantic import BaseModel, ConfigDict, ValidationError

from .constants import Connective
from .encoding import encode_value, quote_field
from .exceptions import CyclicGroupError, ExpressionError, InvalidOperatorError
from .logger import get_logger
from .operators import normalize_operator
from .settings import settings

__all__ = (
    "Renderable",
    "Comparison",
    "SubGroup",
    "Node",
    "ExpressionGroup",
)

logger = get_logger(__name__)

# Ids of the groups being rendered in the current thread or task
_ACTIVE_GROUPS: ContextVar[FrozenSet[int]] = ContextVar("quri_active_groups", default=frozenset())


@runtime_checkable
class Renderable(Protocol):
    """Anything that can render itself to a QURI fragment."""

    def render(self) -> str: ...


class Comparison(BaseModel):
    """Leaf node: `"<field_name>".<operator>(<value>)`."""

    model_config = ConfigDict(frozen=True)

    field_name: str
    operator: Optional[str]
    value: Any = None

    def render(self) -> str:
        # A missing operator renders as `null`, matching lenient mode
        operator = self.operator if self.operator is not None else "null"
        return f"{quote_field(self.field_name)}.{operator}({encode_value(self.value, self.field_name)})"


class SubGroup(BaseModel):
    """Reference to a nested group, always rendered in parentheses."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    group: Any

    def render(self) -> str:
        return f"({self.group.render()})"


Node = Union[Comparison, SubGroup]


class ExpressionGroup:
    """Ordered collection of comparisons and sub-groups under one connective.

    - `append_comparison` / `append_group` add nodes and return the group,
      so calls can be chained.
    - `render` joins the node fragments with `,` (AND) or `|` (OR).

    The connective is fixed at construction. Nodes are append-only.
    """

    def __init__(self, connective: Union[Connective, str] = Connective.AND, *, strict: Optional[bool] = None):
        """Initialize an empty group.

        - connective: `Connective.AND` (default), `Connective.OR`, or "and"/"or".
        - strict: whether unknown operators raise `InvalidOperatorError`.
          Defaults to `settings.QURI_STRICT_OPERATORS`.
        """
        self._connective = Connective.coerce(connective)
        self._strict = settings.QURI_STRICT_OPERATORS if strict is None else strict
        self._nodes: list[Node] = []

    @property
    def connective(self) -> Connective:
        return self._connective

    @property
    def nodes(self) -> Tuple[Node, ...]:
        return tuple(self._nodes)

    @property
    def strict(self) -> bool:
        return self._strict

    def __len__(self) -> int:
        return len(self._nodes)

    def __bool__(self) -> bool:
        return True

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"<ExpressionGroup {self._connective.value}: {len(self._nodes)} nodes>"

    # -------------------
    # Building
    # -------------------
    def append_comparison(self, field_name: str, operator: str, value: Any) -> "ExpressionGroup":
        """Append a comparison and return this group.

        Args:
            field_name: Field to compare, e.g. ``"customer_name"``
            operator: Any accepted spelling: ``==``, ``eq``, ``not_in``, ...
            value: Scalar, or a list/tuple for ``in``/``nin``/``between``

        Raises:
            InvalidOperatorError: If the operator is unknown and the group is strict

        Example:
            >>> ExpressionGroup().append_comparison("customer_name", "like", "Greg%").render()
            '"customer_name".like("Greg%")'
        """
        canonical = normalize_operator(operator)
        if canonical is None:
            if self._strict:
                raise InvalidOperatorError("Unknown operator", operator=operator, field=field_name)
            logger.warning("Unknown operator %r for field %r, rendering as null", operator, field_name)
        try:
            node = Comparison(field_name=field_name, operator=canonical, value=value)
        except ValidationError as exc:
            raise ExpressionError("Invalid comparison", field=field_name, reason=str(exc)) from exc
        self._nodes.append(node)
        return self

    append_expression = append_comparison

    def append_group(self, group: Renderable) -> "ExpressionGroup":
        """Append a nested group and return this group.

        The group is kept by reference, so later changes to it show up when
        this group renders.

        Raises:
            TypeError: If `group` has no `render()` method
            CyclicGroupError: If `group` is this group
        """
        if not isinstance(group, Renderable):
            raise TypeError(f"group must be an ExpressionGroup or provide render(), got {type(group).__name__}")
        if group is self:
            raise CyclicGroupError("Group cannot contain itself", connective=self._connective.value)
        self._nodes.append(SubGroup(group=group))
        return self

    append_criteria = append_group

    # -------------------
    # Rendering
    # -------------------
    def render(self) -> str:
        """Render this group and its descendants to a QURI string.

        Raises:
            CyclicGroupError: If the group is reached again while rendering
            EncodingError: If a value cannot be encoded
        """
        active = _ACTIVE_GROUPS.get()
        if id(self) in active:
            raise CyclicGroupError("Group contains itself", connective=self._connective.value)
        token = _ACTIVE_GROUPS.set(active | {id(self)})
        try:
            fragments = [node.render() for node in self._nodes]
        finally:
            _ACTIVE_GROUPS.reset(token)
        result = self._connective.separator.join(fragments)
        logger.debug("Rendered %s group with %d nodes: %s", self._connective.value, len(fragments), result)
        return result
