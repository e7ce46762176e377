"""Rendering of Python values into INSERT value expressions.

A value either becomes a literal written straight into the statement text or a
named placeholder whose value travels separately in the parameter map.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional

from mysqlbuilder.typing import DBNull
from mysqlbuilder.utils.text import parameter_stem

__all__ = (
    "NULL_LITERAL",
    "RenderedValue",
    "classify_value",
    "is_numeric",
    "parameter_name",
    "render_bool",
)

NULL_LITERAL = "NULL"
NUMERIC_TYPES = (int, float, Decimal)


@dataclass(frozen=True)
class RenderedValue:
    """SQL text for one value, plus the parameter to bind when it is a placeholder."""

    sql: str
    parameter: Optional[str] = None
    value: Any = None

    @property
    def is_parameter(self) -> bool:
        return self.parameter is not None


def is_numeric(value: Any) -> bool:
    """Check whether ``value`` is inlined as a quoted numeric literal.

    ``bool`` is an ``int`` subclass and is excluded here; booleans render as
    ``1``/``0`` instead.
    """
    return isinstance(value, NUMERIC_TYPES) and not isinstance(value, bool)


def render_bool(value: bool) -> str:
    """Render a boolean as the MySQL numeric literal ``1`` or ``0``."""
    return "1" if value else "0"


def parameter_name(field: str, prefix: str) -> str:
    """Build the placeholder name for ``field``, e.g. ``@user_Name``."""
    return f"{prefix}{parameter_stem(field)}"


def classify_value(field: str, value: Any, prefix: str) -> RenderedValue:
    """Decide how ``value`` of ``field`` is written into the statement.

    Args:
        field: The column the value belongs to. Only used to name a placeholder.
        value: The value to render.
        prefix: Placeholder prefix of the clause being built.

    Returns:
        RenderedValue: ``NULL`` for ``None``/``DBNull``, ``1``/``0`` for booleans,
        the quoted string form for numbers, otherwise a named placeholder.
    """
    if value is None or value is DBNull:
        return RenderedValue(NULL_LITERAL)
    if isinstance(value, bool):
        return RenderedValue(render_bool(value))
    if is_numeric(value):
        return RenderedValue(f"'{value}'")
    name = parameter_name(field, prefix)
    return RenderedValue(name, parameter=name, value=value)
