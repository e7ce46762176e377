"""Shared state and results for statement builders.

Builders own a :class:`StatementContext` holding the target database and table
together with the named parameters collected while the statement is assembled.
Calling ``build()`` on a builder snapshots the rendered text and a copy of those
parameters into a :class:`SafeQuery`.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

import sqlglot
from sqlglot import exp
from sqlglot.errors import ParseError, TokenError

from mysqlbuilder.exceptions import InvalidArgumentError, SQLParsingError
from mysqlbuilder.utils.logging import get_logger
from mysqlbuilder.utils.text import is_blank

__all__ = (
    "SafeQuery",
    "StatementContext",
    "require_identifier",
)

logger = get_logger("mysqlbuilder.builder")


def require_identifier(value: Optional[str], argument: str) -> str:
    """Return ``value`` unchanged, or fail when it is empty or whitespace.

    Raises:
        InvalidArgumentError: If ``value`` is blank.
    """
    if is_blank(value):
        raise InvalidArgumentError(argument)
    return value  # type: ignore[return-value]


@dataclass
class StatementContext:
    """Target and bound parameters of one statement."""

    database: str
    table: str
    parameters: "dict[str, Any]" = field(default_factory=dict)

    def __post_init__(self) -> None:
        require_identifier(self.database, "database")
        require_identifier(self.table, "table")

    @property
    def target(self) -> str:
        return f"{self.database}.{self.table}"

    def add_parameter(self, name: str, value: Any) -> str:
        """Bind ``value`` under ``name``, replacing any earlier binding.

        Returns:
            str: The parameter name.
        """
        self.parameters[name] = value
        return name


@dataclass
class SafeQuery:
    """A built SQL statement with its bound parameters."""

    sql: str
    parameters: "dict[str, Any]" = field(default_factory=dict)
    dialect: Optional[str] = "mysql"
    _expression: Optional[exp.Expression] = field(init=False, repr=False, compare=False, default=None)

    @property
    def expression(self) -> exp.Expression:
        """The statement parsed into a sqlglot syntax tree.

        Raises:
            SQLParsingError: If sqlglot cannot parse the statement.

        Returns:
            exp.Expression: The parsed statement.
        """
        if self._expression is None:
            try:
                parsed = sqlglot.parse_one(self.sql, read=self.dialect)
            except (ParseError, TokenError) as e:
                msg = f"Could not parse built statement as {self.dialect}: {e}"
                raise SQLParsingError(msg) from e
            self._expression = parsed
        return self._expression

    @property
    def is_valid(self) -> bool:
        """Check whether the statement parses in its dialect."""
        try:
            _ = self.expression
        except SQLParsingError:
            logger.debug("Built statement failed to parse", exc_info=True)
            return False
        return True
