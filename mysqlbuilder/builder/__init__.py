"""Builders for MySQL statements with named parameter binding."""

from typing import Optional

from mysqlbuilder.builder._base import SafeQuery, StatementContext
from mysqlbuilder.builder._insert import InsertQuery
from mysqlbuilder.builder._register import FieldRegister
from mysqlbuilder.builder._values import RenderedValue, classify_value, parameter_name
from mysqlbuilder.config import BuilderConfig

__all__ = (
    "FieldRegister",
    "InsertQuery",
    "RenderedValue",
    "SafeQuery",
    "StatementContext",
    "classify_value",
    "insert",
    "parameter_name",
)


def insert(database: str, table: str, config: Optional[BuilderConfig] = None) -> InsertQuery:
    """Create an INSERT builder.

    Args:
        database: The database of the statement.
        table: The table of the statement.
        config: Optional builder settings. Defaults to the global configuration.

    Returns:
        InsertQuery: A new InsertQuery instance targeting ``database.table``.
    """
    return InsertQuery(database, table, config=config)
