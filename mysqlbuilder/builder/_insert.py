"""INSERT ... ON DUPLICATE KEY UPDATE statement builder.

Values are rendered as they are registered: ``None``/``DBNull`` become ``NULL``,
booleans become ``1``/``0``, numbers are inlined as quoted literals and anything
else is bound to a named placeholder derived from the column name.
"""

from typing import Any, Optional

from mysqlbuilder.builder._base import SafeQuery, StatementContext, require_identifier
from mysqlbuilder.builder._register import FieldRegister
from mysqlbuilder.builder._values import classify_value
from mysqlbuilder.config import BuilderConfig, get_global_config
from mysqlbuilder.utils.logging import get_logger

__all__ = ("InsertQuery",)

logger = get_logger("mysqlbuilder.builder.insert")


class InsertQuery:
    """Builder for a single MySQL ``INSERT`` statement, optionally an upsert.

    Example:
        >>> query = InsertQuery("mydb", "users").set_insert("id", 5).set_insert("userName", "alice", True)
        >>> print(query)
        INSERT INTO mydb.users (id, userName) VALUES ('5', @user_Name)
        ON DUPLICATE KEY UPDATE userName = @update_user_Name
        >>> query.parameters
        {'@user_Name': 'alice', '@update_user_Name': 'alice'}
    """

    __slots__ = ("_config", "_context", "_inserts", "_updates")

    def __init__(self, database: str, table: str, config: Optional[BuilderConfig] = None) -> None:
        """Initialize the builder for ``database.table``.

        Args:
            database: The database of the statement.
            table: The table of the statement.
            config: Builder settings. Defaults to the global configuration.

        Raises:
            InvalidArgumentError: If ``database`` or ``table`` is empty or whitespace.
        """
        self._context = StatementContext(database, table)
        self._config = config if config is not None else get_global_config()
        self._inserts = FieldRegister()
        self._updates = FieldRegister()
        logger.debug("Created INSERT builder for %s", self._context.target)

    @property
    def database(self) -> str:
        return self._context.database

    @property
    def table(self) -> str:
        return self._context.table

    @property
    def config(self) -> BuilderConfig:
        return self._config

    @property
    def parameters(self) -> "dict[str, Any]":
        """A copy of the named parameters collected so far, keyed by placeholder."""
        return dict(self._context.parameters)

    @property
    def insert_fields(self) -> "tuple[str, ...]":
        return self._inserts.fields()

    @property
    def update_fields(self) -> "tuple[str, ...]":
        return self._updates.fields()

    def set_insert_if(self, condition: bool, field: str, value: Any, update: bool = False) -> "InsertQuery":
        """Add a pair of field and value for the INSERT clause when ``condition`` holds.

        Args:
            condition: Nothing happens, not even validation, when this is false.
            field: The column to insert into.
            value: The value of the column.
            update: Also update the column with ``value`` if a duplicate key exists.

        Raises:
            InvalidArgumentError: If ``field`` is empty or whitespace.

        Returns:
            InsertQuery: The current builder instance for method chaining.
        """
        if not condition:
            logger.debug("Skipped INSERT field %r on %s: condition is false", field, self._context.target)
            return self
        require_identifier(field, "field")
        self._register(self._inserts, field, value, self._config.insert_parameter_prefix)
        if update:
            self.set_update(field, value)
        return self

    def set_insert(self, field: str, value: Any, update: bool = False) -> "InsertQuery":
        """Add a pair of field and value for the INSERT clause.

        Returns:
            InsertQuery: The current builder instance for method chaining.
        """
        return self.set_insert_if(True, field, value, update)

    def set_update_if(self, condition: bool, field: str, value: Any) -> "InsertQuery":
        """Add a pair of field and value for ON DUPLICATE KEY UPDATE when ``condition`` holds.

        Args:
            condition: Nothing happens, not even validation, when this is false.
            field: The column to update.
            value: The new value of the column.

        Raises:
            InvalidArgumentError: If ``field`` is empty or whitespace.

        Returns:
            InsertQuery: The current builder instance for method chaining.
        """
        if not condition:
            logger.debug("Skipped UPDATE field %r on %s: condition is false", field, self._context.target)
            return self
        require_identifier(field, "field")
        self._register(self._updates, field, value, self._config.update_parameter_prefix)
        return self

    def set_update(self, field: str, value: Any) -> "InsertQuery":
        """Add a pair of field and value for ON DUPLICATE KEY UPDATE.

        Returns:
            InsertQuery: The current builder instance for method chaining.
        """
        return self.set_update_if(True, field, value)

    def to_sql(self) -> str:
        """Render the statement text.

        Without INSERT fields the column and value lists are empty, which MySQL
        accepts as a row of column defaults.

        Returns:
            str: The statement, with the ON DUPLICATE KEY UPDATE clause on a second line
            when update fields exist.
        """
        sql = (
            f"INSERT INTO {self._context.target}"
            f" ({', '.join(self._inserts.fields())})"
            f" VALUES ({', '.join(self._inserts.expressions())})"
        )
        if self._updates:
            assignments = ", ".join(f"{field} = {expression}" for field, expression in self._updates.items())
            sql += f"\nON DUPLICATE KEY UPDATE {assignments}"
        return sql

    def build(self) -> SafeQuery:
        """Build the statement together with a snapshot of its parameters.

        Returns:
            SafeQuery: The statement text and parameters.
        """
        sql = self.to_sql()
        if self._config.log_statements:
            logger.debug("Built statement: %s (parameters: %s)", sql, ", ".join(self._context.parameters))
        return SafeQuery(sql=sql, parameters=self.parameters, dialect=self._config.dialect)

    def _register(self, register: FieldRegister, field: str, value: Any, prefix: str) -> None:
        rendered = classify_value(field, value, prefix)
        if rendered.is_parameter:
            self._context.add_parameter(rendered.sql, rendered.value)
        replaced = register.set(field, rendered.sql)
        logger.debug(
            "%s %s field %r on %s as %s",
            "Replaced" if replaced else "Registered",
            "UPDATE" if register is self._updates else "INSERT",
            field,
            self._context.target,
            "parameter" if rendered.is_parameter else "literal",
        )

    def __str__(self) -> str:
        return self.to_sql()

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(database={self.database!r}, table={self.table!r}, "
            f"inserts={self._inserts!r}, updates={self._updates!r})"
        )
