from typing import Any, Optional

__all__ = (
    "ImproperConfigurationError",
    "InvalidArgumentError",
    "MySQLBuilderError",
    "SQLBuilderError",
    "SQLParsingError",
)


class MySQLBuilderError(Exception):
    """Base exception class from which all mysqlbuilder exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``MySQLBuilderError``.

        Args:
            *args: args are converted to :class:`str` before passing to :class:`Exception`
            detail: detail of the exception.
        """
        str_args = [str(arg) for arg in args if arg]
        if not detail:
            if str_args:
                detail, *str_args = str_args
            elif hasattr(self, "detail"):
                detail = self.detail
        self.detail = detail
        super().__init__(*str_args)

    def __repr__(self) -> str:
        if self.detail:
            return f"{self.__class__.__name__} - {self.detail}"
        return self.__class__.__name__

    def __str__(self) -> str:
        return " ".join((*self.args, self.detail)).strip()


class SQLBuilderError(MySQLBuilderError):
    """Issues Building or Generating SQL statements."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "Issues building SQL statement."
        super().__init__(message)


class InvalidArgumentError(SQLBuilderError, ValueError):
    """An identifier handed to a builder was empty or whitespace only."""

    argument: str

    def __init__(self, argument: str, message: Optional[str] = None) -> None:
        if message is None:
            message = f"{argument.capitalize()} argument should not be empty."
        super().__init__(message)
        self.argument = argument


class SQLParsingError(MySQLBuilderError):
    """Issues parsing SQL statements."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "Issues parsing SQL statement."
        super().__init__(message)


class ImproperConfigurationError(MySQLBuilderError):
    """Improper Configuration error.

    Raised when a builder configuration fails validation.
    """
