from enum import Enum
from typing import Any, Final, Literal

from typing_extensions import TypeAlias

__all__ = ("DBNull", "DBNullType", "StatementParameters")


class _DBNullEnum(Enum):
    """A sentinel enum standing in for the database NULL value."""

    DB_NULL = 0

    def __repr__(self) -> str:
        return "DBNull"


DBNullType: TypeAlias = Literal[_DBNullEnum.DB_NULL]
DBNull: Final = _DBNullEnum.DB_NULL

StatementParameters: TypeAlias = dict[str, Any]
