from collections.abc import Iterator
from typing import Optional

__all__ = ("FieldRegister",)


class FieldRegister:
    """Ordered column -> SQL expression mapping.

    Columns keep the position of their first registration. Registering an
    existing column again replaces its expression in place.
    """

    __slots__ = ("_entries", "_index")

    def __init__(self) -> None:
        self._entries: list[tuple[str, str]] = []
        self._index: dict[str, int] = {}

    def set(self, field: str, expression: str) -> bool:
        """Store ``expression`` for ``field``.

        Returns:
            bool: True when ``field`` was already registered and got overwritten.
        """
        position = self._index.get(field)
        if position is None:
            self._index[field] = len(self._entries)
            self._entries.append((field, expression))
            return False
        self._entries[position] = (field, expression)
        return True

    def get(self, field: str) -> Optional[str]:
        position = self._index.get(field)
        return None if position is None else self._entries[position][1]

    def fields(self) -> "tuple[str, ...]":
        return tuple(field for field, _ in self._entries)

    def expressions(self) -> "tuple[str, ...]":
        return tuple(expression for _, expression in self._entries)

    def items(self) -> "tuple[tuple[str, str], ...]":
        return tuple(self._entries)

    def __contains__(self, field: object) -> bool:
        return field in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields())

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __repr__(self) -> str:
        pairs = ", ".join(f"{field}={expression}" for field, expression in self._entries)
        return f"{self.__class__.__name__}({pairs})"
