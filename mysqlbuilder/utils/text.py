"""Text helpers for turning column names into placeholder names."""

import unicodedata
from functools import lru_cache
from typing import Optional

__all__ = (
    "is_blank",
    "is_word_char",
    "parameter_stem",
)


def is_blank(value: Optional[str]) -> bool:
    """Return True for ``None``, empty and whitespace-only strings."""
    return value is None or not str(value).strip()


# letters, non-spacing marks, decimal digits and connector punctuation
_WORD_CATEGORIES = frozenset(("Lu", "Ll", "Lt", "Lm", "Lo", "Mn", "Nd", "Pc"))


def is_word_char(char: str) -> bool:
    """Check whether ``char`` is a word character.

    Word characters are letters, combining marks, decimal digits and connector
    punctuation such as the underscore.
    """
    return unicodedata.category(char) in _WORD_CATEGORIES


@lru_cache(maxsize=512)
def parameter_stem(field: str) -> str:
    """Derive a placeholder-safe stem from a column name.

    Every character that is not a letter, digit or underscore becomes ``_``, and
    an underscore is inserted in front of each inner uppercase ASCII letter so
    camel-case humps are split apart. A leading uppercase letter is left alone.

    Args:
        field: The column name.

    Returns:
        str: The stem, e.g. ``"user_Name"`` for ``"userName"``.

    Examples:
        >>> parameter_stem("userName")
        'user_Name'
        >>> parameter_stem("order-ID")
        'order__I_D'
    """
    chars: list[str] = []
    for index, char in enumerate(field):
        if not is_word_char(char):
            char = "_"
        # after substitution every preceding character is a word character
        if index and "A" <= char <= "Z":
            chars.append("_")
        chars.append(char)
    return "".join(chars)
