"""識別子の複数形変換."""

from __future__ import annotations

import re

# 規則に従わない複数形
_IRREGULAR_PLURALS = {
    "person": "people",
    "child": "children",
    "man": "men",
    "woman": "women",
    "mouse": "mice",
    "datum": "data",
    "medium": "media",
    "criterion": "criteria",
    "index": "indices",
    "matrix": "matrices",
    "vertex": "vertices",
}

# 単複同形
_UNCOUNTABLE = frozenset({"equipment", "information", "rice", "money", "species", "series", "fish", "sheep"})

_SINGULAR_S_ENDINGS = ("ss", "us", "is", "as")


def pluralize(word: str) -> str:
    """識別子を英語の複数形に変換する.

    snake_case の場合は最後の要素のみを変換する。
    既に ``s`` で終わる複数形（``states`` など）はそのまま返す。

    Args:
        word: 単数形の識別子

    Returns:
        複数形の識別子

    Examples:
        >>> pluralize("state")
        'states'
        >>> pluralize("order_status")
        'order_statuses'
        >>> pluralize("category")
        'categories'

    """
    if not word:
        return word

    head, sep, last = word.rpartition("_")
    if not last:
        return word
    return f"{head}{sep}{_pluralize_word(last)}"


def _pluralize_word(word: str) -> str:
    """単語 1 つを複数形に変換する."""
    lower = word.lower()

    if lower in _UNCOUNTABLE:
        return word

    if lower in _IRREGULAR_PLURALS:
        plural = _IRREGULAR_PLURALS[lower]
        if word[0].isupper():
            return plural.capitalize()
        return plural

    if lower.endswith("s") and not lower.endswith(_SINGULAR_S_ENDINGS):
        return word

    if lower.endswith("is"):
        return word[:-2] + "es"

    if re.search(r"[^aeiou]y$", lower):
        return word[:-1] + "ies"

    if re.search(r"(s|x|z|ch|sh)$", lower):
        return word + "es"

    if re.search(r"[^f]fe$", lower):
        return word[:-2] + "ves"

    if re.search(r"[lr]f$", lower):
        return word[:-1] + "ves"

    return word + "s"
