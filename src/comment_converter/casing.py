"""
Identifier casing helpers.

Words are found by splitting on every non-alphanumeric character and then on
case changes inside each piece: a lowercase letter followed by an uppercase one
ends a word (``boundsCache`` -> ``bounds``, ``Cache``), and an uppercase run
followed by a lowercase letter ends just before its last capital
(``HTTPServer`` -> ``HTTP``, ``Server``). Digits extend the word they sit in.
"""

from __future__ import annotations

import re
from typing import List

_NON_ALNUM = re.compile(r"[\W_]+")


def split_words(identifier: str) -> List[str]:
    """Split an identifier into its words, dropping all separators."""
    words: List[str] = []
    for piece in _NON_ALNUM.split(identifier):
        words.extend(_split_piece(piece))
    return words


def _split_piece(piece: str) -> List[str]:
    words: List[str] = []
    start = 0
    # "lower" / "upper" once a cased character has been seen in the current word.
    mode: str | None = None
    for index, char in enumerate(piece[:-1]):
        following = piece[index + 1]
        if char.islower():
            next_mode: str | None = "lower"
        elif char.isupper():
            next_mode = "upper"
        else:
            next_mode = mode

        if next_mode == "lower" and following.isupper():
            words.append(piece[start : index + 1])
            start = index + 1
            mode = None
        elif mode == "upper" and char.isupper() and following.islower():
            words.append(piece[start:index])
            start = index
            mode = None
        else:
            mode = next_mode
    if piece:
        words.append(piece[start:])
    return words


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def to_snake_case(identifier: str) -> str:
    """``updateBoundsCache`` -> ``update_bounds_cache``."""
    return "_".join(word.lower() for word in split_words(identifier))


def to_lower_camel_case(identifier: str) -> str:
    """``update_bounds_cache`` -> ``updateBoundsCache``."""
    words = split_words(identifier)
    if not words:
        return ""
    return words[0].lower() + "".join(_capitalize(word) for word in words[1:])


def to_upper_camel_case(identifier: str) -> str:
    """``update_bounds_cache`` -> ``UpdateBoundsCache``."""
    return "".join(_capitalize(word) for word in split_words(identifier))


def is_lower_camel_case(identifier: str) -> bool:
    return to_lower_camel_case(identifier) == identifier


def is_upper_camel_case(identifier: str) -> bool:
    return to_upper_camel_case(identifier) == identifier
