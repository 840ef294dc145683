from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import ConverterInternalError
from .textutils import UNICODE_WHITESPACE

# Phrase separators never merge into adjacent words.
SEPARATOR_CHARS = frozenset(".,;")


class TokenClass(Enum):
    """The three kinds of text runs a comment is split into."""

    WORD = "word"
    WHITESPACE = "whitespace"
    SEPARATOR = "separator"

    @classmethod
    def classify(cls, char: str) -> "TokenClass":
        """Return the class of a single character."""
        if char in SEPARATOR_CHARS:
            return cls.SEPARATOR
        if char in UNICODE_WHITESPACE:
            return cls.WHITESPACE
        return cls.WORD


@dataclass(frozen=True, slots=True)
class Token:
    """A maximal run of characters sharing one TokenClass."""

    kind: TokenClass
    text: str

    def __post_init__(self) -> None:
        if not self.text:
            raise ConverterInternalError(f"Empty {self.kind.value} token")

    @property
    def is_word(self) -> bool:
        return self.kind is TokenClass.WORD

    @property
    def is_whitespace(self) -> bool:
        return self.kind is TokenClass.WHITESPACE

    @property
    def is_separator(self) -> bool:
        return self.kind is TokenClass.SEPARATOR


def word(text: str) -> Token:
    return Token(TokenClass.WORD, text)


def whitespace(text: str) -> Token:
    return Token(TokenClass.WHITESPACE, text)


def separator(text: str) -> Token:
    return Token(TokenClass.SEPARATOR, text)
