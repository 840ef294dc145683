from __future__ import annotations

from typing import List

from .models import Token, TokenClass


def tokenize(text: str) -> List[Token]:
    """Split text into maximal runs of words, whitespace and phrase separators.

    Joining the text of the returned tokens reproduces ``text`` exactly.
    """
    tokens: List[Token] = []
    current: TokenClass | None = None
    run: List[str] = []

    for char in text:
        token_class = TokenClass.classify(char)
        if token_class is not current:
            if current is not None:
                tokens.append(Token(current, "".join(run)))
            current = token_class
            run = [char]
        else:
            run.append(char)

    if current is not None:
        tokens.append(Token(current, "".join(run)))
    return tokens
