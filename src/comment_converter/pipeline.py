from __future__ import annotations

import logging

from .commenting import comment, filter_lines, rewrite_header
from .config import ConverterConfig
from .rewriting import process_tokens
from .textutils import is_byte, split_lines, trim_common_indent
from .tokenization import tokenize

LOGGER = logging.getLogger(__name__)

SPACE = ord(" ")


def normalize_indent(text: str, config: ConverterConfig | None = None) -> str:
    """Strip the shared indent, then the decoration column, then the space after it."""
    cfg = config or ConverterConfig()
    decoration = ord(cfg.decoration_char)
    trimmed = trim_common_indent(text, is_byte(SPACE))
    trimmed = trim_common_indent(trimmed, is_byte(decoration))
    return trim_common_indent(trimmed, is_byte(SPACE))


def convert(source: str, config: ConverterConfig | None = None) -> str:
    """Convert one block documentation comment into line comments."""
    cfg = config or ConverterConfig()
    filtered = filter_lines(source, cfg)
    LOGGER.debug(
        "Line filter kept %d of %d lines",
        len(split_lines(filtered)),
        len(split_lines(source)),
    )
    normalized = normalize_indent(rewrite_header(filtered, cfg), cfg)
    tokens = tokenize(normalized)
    LOGGER.debug("Tokenized %d characters into %d tokens", len(normalized), len(tokens))
    rewritten = process_tokens(tokens, cfg)
    result = comment(rewritten, cfg)
    LOGGER.debug("Emitted %d commented lines", len(split_lines(result)))
    return result
