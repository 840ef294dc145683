"""Line-level stages: dropping delimiter lines, the first-line header and re-commenting."""

from __future__ import annotations

from .config import ConverterConfig
from .textutils import (
    UNICODE_WHITESPACE,
    indent_size,
    is_byte,
    join_lines,
    remove_lines,
    split_lines,
)


def is_structural_line(line: str, config: ConverterConfig | None = None) -> bool:
    """Return True for delimiter-only lines and tag lines such as ``/** \\class SkPath``.

    The tag marker may follow the opening delimiter directly or after one space.
    """
    cfg = config or ConverterConfig()
    trimmed = line.strip(UNICODE_WHITESPACE)
    if trimmed == cfg.open_delimiter or trimmed == cfg.close_delimiter:
        return True
    if not trimmed.startswith(cfg.open_delimiter):
        return False
    rest = trimmed[len(cfg.open_delimiter) :]
    return rest.startswith((cfg.tag_line_marker, f" {cfg.tag_line_marker}"))


def filter_lines(text: str, config: ConverterConfig | None = None) -> str:
    return remove_lines(text, lambda line: is_structural_line(line, config))


def rewrite_first_line(first_line: str, config: ConverterConfig | None = None) -> str:
    """Replace an opening ``/** `` after the indent by the same number of spaces."""
    cfg = config or ConverterConfig()
    opening = f"{cfg.open_delimiter} "
    indent = indent_size(first_line, is_byte(ord(" "))) or 0
    if first_line[indent:].startswith(opening):
        rest = first_line[indent + len(opening) :]
        return first_line[:indent] + " " * len(opening) + rest
    return first_line


def rewrite_header(text: str, config: ConverterConfig | None = None) -> str:
    lines = split_lines(text)
    if not lines:
        return text
    lines[0] = rewrite_first_line(lines[0], config)
    return join_lines(lines)


def comment(text: str, config: ConverterConfig | None = None) -> str:
    """Prefix every line with the line comment marker.

    Lines that already carry the marker are kept, and so is a blank last line.
    """
    cfg = config or ConverterConfig()
    prefix = f"{cfg.line_marker} "
    lines = split_lines(text)
    last = len(lines) - 1
    commented = []
    for index, line in enumerate(lines):
        blank_last = index == last and not line.strip(UNICODE_WHITESPACE)
        if line.startswith(prefix) or blank_last:
            commented.append(line)
        else:
            commented.append(prefix + line)
    return join_lines(commented)
