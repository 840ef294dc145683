from __future__ import annotations

from typing import Callable, Iterable, List

from .errors import ConverterInternalError

LINE_SEPARATOR = "\n"

# Unicode White_Space. str.isspace also accepts U+001C..U+001F, which are not.
UNICODE_WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

IndentPredicate = Callable[[int], bool]


def split_lines(text: str) -> List[str]:
    """Split text into lines so that ``join_lines(split_lines(text)) == text``.

    A trailing separator yields a trailing empty line; empty text has no lines.
    """
    if not text:
        return []
    return text.split(LINE_SEPARATOR)


def join_lines(lines: Iterable[str]) -> str:
    return LINE_SEPARATOR.join(lines)


def remove_lines(text: str, remove_if: Callable[[str], bool]) -> str:
    """Drop every line for which ``remove_if`` returns True."""
    return join_lines(line for line in split_lines(text) if not remove_if(line))


def is_byte(value: int) -> IndentPredicate:
    """Build an indent predicate matching a single byte value."""
    return lambda byte: byte == value


def indent_size(line: str, is_indent: IndentPredicate) -> int | None:
    """Count the leading UTF-8 bytes of ``line`` accepted by ``is_indent``.

    Returns None when the line has no other byte, including the empty line.
    """
    for position, byte in enumerate(line.encode("utf-8")):
        if not is_indent(byte):
            return position
    return None


def trim_common_indent(text: str, is_indent: IndentPredicate) -> str:
    """Remove the indent shared by all lines that carry any other content.

    The amount is measured in bytes; lines made only of indent bytes do not
    take part in the minimum but are trimmed all the same.
    """
    lines = split_lines(text)
    sizes = [
        size for size in (indent_size(line, is_indent) for line in lines) if size is not None
    ]
    min_indent = min(sizes, default=0)
    if min_indent == 0:
        return text
    return join_lines(_skip_bytes(line, min_indent) for line in lines)


def _skip_bytes(line: str, count: int) -> str:
    try:
        return line.encode("utf-8")[count:].decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ConverterInternalError(
            f"Indent trim of {count} bytes split a character in line {line!r}"
        ) from exc
