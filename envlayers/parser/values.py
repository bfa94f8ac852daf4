from __future__ import annotations

from typing import Mapping

from envlayers.errors import UnterminatedQuoteError

from .escapes import expand_escapes
from .expand import expand_variables
from .scanner import COMMENT_CHAR, SPACE_CHARS, is_line_end, is_space

SINGLE_QUOTE = "'"
DOUBLE_QUOTE = '"'


def _line_end(src: str, pos: int) -> int:
    for i in range(pos, len(src)):
        if is_line_end(src[i]):
            return i
    return len(src)


def _strip_inline_comment(line: str) -> str:
    # The last `#` preceded by whitespace starts the comment.
    for i in range(len(line) - 1, 0, -1):
        if line[i] == COMMENT_CHAR and is_space(line[i - 1]):
            return line[:i]
    return line


def _extract_unquoted(src: str, pos: int, variables: Mapping[str, str]) -> tuple[str, int]:
    end = _line_end(src, pos)
    line = src[pos:end]
    if not line:
        return "", end

    value = _strip_inline_comment(line).strip(SPACE_CHARS)
    return expand_variables(value, variables), end


def _extract_quoted(src: str, pos: int, variables: Mapping[str, str]) -> tuple[str, int]:
    quote = src[pos]
    for i in range(pos + 1, len(src)):
        if src[i] != quote or src[i - 1] == "\\":
            continue

        value = src[pos:i].strip(quote)
        if quote == DOUBLE_QUOTE:
            value = expand_variables(expand_escapes(value), variables)
        return value, i + 1

    newline = src.find("\n", pos)
    raise UnterminatedQuoteError(src[pos:] if newline == -1 else src[pos:newline])


def extract_var_value(src: str, pos: int, variables: Mapping[str, str]) -> tuple[str, int]:
    """Read the value starting at `pos`.

    Returns the resolved value and the offset where scanning resumes. For
    unquoted values that offset is the line ending itself; for quoted values
    it is just past the closing quote.

    `variables` holds the keys parsed so far in the same file and is used for
    `$NAME` expansion in unquoted and double-quoted values. Single-quoted
    values are returned verbatim.

    Raises:
        UnterminatedQuoteError: when no unescaped closing quote exists.
    """

    if pos < len(src) and src[pos] in (SINGLE_QUOTE, DOUBLE_QUOTE):
        return _extract_quoted(src, pos, variables)
    return _extract_unquoted(src, pos, variables)
