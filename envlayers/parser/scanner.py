"""Statement boundary scanning.

Positions are plain integer offsets into the decoded file text; the text
itself is never copied or mutated.
"""

from __future__ import annotations

COMMENT_CHAR = "#"

# Narrower than str.isspace(): no newline and no Unicode separators
# beyond NEL and NBSP.
SPACE_CHARS = "\t\v\f\r \x85\xa0"
_SPACE_SET = frozenset(SPACE_CHARS)
_LINE_END_CHARS = frozenset("\n\r")


def is_space(ch: str) -> bool:
    return ch in _SPACE_SET


def is_line_end(ch: str) -> bool:
    return ch in _LINE_END_CHARS


def skip_spaces(src: str, pos: int, *, newlines: bool = False) -> int:
    """Return the first offset at or after `pos` that is not whitespace."""

    end = len(src)
    while pos < end:
        ch = src[pos]
        if not (is_space(ch) or (newlines and ch == "\n")):
            break
        pos += 1
    return pos


def find_statement_start(src: str, pos: int = 0) -> int | None:
    """Locate the next statement at or after `pos`.

    Blank lines and `#` comment lines are skipped. Returns None when only
    whitespace and comments remain, including a trailing comment without a
    final newline.
    """

    while True:
        pos = skip_spaces(src, pos, newlines=True)
        if pos >= len(src):
            return None
        if src[pos] != COMMENT_CHAR:
            return pos

        newline = src.find("\n", pos)
        if newline == -1:
            return None
        pos = newline
