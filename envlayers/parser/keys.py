from __future__ import annotations

from envlayers.errors import MalformedKeyError

from .scanner import is_space, skip_spaces

EXPORT_PREFIX = "export"

_SEPARATORS = frozenset("=:")


def _is_key_char(ch: str) -> bool:
    # isalpha/isnumeric follow the Unicode letter and number categories.
    return ch == "_" or ch == "." or ch.isalpha() or ch.isnumeric()


def locate_key_name(src: str, pos: int) -> tuple[str, int]:
    """Read `[export ]KEY` up to its `=` or `:` separator.

    Returns the key and the offset of the value, with leading whitespace
    already skipped. Whitespace inside the key run is tolerated so that
    `KEY = value` works; trailing whitespace is trimmed from the key.

    Raises:
        MalformedKeyError: on an empty statement, a character outside
            `[letters digits _ .]`, or a statement without a separator.
    """

    pos = skip_spaces(src, pos)
    if pos >= len(src):
        raise MalformedKeyError("zero length string", near="")

    if src.startswith(EXPORT_PREFIX, pos):
        after = pos + len(EXPORT_PREFIX)
        # `exportFOO=1` declares a key named exportFOO.
        if after < len(src) and is_space(src[after]):
            pos = skip_spaces(src, after)

    start = pos
    for i in range(start, len(src)):
        ch = src[i]
        if is_space(ch):
            continue
        if ch in _SEPARATORS:
            key = src[start:i].rstrip()
            return key, skip_spaces(src, i + 1)
        if _is_key_char(ch):
            continue
        raise MalformedKeyError(
            f"unexpected character {ch!r} in variable name near {src[start:]!r}",
            char=ch,
            near=src[start:],
        )

    raise MalformedKeyError(
        f"missing '=' or ':' after variable name near {src[start:]!r}",
        near=src[start:],
    )
