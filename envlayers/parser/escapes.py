from __future__ import annotations

import re

_ESCAPE_RE = re.compile(r"\\.")
_UNESCAPE_RE = re.compile(r"\\([^$])")

_LETTER_ESCAPES = {"n": "\n", "r": "\r"}


def _decode_letter(match: re.Match[str]) -> str:
    return _LETTER_ESCAPES.get(match.group(0)[1], match.group(0))


def expand_escapes(value: str) -> str:
    """Decode backslash escapes of a double-quoted value.

    `\\n` and `\\r` become control characters. Afterwards a backslash in front
    of anything but `$` is dropped, so `\\"` yields `"`; `\\$` survives for
    the variable expander.
    """

    decoded = _ESCAPE_RE.sub(_decode_letter, value)
    return _UNESCAPE_RE.sub(r"\1", decoded)
