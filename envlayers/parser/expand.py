from __future__ import annotations

import re
from typing import Mapping

# groups: escaping backslash, dollar, subshell paren, name
_EXPAND_VAR_RE = re.compile(r"(\\)?(\$)(\()?\{?([A-Z0-9_]+)?\}?")


def expand_variables(value: str, variables: Mapping[str, str]) -> str:
    """Substitute `$NAME` and `${NAME}` references from `variables`.

    Unknown names expand to an empty string. `\\$NAME` and `$(...)` are not
    expanded; only their leading character is removed. Lowercase names are
    not references and pass through unchanged.
    """

    def repl(match: re.Match[str]) -> str:
        escaped, _, paren, name = match.groups()
        if escaped or paren:
            return match.group(0)[1:]
        if name:
            return variables.get(name, "")
        return match.group(0)

    return _EXPAND_VAR_RE.sub(repl, value)
