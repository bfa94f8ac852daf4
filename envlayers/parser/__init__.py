"""Line-oriented env-file parser.

scanner -> keys -> values (-> escapes, expand), driven by reader.
"""

from __future__ import annotations

from .escapes import expand_escapes
from .expand import expand_variables
from .keys import locate_key_name
from .reader import parse, read_file
from .scanner import find_statement_start
from .values import extract_var_value

__all__ = [
    "expand_escapes",
    "expand_variables",
    "extract_var_value",
    "find_statement_start",
    "locate_key_name",
    "parse",
    "read_file",
]
