from __future__ import annotations

from pathlib import Path

from envlayers.errors import EnvFileReadError, EnvParseError

from .keys import locate_key_name
from .scanner import find_statement_start
from .values import extract_var_value


def parse(text: str, *, path: str | None = None) -> dict[str, str]:
    """Parse env-file text into an insertion-ordered key/value mapping.

    Later statements overwrite earlier ones. Values may reference keys that
    appear earlier in the same text.

    Raises:
        EnvParseError: with `path` and the partially built map attached.
    """

    src = text.replace("\r\n", "\n")
    out: dict[str, str] = {}

    pos = 0
    while True:
        start = find_statement_start(src, pos)
        if start is None:
            break

        try:
            key, pos = locate_key_name(src, start)
            value, pos = extract_var_value(src, pos, out)
        except EnvParseError as e:
            e.path = path
            e.partial = dict(out)
            raise

        out[key] = value

    return out


def read_file(path: str | Path) -> dict[str, str]:
    """Read and parse one env file.

    A missing file yields an empty mapping; any other I/O failure raises
    EnvFileReadError. Bytes that are not UTF-8 are kept as surrogate escapes,
    which os.environ writes back unchanged on POSIX.
    """

    file_path = Path(path)
    try:
        raw = file_path.read_bytes()
    except FileNotFoundError:
        return {}
    except OSError as e:
        raise EnvFileReadError(str(file_path), e.strerror or str(e)) from e

    return parse(raw.decode("utf-8-sig", errors="surrogateescape"), path=str(file_path))
