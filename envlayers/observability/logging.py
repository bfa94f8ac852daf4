from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

_FIELDS_ATTR = "envlayers_fields"


class JsonFormatter(logging.Formatter):
    """One JSON object per record.

    KVLogger keyword fields (`path`, `key`, counts...) become top-level keys.
    Records carrying an exception get `error_type` and `error`, plus the
    exception's env file `path` when the record has none of its own.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "event": record.getMessage(),
        }
        payload.update(getattr(record, _FIELDS_ATTR, {}))

        if record.exc_info and record.exc_info[1] is not None:
            exc = record.exc_info[1]
            payload["error_type"] = type(exc).__name__
            payload["error"] = str(exc)
            exc_path = getattr(exc, "path", None)
            if exc_path:
                payload.setdefault("path", exc_path)

        # Paths and other odd values are written via str().
        return json.dumps(payload, ensure_ascii=False, default=str)


class KVLogger:
    """Logger adapter: `log.debug("event", path=..., key=...)`."""

    def __init__(self, logger: logging.Logger):
        self._logger = logger

    def debug(self, event: str, **fields: object) -> None:
        self._log(logging.DEBUG, event, fields)

    def info(self, event: str, **fields: object) -> None:
        self._log(logging.INFO, event, fields)

    def warning(self, event: str, **fields: object) -> None:
        self._log(logging.WARNING, event, fields)

    def error(self, event: str, **fields: object) -> None:
        self._log(logging.ERROR, event, fields)

    def _log(self, level: int, event: str, fields: dict[str, object]) -> None:
        if not self._logger.isEnabledFor(level):
            return
        exc_info = fields.pop("exc_info", None)
        self._logger.log(level, event, extra={_FIELDS_ATTR: fields}, exc_info=exc_info)  # type: ignore[arg-type]


def configure_logging(*, level: str = "INFO") -> None:
    """Send JSON records to stderr. Entrypoints only; safe to call repeatedly."""

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(JsonFormatter())
    logging.basicConfig(level=level.upper(), handlers=[handler], force=True)


def get_logger(name: str = "envlayers") -> KVLogger:
    return KVLogger(logging.getLogger(name))
