from __future__ import annotations


class EnvLayersError(Exception):
    """Base exception for this project."""


class ConfigError(EnvLayersError):
    """Raised when loader settings are invalid or incomplete."""

    def __init__(self, message: str, *, path: str | None = None):
        super().__init__(f"{path}: {message}" if path else message)
        self.path = path


class EnvFileReadError(EnvLayersError):
    """An env file exists but could not be opened or read.

    `reason` is the OS error text; the original OSError is chained as
    `__cause__`.
    """

    def __init__(self, path: str, reason: str):
        super().__init__(f"failed to read env file {path}: {reason}")
        self.path = path
        self.reason = reason


class EnvParseError(EnvLayersError):
    """Base for statement-level parse failures.

    `path` and `partial` are filled in by the file parser once the failure
    leaves the lexer/extractor; `partial` holds the keys parsed before it.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.path: str | None = None
        self.partial: dict[str, str] = {}

    def __str__(self) -> str:
        return f"{self.path}: {self.message}" if self.path else self.message


class MalformedKeyError(EnvParseError):
    def __init__(self, message: str, *, char: str | None = None, near: str = ""):
        super().__init__(message)
        self.char = char
        self.near = near


class UnterminatedQuoteError(EnvParseError):
    def __init__(self, text: str):
        super().__init__(f"unterminated quoted value {text}")
        self.text = text
