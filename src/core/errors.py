from __future__ import annotations


class SerialHasherError(Exception):
    """Base exception for this project."""


class ConfigError(SerialHasherError):
    """Raised when configuration is invalid or incomplete."""

    def __init__(self, message: str, *, path: str | None = None):
        super().__init__(f"{path}: {message}" if path else message)
        self.path = path


class HashingError(SerialHasherError):
    """Raised when a hasher is built with an unusable algorithm or marker."""
