"""
errors.py

typed exceptions raised by the config layer. callers branch on the class,
the attributes carry the key / name / path that failed.
"""

from __future__ import annotations

from pathlib import Path


class LiteConfigError(Exception):
    """base class for every error raised by liteconfig."""


class InvalidKeyError(LiteConfigError, ValueError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"invalid dotted key: {key!r}")


class InvalidNameError(LiteConfigError, ValueError):
    def __init__(self, name: str, reason: str):
        self.name = name
        super().__init__(f"invalid config name {name!r}: {reason}")


class PathTraversalError(LiteConfigError, LookupError):
    """an intermediate segment of a dotted key is missing or not a mapping."""

    def __init__(self, key: str, segment: str, reason: str):
        self.key = key
        self.segment = segment
        super().__init__(f"cannot traverse {segment!r} in {key!r}: {reason}")


class FieldNotFoundError(LiteConfigError, LookupError):
    def __init__(self, key: str, field: str):
        self.key = key
        self.field = field
        super().__init__(f"field {field!r} not found for key {key!r}")


class TypeMismatchError(LiteConfigError, TypeError):
    def __init__(self, key: str, expected: str, actual: str):
        self.key = key
        self.expected = expected
        self.actual = actual
        super().__init__(f"{key!r}: expected {expected}, found {actual}")


class ConfigNotFoundError(LiteConfigError, LookupError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"configuration {name!r} does not exist")


class StorageIOError(LiteConfigError, OSError):
    def __init__(self, path: Path, action: str, reason: str = ""):
        self.path = path
        self.action = action
        msg = f"failed to {action} {path}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class MalformedDocumentError(LiteConfigError, ValueError):
    """file content is not a json object. recovered by resetting the document."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"malformed configuration {path}: {reason}")
