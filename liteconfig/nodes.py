"""
nodes.py

dotted-path traversal over a document. "server.http.port" resolves to the
mapping under server -> http (the destination node) plus the field "port".
"""

from __future__ import annotations

from typing import Any

from .errors import InvalidKeyError, PathTraversalError


def split_key(key: str) -> list[str]:
    if not isinstance(key, str) or not key:
        raise InvalidKeyError(key)
    segments = key.split(".")
    if any(not s for s in segments):
        raise InvalidKeyError(key)
    return segments


def resolve_destination(document: dict[str, Any], key: str) -> tuple[dict[str, Any], str]:
    """
    walk every segment but the last; each must already exist and be a mapping.
    the field itself is not inspected.
    """
    segments = split_key(key)
    current = document

    for i, seg in enumerate(segments[:-1]):
        if seg not in current:
            raise PathTraversalError(key, ".".join(segments[: i + 1]), "missing")
        nxt = current[seg]
        if not isinstance(nxt, dict):
            raise PathTraversalError(key, ".".join(segments[: i + 1]), f"not a mapping ({type(nxt).__name__})")
        current = nxt

    return current, segments[-1]


def ensure_destination(document: dict[str, Any], key: str) -> tuple[dict[str, Any], str]:
    """like resolve_destination, but missing intermediates are created as {}."""
    segments = split_key(key)
    current = document

    for i, seg in enumerate(segments[:-1]):
        nxt = current.setdefault(seg, {})
        if not isinstance(nxt, dict):
            raise PathTraversalError(key, ".".join(segments[: i + 1]), f"not a mapping ({type(nxt).__name__})")
        current = nxt

    return current, segments[-1]
