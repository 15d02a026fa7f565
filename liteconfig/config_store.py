"""
config_store.py

load/save one configuration document (<dir>/<name>.json).
every save is a full synchronous overwrite of the file.

TODO:
- atomic writes (temp file + os.replace); a crash mid-write truncates the file
  and the next load resets it to {}
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .errors import MalformedDocumentError, StorageIOError
from .settings import JSON_INDENT

logger = logging.getLogger(__name__)


def dump_document(document: dict[str, Any], indent: int = JSON_INDENT) -> str:
    return json.dumps(document, indent=indent, ensure_ascii=False, allow_nan=False)


def _reject_constant(token: str) -> Any:
    raise ValueError(f"non-finite number {token} is not valid json")


def create_if_missing(path: Path, indent: int = JSON_INDENT) -> bool:
    if path.exists():
        return False
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StorageIOError(path, "create directory for", str(e)) from e
    save_document(path, {}, indent=indent)
    logger.info(f"created configuration file {path}")
    return True


def load_document(path: Path) -> dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise MalformedDocumentError(path, str(e)) from e
    except OSError as e:
        raise StorageIOError(path, "read", str(e)) from e

    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except ValueError as e:
        raise MalformedDocumentError(path, str(e)) from e
    if not isinstance(data, dict):
        raise MalformedDocumentError(path, f"top-level value is {type(data).__name__}, not an object")
    return data


def save_document(path: Path, document: dict[str, Any], indent: int = JSON_INDENT) -> None:
    try:
        path.write_text(dump_document(document, indent=indent), encoding="utf-8")
    except OSError as e:
        logger.error(f"failed to write configuration file {path}: {e}")
        raise StorageIOError(path, "write", str(e)) from e
    logger.debug(f"saved {path}")


def delete_file(path: Path) -> bool:
    try:
        path.unlink()
    except FileNotFoundError:
        return False
    except OSError as e:
        raise StorageIOError(path, "delete", str(e)) from e
    return True
