"""
config.py

ConfigStore: one json document bound to one file, addressed by dotted keys.

reads are in-memory traversals. every mutation rewrites the whole file before
returning, so a successful call is always reflected on disk.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

from . import models
from .config_store import create_if_missing, delete_file, load_document, save_document
from .errors import ConfigNotFoundError, FieldNotFoundError, MalformedDocumentError
from .models import Kind
from .nodes import ensure_destination, resolve_destination
from .settings import JSON_INDENT

logger = logging.getLogger(__name__)


class ConfigStore:
    def __init__(
        self,
        path: Path | str,
        name: str | None = None,
        indent: int = JSON_INDENT,
        on_delete: Callable[[ConfigStore], None] | None = None,
    ):
        self.path = Path(path)
        self.name = name or self.path.stem
        self.indent = indent
        self._on_delete = on_delete
        self._deleted = False
        self._document: dict[str, Any] = {}

        create_if_missing(self.path, indent=indent)
        self._load()

    def __repr__(self) -> str:
        return f"ConfigStore(name={self.name!r}, path={str(self.path)!r})"

    def _load(self) -> None:
        try:
            self._document = load_document(self.path)
        except MalformedDocumentError as e:
            logger.warning(f"{e}; resetting {self.path} to an empty document")
            self._document = {}
            self._save()

    def _save(self) -> None:
        save_document(self.path, self._document, indent=self.indent)

    def _check_live(self) -> None:
        if self._deleted:
            raise ConfigNotFoundError(self.name)

    def _get(self, key: str, kind: Kind) -> Any:
        self._check_live()
        node, field = resolve_destination(self._document, key)
        if field not in node:
            raise FieldNotFoundError(key, field)
        # deep copy so callers never hold a live reference into the document
        return copy.deepcopy(kind.check(key, node[field]))

    @property
    def deleted(self) -> bool:
        return self._deleted

    @property
    def document(self) -> models.Document:
        self._check_live()
        return copy.deepcopy(self._document)

    # scalar getters

    def get_string(self, key: str) -> str:
        return self._get(key, models.STRING)

    def get_int(self, key: str) -> int:
        return self._get(key, models.INT)

    def get_float(self, key: str) -> float:
        return self._get(key, models.FLOAT)

    def get_bool(self, key: str) -> bool:
        return self._get(key, models.BOOL)

    def get_value(self, key: str) -> Any:
        return self._get(key, models.VALUE)

    def get_mapping(self, key: str) -> dict[str, Any]:
        return self._get(key, models.MAPPING)

    # array getters

    def get_string_array(self, key: str) -> list[str]:
        return self._get(key, models.STRING_ARRAY)

    def get_int_array(self, key: str) -> list[int]:
        return self._get(key, models.INT_ARRAY)

    def get_float_array(self, key: str) -> list[float]:
        return self._get(key, models.FLOAT_ARRAY)

    def get_bool_array(self, key: str) -> list[bool]:
        return self._get(key, models.BOOL_ARRAY)

    def get_value_array(self, key: str) -> list[Any]:
        return self._get(key, models.VALUE_ARRAY)

    def get_mapping_array(self, key: str) -> list[dict[str, Any]]:
        return self._get(key, models.MAPPING_ARRAY)

    # mutators

    def set(self, key: str, value: Any) -> None:
        """
        store value under key, creating missing intermediate mappings.
        any json value is accepted, including lists and nested mappings;
        tuples are stored as arrays.
        """
        self._check_live()
        value = copy.deepcopy(models.check_json(key, value))
        node, field = ensure_destination(self._document, key)
        node[field] = value
        logger.debug(f"{self.name}: set {key}")
        self._save()

    def set_array(self, key: str, values: Iterable[Any]) -> None:
        """store values as an ordered array. the destination mapping must already exist."""
        self._check_live()
        node, field = resolve_destination(self._document, key)
        array = copy.deepcopy(models.check_json(key, list(values)))
        node[field] = array
        logger.debug(f"{self.name}: set array {key} ({len(array)} items)")
        self._save()

    def remove(self, key: str) -> None:
        self._check_live()
        node, field = resolve_destination(self._document, key)
        node.pop(field, None)
        logger.debug(f"{self.name}: removed {key}")
        self._save()

    def clear(self) -> None:
        self._check_live()
        self._document = {}
        logger.debug(f"{self.name}: cleared")
        self._save()

    # queries

    def contains(self, key: str) -> bool:
        self._check_live()
        node, field = resolve_destination(self._document, key)
        return field in node

    def __contains__(self, key: str) -> bool:
        return self.contains(key)

    def keys(self) -> list[str]:
        self._check_live()
        return list(self._document)

    def delete(self) -> None:
        """
        remove the backing file and retire this store. later calls raise
        ConfigNotFoundError; the owning registry (if any) drops it.
        """
        if self._deleted:
            return
        delete_file(self.path)
        self._deleted = True
        logger.info(f"deleted configuration {self.name} ({self.path})")
        if self._on_delete is not None:
            self._on_delete(self)
