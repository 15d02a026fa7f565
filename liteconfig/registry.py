"""
registry.py

Registry: name -> ConfigStore for every configuration living in one directory.
construct one and pass it to whatever needs config; there is no module-level
instance.
"""

from __future__ import annotations

import logging
import os

from .config import ConfigStore
from .errors import ConfigNotFoundError
from .models import ConfigInfo
from .path_utils import bare_name, config_pathname, normalize_dir, safe_config_path
from .settings import CONFIG_DIR, JSON_INDENT

logger = logging.getLogger(__name__)


class Registry:
    def __init__(self, directory: str | None = None, indent: int = JSON_INDENT):
        self.directory = normalize_dir(CONFIG_DIR if directory is None else directory)
        self.indent = indent
        self._stores: dict[str, ConfigStore] = {}

    def __repr__(self) -> str:
        return f"Registry(directory={self.directory!r}, names={self.names()!r})"

    def initialize(self, directory: str, *names: str) -> Registry:
        """
        bind the registry to directory and load (creating if needed) one
        store per name. names may carry an extension ("app.json" -> "app").
        a name that is already registered gets a fresh store.
        """
        directory = normalize_dir(directory)
        # every name is checked before the registry changes
        bare = [bare_name(raw) for raw in names]
        targets = [(name, safe_config_path(directory, name)) for name in bare]

        self.directory = directory
        for name, path in targets:
            self._stores[name] = ConfigStore(path, name=name, indent=self.indent, on_delete=self._evict)

        logger.info(f"initialized {len(names)} configuration(s) in {self.absolute_config_path()}")
        return self

    def _evict(self, store: ConfigStore) -> None:
        if self._stores.get(store.name) is store:
            del self._stores[store.name]

    def get(self, name: str) -> ConfigStore:
        store = self._stores.get(name)
        if store is None:
            raise ConfigNotFoundError(name)
        return store

    def delete(self, name: str) -> None:
        self.get(name).delete()

    def names(self) -> list[str]:
        return list(self._stores)

    def __contains__(self, name: object) -> bool:
        return name in self._stores

    def __len__(self) -> int:
        return len(self._stores)

    def describe(self) -> list[ConfigInfo]:
        return [
            ConfigInfo(name=name, path=str(s.path), exists=s.path.exists(), keys=len(s.keys()))
            for name, s in self._stores.items()
        ]

    def absolute_config_path(self) -> str:
        return os.path.abspath(config_pathname(self.directory))

    def relative_config_path(self) -> str:
        return config_pathname(self.directory)
