from __future__ import annotations

import os
from pathlib import Path

from .errors import InvalidNameError

JSON_SUFFIX = ".json"


def normalize_dir(directory: str) -> str:
    return directory[:-1] if directory.endswith("/") else directory


def bare_name(name: str) -> str:
    # "app.json" and "app.v2.json" both register as "app"
    return name.split(".", 1)[0] if "." in name else name


def config_pathname(directory: str, file_name: str | None = None) -> str:
    sep = "" if directory.endswith("/") or not directory or file_name is None else "/"
    pathname = directory + sep
    if file_name is not None:
        pathname += file_name if file_name.endswith(JSON_SUFFIX) else file_name + JSON_SUFFIX
    return pathname


def safe_config_path(directory: str, name: str) -> Path:
    if not name:
        raise InvalidNameError(name, "empty name")

    p = Path(config_pathname(directory, name))
    root = Path(directory or ".")
    try:
        Path(os.path.abspath(p)).relative_to(os.path.abspath(root))
    except ValueError:
        raise InvalidNameError(name, "path escapes config directory")
    return p
