from __future__ import annotations

import os


CONFIG_DIR = os.environ.get("LITECONFIG_DIR", "")
JSON_INDENT = int(os.environ.get("LITECONFIG_INDENT", "4"))
LOG_LEVEL = os.environ.get("LITECONFIG_LOG_LEVEL", "INFO").upper()
