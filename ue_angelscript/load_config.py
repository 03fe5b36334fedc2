"""Logic for loading and merging tool settings files."""

import copy
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from ue_angelscript.bounded_output_buffer import MAX_OUTPUT_BYTES
from ue_angelscript.deep_merge import deep_merge
from ue_angelscript.scan_for_scripts import SCRIPT_EXTENSION, SKIP_DIRS

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "UE_AS_CONFIG"

DEFAULT_CONFIG: dict[str, Any] = {
    "scanner": {
        "extension": SCRIPT_EXTENSION,
        "skip_dirs": sorted(SKIP_DIRS),
    },
    "listing": {
        "max_results": 50,
    },
    "search": {
        "context_lines": 2,
        "max_results": 20,
    },
    "commandlet": {
        "test_name": "AngelscriptTest",
        "roots_name": "GetScriptRoots",
        "test_timeout_seconds": 120,
        "roots_timeout_seconds": 30,
        "max_output_bytes": MAX_OUTPUT_BYTES,
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load settings from a YAML file and merge them with defaults.

    Falls back to the ``UE_AS_CONFIG`` environment variable when no path is
    given. A missing file leaves the defaults untouched.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    path = path or os.environ.get(CONFIG_ENV_VAR)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
        else:
            logger.warning("Settings file not found, using defaults: %s", path)
    return config
