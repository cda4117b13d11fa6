"""Logic for loading and merging configuration files."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from xmldoc_md.deep_merge import deep_merge
from xmldoc_md.render_type_page import DEFAULT_LABELS

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "sources": [],
    "output_dir": "docs",
    "resolution": {
        "scope_by_assembly": False,
    },
    "output": {
        "file_naming": "name",
    },
    "labels": dict(DEFAULT_LABELS),
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults.

    Relative ``sources`` and ``output_dir`` entries are taken relative to the
    directory holding the configuration file.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            if not isinstance(user_config, dict):
                msg = f"Configuration file {p} must contain a mapping"
                raise ValueError(msg)
            config = deep_merge(config, user_config)
            base_dir = p.parent
            config["sources"] = [str(base_dir / s) for s in config.get("sources") or []]
            config["output_dir"] = str(base_dir / config["output_dir"])
        else:
            logger.warning("Configuration file not found, using defaults: %s", p)
    return config
