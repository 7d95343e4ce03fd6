from __future__ import annotations

import copy
import json
import logging
import os
from datetime import datetime
from typing import Any, Dict, Optional

# --- Configuration ---
CONFIG_PATH = os.path.expanduser("~/.config/news-reader/config.json")

DEFAULT_THEME = "textual-dark"

DEFAULT_CONFIG: Dict[str, Any] = {
    "theme": DEFAULT_THEME,
    "source": "local",
    "sources": {
        "local": {
            "path": None,
            "latency": 0,
        },
    },
    "themes": {},
    "ui": {},
}

# Default UI settings
UI_DEFAULTS = {
    "statusbar_keybindings": (
        "[b {color}]/[/] search, [b {color}]r[/] refresh, "
        "[b {color}]ctrl+l[/] toggle categories"
    ),
}

# --- Logging ---
logger = logging.getLogger("news")


def setup_logging(debug: bool = False) -> Optional[str]:
    """Configure logging."""
    if not debug:
        logging.basicConfig(level=logging.CRITICAL, handlers=[logging.NullHandler()])
        return None

    ts = datetime.now().strftime("%Y%m%dT%H%M%S")
    pid = os.getpid()
    debug_path = f"/tmp/news_reader_debug_{ts}_{pid}.log"

    # Use basicConfig to set up the root logger with a file handler
    logging.basicConfig(
        level=logging.DEBUG,
        filename=debug_path,
        filemode="a",
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )

    logger.debug("Debug logging enabled to %s", debug_path)
    return debug_path


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load the config file merged over DEFAULT_CONFIG.

    A missing file yields the defaults; an unreadable one is logged and also
    yields the defaults.
    """
    path = path or CONFIG_PATH
    config = copy.deepcopy(DEFAULT_CONFIG)
    if not os.path.exists(path):
        logger.info("No config file at %s, using defaults.", path)
        return config
    try:
        with open(path, "r") as f:
            user_config = json.load(f)
    except (IOError, json.JSONDecodeError) as e:
        logger.error("Failed to load config from %s: %s", path, e)
        return config

    if not isinstance(user_config, dict):
        logger.error("Ignoring config at %s: top level must be an object", path)
        return config

    config.update(user_config)
    logger.info("Loaded config from %s", path)
    return config


def apply_overrides(
    config: Dict[str, Any],
    theme: Optional[str] = None,
    data_path: Optional[str] = None,
    latency: Optional[float] = None,
) -> Dict[str, Any]:
    """Apply command-line overrides to a loaded config in place."""
    if theme:
        config["theme"] = theme
    if data_path is not None or latency is not None:
        source_name = config.get("source", "local")
        sources = config.setdefault("sources", {})
        source_config = sources.setdefault(source_name, {})
        if data_path is not None:
            source_config["path"] = data_path
        if latency is not None:
            source_config["latency"] = latency
    return config
