from __future__ import annotations

import importlib.resources
import json
import logging
from typing import Any, Dict, Optional

from textual.theme import Theme

logger = logging.getLogger("news")

# --- Theme Configuration ---
BUNDLED_THEMES_PACKAGE = "news_reader.data"
BUNDLED_THEMES_FILE = "themes.json"


def load_bundled_theme_definitions() -> Dict[str, Dict[str, Any]]:
    resource = importlib.resources.files(BUNDLED_THEMES_PACKAGE) / BUNDLED_THEMES_FILE
    try:
        return json.loads(resource.read_text(encoding="utf-8"))
    except (IOError, json.JSONDecodeError) as e:
        logger.error("Failed to read bundled themes: %s", e)
        return {}


def load_themes(user_definitions: Optional[Dict[str, Any]] = None) -> Dict[str, Theme]:
    """
    Build Theme objects from the bundled definitions, then from the user's
    config ``themes`` section. User themes replace bundled ones of the same
    name; invalid definitions are skipped.
    """
    definitions = load_bundled_theme_definitions()
    definitions.update(user_definitions or {})

    themes: Dict[str, Theme] = {}
    for name, definition in definitions.items():
        try:
            themes[name] = Theme(name=name, **definition)
        except Exception as e:
            logger.warning("Ignoring invalid theme definition for '%s': %s", name, e)
    return themes
