import os
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from config.tools import FEATURED_ROUTES

logger = logging.getLogger(__name__)

app_root = Path(__file__).parent.parent.parent

DEFAULT_PREVIEW_LIMIT = 3
DEFAULT_TAG_PREVIEW_LIMIT = 3


@dataclass
class Settings:
    """Runtime settings read from config/config.json"""

    tools: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    preview_limit: int = DEFAULT_PREVIEW_LIMIT
    tag_preview_limit: int = DEFAULT_TAG_PREVIEW_LIMIT
    featured: List[str] = field(default_factory=lambda: list(FEATURED_ROUTES))

    def is_tool_enabled(self, tool_id: str) -> bool:
        """Check if a tool is enabled in config. Defaults to True if not specified."""
        tool_conf = self.tools.get(tool_id, {})
        return tool_conf.get('enabled', True)


def get_config_file() -> Path:
    """Get the config file path, honouring DEVTOOLKIT_CONFIG_FILE."""
    config_file = os.environ.get('DEVTOOLKIT_CONFIG_FILE')
    if config_file:
        return Path(config_file)
    return app_root / "config" / "config.json"


def _read_int(section: Any, key: str, default: int) -> int:
    if not isinstance(section, dict):
        return default
    value = section.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        logger.warning("Ignoring invalid %s=%r in config, using %d", key, value, default)
        return default
    return value


def load_settings(config_file: Optional[Path] = None) -> Settings:
    """
    Load settings from a JSON config file.

    A missing or unreadable file yields the defaults.

    Args:
        config_file: Path to the config file, defaults to get_config_file()

    Returns:
        Settings instance
    """
    config_file = Path(config_file) if config_file else get_config_file()
    if not config_file.exists():
        return Settings()

    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            config = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        logger.warning("Could not read config file %s: %s", config_file, e)
        return Settings()

    if not isinstance(config, dict):
        logger.warning("Config file %s must contain a JSON object", config_file)
        return Settings()

    tools = config.get('tools', {})
    if not isinstance(tools, dict):
        tools = {}

    featured = config.get('featured', FEATURED_ROUTES)
    if not isinstance(featured, list):
        featured = FEATURED_ROUTES

    return Settings(
        tools=tools,
        preview_limit=_read_int(config.get('menu', {}), 'preview_limit', DEFAULT_PREVIEW_LIMIT),
        tag_preview_limit=_read_int(config.get('listing', {}), 'tag_preview_limit', DEFAULT_TAG_PREVIEW_LIMIT),
        featured=list(featured)
    )
