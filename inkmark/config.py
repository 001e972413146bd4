"""
Application settings with JSON overrides from the user config directory.
"""
import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

from inkmark.utils.resource_loader import get_settings_path

logger = logging.getLogger(__name__)


@dataclass
class AppSettings:
    """User-tunable settings. Defaults match a fresh install."""
    max_upload_mb: float = 10
    highlight_color: str = "#ffff00"
    underline_color: str = "#0000ff"
    highlight_height: float = 20
    signature_stroke_width: float = 2.0
    toast_duration_ms: int = 3000
    dark_mode: bool = True
    log_level: str = "INFO"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppSettings":
        """
        Build settings from a dict.

        Unknown keys and values of the wrong type are ignored with a warning;
        the default is kept for those.
        """
        types = {f.name: f.type for f in fields(cls)}
        unknown = sorted(set(data) - set(types))
        if unknown:
            logger.warning("Ignoring unknown settings: %s", ", ".join(unknown))

        values = {}
        for key, value in data.items():
            if key not in types:
                continue
            if not _matches_type(value, types[key]):
                logger.warning("Ignoring setting %s: expected %s, got %r",
                               key, types[key].__name__, value)
                continue
            values[key] = value
        return cls(**values)


def _matches_type(value: Any, expected: type) -> bool:
    # bool is an int subclass but never a valid number here
    if isinstance(value, bool):
        return expected is bool
    if expected is float:
        return isinstance(value, (int, float))
    return isinstance(value, expected)


def load_settings(path: Optional[Union[str, Path]] = None) -> AppSettings:
    """
    Load settings from a JSON file.

    Args:
        path: Settings file; defaults to settings.json in the config directory

    Returns:
        Loaded settings, or defaults if the file is missing or unreadable
    """
    settings_path = Path(path) if path is not None else get_settings_path()
    if not settings_path.exists():
        return AppSettings()

    try:
        with open(settings_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Could not read settings from %s: %s", settings_path, e)
        return AppSettings()

    if not isinstance(data, dict):
        logger.warning("Settings file %s does not contain an object", settings_path)
        return AppSettings()

    return AppSettings.from_dict(data)
