"""
Per-user directory lookup.
"""
import os
import sys
from pathlib import Path

APP_NAME = "InkmarkPDF"


def get_config_dir(app_name: str = APP_NAME, create: bool = True) -> Path:
    """
    Get the configuration directory for storing settings.

    Args:
        app_name: Name of the application
        create: Whether to create the directory if it is missing

    Returns:
        Path to the config directory
    """
    if os.name == 'nt':  # Windows
        base_dir = Path(os.environ.get('APPDATA', os.path.expanduser('~')))
        config_dir = base_dir / app_name / "config"
    elif sys.platform == 'darwin':  # macOS
        config_dir = Path.home() / "Library" / "Preferences" / app_name
    else:  # Linux
        xdg_config = os.environ.get('XDG_CONFIG_HOME')
        base_dir = Path(xdg_config) if xdg_config else Path.home() / ".config"
        config_dir = base_dir / app_name

    if create:
        config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_settings_path(app_name: str = APP_NAME) -> Path:
    """Path of the JSON settings file (it may not exist)."""
    return get_config_dir(app_name, create=False) / "settings.json"
