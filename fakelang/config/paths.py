# fakelang/config/paths.py
import os
import sys
from pathlib import Path

def _get_app_name() -> str:
    # Centralize the app name
    return "FakeLang"

def get_user_data_dir() -> Path:
    """
    Get the per-user application directory.
    $FAKELANG_HOME wins; otherwise %APPDATA%/FakeLang on Windows, ~/.fakelang elsewhere.
    """
    override = os.environ.get("FAKELANG_HOME")
    if override:
        path = Path(override).expanduser()
    elif sys.platform == "win32":
        appdata_path = os.environ.get("APPDATA")
        base = Path(appdata_path) if appdata_path else Path.home() / "AppData/Roaming"
        path = base / _get_app_name()
    else:
        path = Path.home() / f".{_get_app_name().lower()}"

    path.mkdir(parents=True, exist_ok=True)
    return path

def get_user_config_file() -> Path:
    """Get the path to the user's config.json file."""
    return get_user_data_dir() / "config.json"

def get_user_log_dir() -> Path:
    """Get the path to the user's log directory."""
    path = get_user_data_dir() / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path

def get_default_data_dir() -> Path:
    """Word lists, corpora and cached dictionaries when the config names no directory."""
    return get_user_data_dir() / "data"
