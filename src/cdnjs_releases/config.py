import os
from pathlib import Path
from typing import Dict, Optional

CONFIG_DIR = Path.home() / ".cdnjs-releases"
CONFIG_FILE = CONFIG_DIR / "config"

DEFAULT_REGISTRY_URL = "https://api.cdnjs.com"
DEFAULT_TIMEOUT = 10.0

REGISTRY_URL_KEY = "CDNJS_API_URL"
TIMEOUT_KEY = "CDNJS_TIMEOUT"

def _read_config(config_file: Path) -> Dict[str, str]:
    """read key=value pairs from the config file."""
    config = {}
    if not config_file.exists():
        return config

    try:
        with open(config_file, "r") as f:
            for line in f:
                line = line.strip()
                if "=" in line:
                    key, value = line.split("=", 1)
                    config[key] = value
    except (IOError, PermissionError, OSError):
        # if we can't read the file, treat as not configured
        return {}
    return config

def _get_value(key: str, config_file: Optional[Path] = None) -> Optional[str]:
    # environment wins over the config file
    value = os.environ.get(key)
    if value:
        return value
    return _read_config(config_file or CONFIG_FILE).get(key) or None

def get_registry_url(config_file: Optional[Path] = None) -> str:
    """get the registry base URL, falling back to the public cdnjs API."""
    url = _get_value(REGISTRY_URL_KEY, config_file) or DEFAULT_REGISTRY_URL
    return url.rstrip("/")

def get_timeout(config_file: Optional[Path] = None) -> float:
    value = _get_value(TIMEOUT_KEY, config_file)
    if value is None:
        return DEFAULT_TIMEOUT
    try:
        return float(value)
    except ValueError:
        return DEFAULT_TIMEOUT

def set_registry_url(url: str, config_file: Optional[Path] = None):
    """set the registry URL in config file, preserving other config values."""
    config_file = config_file or CONFIG_FILE
    config_file.parent.mkdir(parents=True, exist_ok=True)

    config = _read_config(config_file)
    config[REGISTRY_URL_KEY] = url

    try:
        with open(config_file, "w") as f:
            for key, value in config.items():
                f.write(f"{key}={value}\n")
    except (IOError, PermissionError, OSError) as e:
        raise RuntimeError(f"failed to write config file: {e}") from e
