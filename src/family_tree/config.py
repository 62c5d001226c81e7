import yaml
from pathlib import Path
from typing import Optional

from family_tree.utils.pathing import config_file_path, project_root

CONFIG_PATH = config_file_path("family_tree.yml")

DEFAULT_TREE_SETTINGS = {
    "strict": True,
    "allowed_genders": ["M", "F"],
    "validate_dates": False,
}

DEFAULT_LOGGING_SETTINGS = {
    "level": "INFO",
    "file": "family_tree.log",
    "rotate": False,
}

class FTConfig:
    def __init__(self, data, root: Optional[Path] = None):
        self.paths = data.get("paths", {})
        self.logging = {**DEFAULT_LOGGING_SETTINGS, **(data.get("logging") or {})}
        self.tree = {**DEFAULT_TREE_SETTINGS, **(data.get("tree") or {})}
        self.debug = data.get("debug", False)
        # Relative paths (e.g. the log directory) resolve against this.
        self.root = Path(root) if root is not None else Path.cwd()

def load_config(path: Optional[Path] = None) -> 'FTConfig':
    path = Path(path) if path is not None else CONFIG_PATH
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    root = project_root() if path == CONFIG_PATH else path.parent
    return FTConfig(data, root=root)

_config_cache = None

def get_config() -> 'FTConfig':
    """
    Return the cached configuration.

    Outside a source checkout (e.g. a regular ``pip install``) there is no
    ``config/family_tree.yml``; built-in defaults are used and relative paths
    resolve against the current directory.
    """
    global _config_cache
    if _config_cache is None:
        if CONFIG_PATH.exists():
            _config_cache = load_config()
        else:
            _config_cache = FTConfig({})
    return _config_cache

def reset_config() -> None:
    """Drop the cached configuration so the next get_config() reloads it."""
    global _config_cache
    _config_cache = None
