import copy
import os
import re
import yaml
from pathlib import Path
from typing import Dict, Any, Optional

from dotenv import find_dotenv, load_dotenv


DEFAULTS: Dict[str, Any] = {
    "resolution": {
        "strategy": "${HORNLOG_STRATEGY:sld}",
        "max_depth": "${HORNLOG_MAX_DEPTH:}",
    },
    "ingest": {
        "atomic": True,
    },
    "logging": {
        "level": "${HORNLOG_LOG_LEVEL:WARNING}",
    },
}

# ${NAME} or ${NAME:default}, covering the whole value
PLACEHOLDER = re.compile(r"^\$\{(\w+)(?::(.*))?\}$")


def _expand(value):
    """Replace placeholders with environment values, parsed as YAML scalars."""
    if isinstance(value, dict):
        return {k: _expand(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_expand(v) for v in value]
    if isinstance(value, str):
        match = PLACEHOLDER.match(value)
        if match:
            name, default = match.group(1), match.group(2) or ""
            return yaml.safe_load(os.environ.get(name, default))
    return value


def _deep_update(d, u):
    for k, v in u.items():
        if isinstance(v, dict):
            d[k] = _deep_update(d.get(k) or {}, v)
        else:
            d[k] = v
    return d


def find_config_file() -> Optional[str]:
    """First existing config file, or None to run on the built-in defaults.

    $HORNLOG_CONFIG wins over ./configs/default.yaml, which wins over
    ~/.hornlog/config.yaml.
    """
    candidates = [
        os.environ.get("HORNLOG_CONFIG"),
        Path.cwd() / "configs" / "default.yaml",
        Path.home() / ".hornlog" / "config.yaml",
    ]
    for candidate in candidates:
        if candidate and Path(candidate).exists():
            return str(candidate)
    return None


class Config:
    """Layered settings: DEFAULTS, then the YAML file, then placeholders."""

    def __init__(self, config_path: Optional[str] = None, load_env: bool = True):
        if load_env:
            load_dotenv(find_dotenv(usecwd=True))
        self.config_path = config_path or find_config_file()

        settings = copy.deepcopy(DEFAULTS)
        if self.config_path is not None:
            with open(self.config_path, 'r') as f:
                _deep_update(settings, yaml.safe_load(f) or {})
        self.config = _expand(settings)

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a dot-separated key such as 'resolution.max_depth'."""
        value = self.config
        for part in key.split('.'):
            if not isinstance(value, dict) or part not in value:
                return default
            value = value[part]
        return value

    __getitem__ = get

    def update(self, updates: Dict[str, Any]):
        """Merge nested overrides, e.g. from command line flags."""
        _deep_update(self.config, updates)


# Global config instance
_config = None

def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config
