import logging
import os
import re
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel

from termpalette.config.schema import TermPaletteConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "~/.termpalette/termpalette.yml"
CONFIG_PATH_ENV = "TERMPALETTE_CONFIG"

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)\}")


def expand_env_vars(raw: object) -> object:
    """Recursively replace ${VAR} patterns in strings with environment values.

    Unset variables are left as written.
    """
    if isinstance(raw, dict):
        return {key: expand_env_vars(value) for key, value in raw.items()}
    if isinstance(raw, list):
        return [expand_env_vars(item) for item in raw]
    if isinstance(raw, str):
        return _ENV_VAR_RE.sub(lambda m: os.getenv(m.group(1), m.group(0)), raw)
    return raw


def _warn_unknown_keys(model: BaseModel, path: str, config_path: Path) -> None:
    """Recursively warn about unknown keys in a model and its nested models."""
    if model.model_extra:
        logger.warning("Unknown keys in %s at %s: %s", path, config_path, list(model.model_extra.keys()))

    for field_name, field_value in model.__dict__.items():
        if isinstance(field_value, BaseModel):
            _warn_unknown_keys(field_value, f"{path}.{field_name}", config_path)


def resolve_config_path(path: Optional[Path] = None) -> Path:
    """Pick the config file: explicit path, then $TERMPALETTE_CONFIG, then the default."""
    if path is not None:
        return path
    env_path = os.getenv(CONFIG_PATH_ENV)
    if env_path:
        return Path(env_path).expanduser()
    return Path(DEFAULT_CONFIG_PATH).expanduser()


def load_config(path: Optional[Path] = None) -> TermPaletteConfig:
    """Load and validate color configuration from a YAML file.

    Args:
        path: Path to termpalette.yml (see resolve_config_path for the default).

    Returns:
        The validated configuration; defaults when the file is missing or unreadable.

    Raises:
        pydantic.ValidationError: If a color value is not a palette name or pair number.
    """
    config_path = resolve_config_path(path)
    if not config_path.exists():
        logger.debug("No config at %s, using defaults", config_path)
        return TermPaletteConfig()

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Failed to read config file %s: %s", config_path, e)
        return TermPaletteConfig()

    model = TermPaletteConfig.model_validate(expand_env_vars(raw))
    _warn_unknown_keys(model, "root", config_path)
    return model
