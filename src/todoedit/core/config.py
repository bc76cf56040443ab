"""Config loading and saving for todoedit"""

from pathlib import Path

import yaml
from pydantic import ValidationError

from todoedit.models.config import TodoEditConfig


# Config lives in .todoedit/config.yaml in current working directory
CONFIG_DIR = Path(".todoedit")
CONFIG_FILE = CONFIG_DIR / "config.yaml"


class ConfigNotFoundError(Exception):
    """Raised when config file doesn't exist"""

    pass


class ConfigInvalidError(Exception):
    """Raised when config file is invalid"""

    pass


def get_config_path() -> Path:
    """Get the config file path (relative to cwd)"""
    return CONFIG_FILE


def config_exists() -> bool:
    """Check if config file exists"""
    return CONFIG_FILE.exists()


def load_config() -> TodoEditConfig:
    """Load config from .todoedit/config.yaml

    Raises:
        ConfigNotFoundError: If config file doesn't exist
        ConfigInvalidError: If config file is invalid
    """
    if not CONFIG_FILE.exists():
        raise ConfigNotFoundError(
            f"Config file not found at {CONFIG_FILE}\n"
            f"Run 'todoedit init' to create one."
        )

    try:
        with open(CONFIG_FILE, "r") as f:
            data = yaml.safe_load(f)

        # An empty file means "all defaults"
        if data is None:
            return TodoEditConfig()

        if not isinstance(data, dict):
            raise ConfigInvalidError(f"Config must be a mapping: {CONFIG_FILE}")

        return TodoEditConfig.model_validate(data)

    except yaml.YAMLError as e:
        raise ConfigInvalidError(f"Invalid YAML in config file: {e}")
    except ValidationError as e:
        raise ConfigInvalidError(f"Invalid config: {e}")


def save_config(config: TodoEditConfig) -> Path:
    """Save config to .todoedit/config.yaml"""
    CONFIG_DIR.mkdir(exist_ok=True)

    data = config.model_dump()

    with open(CONFIG_FILE, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)

    return CONFIG_FILE


def create_config(**overrides) -> TodoEditConfig:
    """Create and save a new config"""
    config = TodoEditConfig(**overrides)
    save_config(config)
    return config
