"""Config model for todoedit"""

import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, field_validator

from todoedit.models.item import DEFAULT_DESCRIPTION, DEFAULT_PRIORITY, DEFAULT_TITLE


class TodoEditConfig(BaseModel):
    """Configuration for todoedit - stored in .todoedit/config.yaml"""

    title: str = "icedtodo"

    # Text given to newly appended items
    default_title: str = DEFAULT_TITLE
    default_description: str = DEFAULT_DESCRIPTION
    default_priority: int = DEFAULT_PRIORITY

    log_level: str = "WARNING"
    log_file: Optional[str] = None

    # Raise instead of warn when the edit field changes outside edit mode
    strict_contracts: bool = False

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept any standard logging level name, case-insensitively"""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v}")
        return level

    @property
    def log_path(self) -> Optional[Path]:
        """Get log_file as Path object"""
        return Path(self.log_file) if self.log_file else None
