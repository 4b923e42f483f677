"""Locations of the settings file and of the definition files."""

import os
from pathlib import Path

from appdirs import user_config_dir
from pydantic import BaseModel, field_validator

from composekey.data import RULES_DIR
from composekey.utils.constants import Constants
from composekey.utils.helpers import expand_file_path

APP_NAME = "composekey"
CONFIG_DIR_ENV = "COMPOSEKEY_CONFIG_DIR"
DATA_DIR_ENV = "COMPOSEKEY_DATA_DIR"


class AppPaths(BaseModel):
    """Directories the settings store reads from and writes to."""

    config_dir: Path
    data_dir: Path
    user_dir: Path

    @field_validator("config_dir", "data_dir", "user_dir", mode="before")
    @classmethod
    def expand(cls, v):
        """Expand ~ and environment variables."""
        if isinstance(v, (str, Path)):
            return expand_file_path(v) or v
        return v

    @property
    def config_file(self) -> Path:
        return self.config_dir / Constants.CONFIG_FILE_NAME

    def rule_files(self) -> list[Path]:
        """Definition files in load order: bundled ones first, user overrides last."""
        system = [self.data_dir / name for name in Constants.SYSTEM_RULE_FILES]
        user = [self.user_dir / name for name in Constants.USER_RULE_FILES]
        return system + user


def default_paths(
    config_dir: str | Path | None = None,
    data_dir: str | Path | None = None,
    user_dir: str | Path | None = None,
) -> AppPaths:
    """Resolve paths with priority: arguments > environment > platform defaults."""
    return AppPaths(
        config_dir=config_dir or os.environ.get(CONFIG_DIR_ENV) or user_config_dir(APP_NAME),
        data_dir=data_dir or os.environ.get(DATA_DIR_ENV) or RULES_DIR,
        user_dir=user_dir or Path.home(),
    )
