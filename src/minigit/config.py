"""Engine configuration loaded from the environment."""

import os

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

from minigit.fs.local import DEFAULT_METADATA_DIR

DEFAULT_LOG_LEVEL = "WARNING"
_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class EngineConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    metadata_dir_name: str = DEFAULT_METADATA_DIR
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: str = ""

    @field_validator("metadata_dir_name")
    @classmethod
    def _check_metadata_dir_name(cls, value: str) -> str:
        value = value.strip()
        if not value or "/" in value or "\\" in value:
            raise ValueError(f"Invalid metadata directory name: {value!r}")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value!r}")
        return level


def load_config() -> EngineConfig:
    """Build EngineConfig from MINIGIT_* variables and a .env file in the working directory."""
    load_dotenv(find_dotenv(usecwd=True))
    return EngineConfig(
        metadata_dir_name=os.getenv("MINIGIT_METADATA_DIR", DEFAULT_METADATA_DIR),
        log_level=os.getenv("MINIGIT_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        log_file=os.getenv("MINIGIT_LOG_FILE", ""),
    )
