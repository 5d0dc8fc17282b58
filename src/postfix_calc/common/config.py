"""Runtime settings read from environment variables prefixed with POSTFIX_CALC_."""
import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Settings for the command-line front end.

    The calculation pipeline itself takes no configuration: these values only
    change how results are reported.
    """

    log_level: str = Field(default="WARNING", description="Logging level name")
    # One status for every error kind
    error_exit_code: int = Field(default=404, ge=1, description="Exit status for any failed calculation")

    model_config = SettingsConfigDict(env_prefix="POSTFIX_CALC_", env_file=".env", extra="ignore")

    @field_validator("log_level")
    def log_level_must_be_known(cls, v: str) -> str:
        """Ensure the level name is understood by the logging module."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("error_exit_code")
    def exit_code_must_survive_truncation(cls, v: int) -> int:
        """Reject codes that the OS would truncate to a success status."""
        if v % 256 == 0:
            raise ValueError(f"Exit code {v} would be reported as 0")
        return v
