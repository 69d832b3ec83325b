"""Application configuration via Pydantic Settings.

NOTE: Environment names are mapped explicitly (UTM_CALC_LOG_LEVEL,
UTM_CALC_RANGE_WIDTH) so a stray LOG_LEVEL from another tool is not picked up.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    # Logging
    log_level: str = Field(default="WARNING", validation_alias="UTM_CALC_LOG_LEVEL")

    # Output
    range_width: int = Field(default=6, ge=1, validation_alias="UTM_CALC_RANGE_WIDTH")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "validate_assignment": True,
    }

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level {value!r}, expected one of {', '.join(LOG_LEVELS)}")
        return level


settings = Settings()
