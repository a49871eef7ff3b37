"""Application settings using Pydantic BaseSettings for environment variable management."""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Global application settings loaded from environment variables.

    Attributes:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Log output format (json for production, console for dev)
        stage_min_duration: Lower bound of simulated stage duration in seconds
        stage_max_duration: Upper bound of simulated stage duration in seconds
        progress_step_min: Smallest progress increment per tick (percent)
        progress_step_max: Largest progress increment per tick (percent)
        random_seed: Optional seed pinning the random source used by the CLI
        max_display_flags: Maximum keyword flags rendered by the CLI
    """

    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )
    log_format: str = Field(
        default="json",
        description="Log output format: json or console"
    )
    stage_min_duration: float = Field(
        default=0.4,
        ge=0.0,
        description="Minimum simulated duration of one stage (seconds)"
    )
    stage_max_duration: float = Field(
        default=1.6,
        ge=0.0,
        description="Maximum simulated duration of one stage (seconds)"
    )
    progress_step_min: int = Field(
        default=8,
        ge=1,
        le=100,
        description="Minimum progress increment per tick"
    )
    progress_step_max: int = Field(
        default=25,
        ge=1,
        le=100,
        description="Maximum progress increment per tick"
    )
    random_seed: int | None = Field(
        default=None,
        description="Seed for the random source (None = unpinned)"
    )
    max_display_flags: int = Field(
        default=10,
        ge=0,
        description="Maximum keyword flags shown in CLI output"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "VERINEWS_",
        "case_sensitive": False,
    }

    @model_validator(mode="after")
    def check_ranges(self) -> "Settings":
        if self.stage_min_duration > self.stage_max_duration:
            raise ValueError("stage_min_duration must not exceed stage_max_duration")
        if self.progress_step_min > self.progress_step_max:
            raise ValueError("progress_step_min must not exceed progress_step_max")
        return self


# Singleton instance - import this throughout the application
settings = Settings()
