"""Runtime configuration, read from REPROMPT_* environment variables."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic_settings import BaseSettings, SettingsConfigDict


@dataclass(frozen=True)
class ValidationPolicy:
    """Thresholds used by ResourceTransaction.validate()."""
    min_content_length: int = 10  # trimmed length counted as "substantial"
    shrink_warning_ratio: float = 0.9
    shrink_warning_min_size: int = 200


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="REPROMPT_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Resource backend: auto, wsl, native, memory
    backend: str = "auto"
    log_level: str = "WARNING"

    # Validation
    min_content_length: int = 10
    shrink_warning_ratio: float = 0.9
    shrink_warning_min_size: int = 200

    def validation_policy(self) -> ValidationPolicy:
        return ValidationPolicy(
            min_content_length=self.min_content_length,
            shrink_warning_ratio=self.shrink_warning_ratio,
            shrink_warning_min_size=self.shrink_warning_min_size,
        )
