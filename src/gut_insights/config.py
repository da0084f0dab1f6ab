"""Application configuration."""

import os
from typing import Self

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Analysis thresholds loaded from environment variables."""

    window_min_hours: float = 6
    window_max_hours: float = 36
    severe_bristol_threshold: int = 5
    low_confidence_threshold: float = 0.7
    min_ingredient_occurrences: int = 2
    healthy_daily_ceiling: int = 3
    top_symptoms_limit: int = 3
    top_co_occurrences_limit: int = 5
    trend_min_events: int = 4
    trend_min_span_days: int = 4
    analysis_window_days: int = 30
    ready_min_meals: int = 3
    ready_min_poops: int = 2
    ready_min_days: int = 2
    ready_min_days_meals: int = 2
    ready_min_days_poops: int = 1
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="GUT_INSIGHTS_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @model_validator(mode="after")
    def _check_window(self) -> Self:
        if self.window_min_hours > self.window_max_hours:
            msg = "window_min_hours must not exceed window_max_hours"
            raise ValueError(msg)
        return self
