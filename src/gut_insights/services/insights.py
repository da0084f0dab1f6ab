"""Rolling-window insight statistics and readiness checks."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol
from uuid import UUID

from gut_insights.config import Settings
from gut_insights.domain.stats import CorrelationStats
from gut_insights.services.events import parse_meals, parse_poops
from gut_insights.services.stats import StatsService


class EventRepository(Protocol):
    """Read interface for a user's logged events."""

    def list_meals(self, user_id: UUID, start: datetime, end: datetime) -> list[object]:
        """Return meal records within a time range."""

    def list_poops(self, user_id: UUID, start: datetime, end: datetime) -> list[object]:
        """Return bowel-movement records within a time range."""


@dataclass(frozen=True)
class InsightProgress:
    """How much data a user has logged towards their first analysis."""

    meals_count: int
    poops_count: int
    days_covered: int
    ready: bool


def is_ready_for_insights(
    meals_count: int, poops_count: int, days_covered: int, settings: Settings
) -> bool:
    """Return True once enough events exist for a meaningful analysis."""
    return (
        meals_count >= settings.ready_min_meals
        and poops_count >= settings.ready_min_poops
    ) or (
        days_covered >= settings.ready_min_days
        and meals_count >= settings.ready_min_days_meals
        and poops_count >= settings.ready_min_days_poops
    )


@dataclass
class InsightsService:
    """Loads recent events for a user and computes their statistics."""

    repository: EventRepository
    stats_service: StatsService

    @property
    def settings(self) -> Settings:
        return self.stats_service.settings

    def get_recent_stats(
        self, user_id: UUID, now: datetime | None = None
    ) -> CorrelationStats:
        """Compute stats over the configured rolling window."""
        start, end = self._window(now)
        meals = self.repository.list_meals(user_id, start, end)
        poops = self.repository.list_poops(user_id, start, end)
        return self.stats_service.compute_from_records(meals, poops)

    def get_progress(self, user_id: UUID, now: datetime | None = None) -> InsightProgress:
        """Summarize logged data and whether analysis can run."""
        start, end = self._window(now)
        meals = parse_meals(self.repository.list_meals(user_id, start, end))
        poops = parse_poops(self.repository.list_poops(user_id, start, end))
        days = {meal.timestamp.date() for meal in meals}
        days.update(poop.timestamp.date() for poop in poops)
        return InsightProgress(
            meals_count=len(meals),
            poops_count=len(poops),
            days_covered=len(days),
            ready=is_ready_for_insights(
                len(meals), len(poops), len(days), self.settings
            ),
        )

    def _window(self, now: datetime | None) -> tuple[datetime, datetime]:
        end = now or datetime.now(tz=UTC)
        start = end - timedelta(days=self.settings.analysis_window_days)
        return start, end
