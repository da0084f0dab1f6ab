"""Dependency container wiring for the analysis services."""

from dataclasses import dataclass

from gut_insights.app_logging import configure_logging
from gut_insights.config import Settings
from gut_insights.services.insights import EventRepository, InsightsService
from gut_insights.services.stats import StatsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    stats_service: StatsService
    insights_service: InsightsService


def build_container(
    repository: EventRepository, settings: Settings | None = None
) -> AppContainer:
    """Create the default dependency container around an event repository."""
    resolved_settings = settings or Settings()
    configure_logging(resolved_settings.log_level)
    stats_service = StatsService(
        settings=resolved_settings,
        debug=resolved_settings.log_level.upper() == "DEBUG",
    )
    insights_service = InsightsService(
        repository=repository,
        stats_service=stats_service,
    )
    return AppContainer(
        settings=resolved_settings,
        stats_service=stats_service,
        insights_service=insights_service,
    )
