"""Orchestration of the ingredient statistics pipeline."""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from gut_insights.config import Settings
from gut_insights.domain.events import Meal, PoopEvent
from gut_insights.domain.stats import CorrelationStats
from gut_insights.services.co_occurrence import CoOccurrenceTracker
from gut_insights.services.correlation import (
    CorrelationEngine,
    Normalizer,
    bristol_distribution,
    span_in_days,
    symptom_distribution,
)
from gut_insights.services.events import parse_meals, parse_poops
from gut_insights.services.frequency import FrequencyAnalyzer
from gut_insights.services.normalizer import normalize_ingredient
from gut_insights.services.trends import TemporalTrendAnalyzer

_logger = logging.getLogger(__name__)


@dataclass
class StatsService:
    """Computes per-ingredient trigger statistics from meal and poop logs."""

    settings: Settings = field(default_factory=Settings)
    normalizer: Normalizer = normalize_ingredient
    debug: bool = False

    def compute(
        self, meals: Sequence[Meal], poops: Sequence[PoopEvent]
    ) -> CorrelationStats:
        """Run every analyzer over validated events and combine the results."""
        engine = CorrelationEngine(self.settings, self.normalizer)
        tally = engine.tally(meals, poops)
        frequency = FrequencyAnalyzer(engine).analyze(tally, poops)
        co_occurrences = CoOccurrenceTracker(
            limit=self.settings.top_co_occurrences_limit
        ).track(tally)
        ingredients = engine.build_ingredient_stats(tally, co_occurrences)

        span_days = span_in_days(
            [meal.timestamp for meal in meals] + [poop.timestamp for poop in poops]
        )
        trend = TemporalTrendAnalyzer(self.settings).analyze(meals, poops, span_days)
        stats = CorrelationStats(
            ingredients=ingredients,
            total_meals=len(meals),
            total_poops=len(poops),
            span_days=span_days,
            poops_per_day=round(len(poops) / span_days, 1) if span_days else None,
            bristol_distribution=bristol_distribution(poops),
            symptom_distribution=symptom_distribution(poops),
            frequency_analysis=frequency,
            temporal_trend=trend,
        )
        if self.debug:
            _logger.info(
                "Computed stats: meals=%s poops=%s span_days=%s ingredients=%s",
                stats.total_meals,
                stats.total_poops,
                stats.span_days,
                len(ingredients),
            )
        return stats

    def compute_from_records(
        self, meals: Iterable[object], poops: Iterable[object]
    ) -> CorrelationStats:
        """Validate raw records at the boundary, then compute stats."""
        return self.compute(parse_meals(meals), parse_poops(poops))


def compute_correlation_stats(
    meals: Iterable[object],
    poops: Iterable[object],
    settings: Settings | None = None,
) -> dict[str, object]:
    """Return JSON-ready correlation stats for raw or validated events."""
    service = StatsService(settings or Settings())
    return service.compute_from_records(meals, poops).to_dict()
