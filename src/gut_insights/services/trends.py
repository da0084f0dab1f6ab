"""Before/after trend split of the event timeline."""

import statistics
from collections.abc import Sequence
from dataclasses import dataclass

from gut_insights.config import Settings
from gut_insights.domain.events import Meal, PoopEvent
from gut_insights.domain.stats import TemporalTrend, TrendHalf
from gut_insights.services.correlation import (
    bristol_distribution,
    span_in_days,
    symptom_distribution,
)


@dataclass
class TemporalTrendAnalyzer:
    """Compares the first and second half of the tracked period."""

    settings: Settings

    def analyze(
        self, meals: Sequence[Meal], poops: Sequence[PoopEvent], span_days: int
    ) -> TemporalTrend | None:
        """Split events at the chronological midpoint and summarize each half."""
        timestamps = sorted(
            [meal.timestamp for meal in meals] + [poop.timestamp for poop in poops]
        )
        if (
            len(timestamps) < self.settings.trend_min_events
            or span_days < self.settings.trend_min_span_days
        ):
            return None

        midpoint = timestamps[len(timestamps) // 2]
        return TemporalTrend(
            first_half=_summarize(
                [meal for meal in meals if meal.timestamp < midpoint],
                [poop for poop in poops if poop.timestamp < midpoint],
            ),
            second_half=_summarize(
                [meal for meal in meals if meal.timestamp >= midpoint],
                [poop for poop in poops if poop.timestamp >= midpoint],
            ),
            midpoint_date=midpoint.date(),
        )


def _summarize(meals: list[Meal], poops: list[PoopEvent]) -> TrendHalf:
    span = max(
        span_in_days([m.timestamp for m in meals] + [p.timestamp for p in poops]), 1
    )
    bristol_values = [p.bristol_type for p in poops if p.bristol_type is not None]
    return TrendHalf(
        poop_count=len(poops),
        meal_count=len(meals),
        span_days=span,
        poops_per_day=round(len(poops) / span, 1),
        avg_bristol=(
            round(statistics.fmean(bristol_values), 1) if bristol_values else None
        ),
        bristol_distribution=bristol_distribution(poops),
        symptom_counts=symptom_distribution(poops),
    )
