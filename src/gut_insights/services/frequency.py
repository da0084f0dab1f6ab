"""Daily bowel-movement frequency baseline and spike attribution."""

import statistics
from collections import defaultdict
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, datetime

from gut_insights.domain.events import PoopEvent
from gut_insights.domain.stats import FrequencyAnalysis, SpikeDay
from gut_insights.services.correlation import CorrelationEngine, CorrelationTally


@dataclass
class FrequencyAnalyzer:
    """Flags days with unusually many bowel movements for this user.

    A day is a spike only when its count exceeds both the healthy ceiling and
    the user's own median, so users with a naturally high baseline do not
    produce constant false signal.
    """

    engine: CorrelationEngine

    def analyze(
        self, tally: CorrelationTally, poops: Sequence[PoopEvent]
    ) -> FrequencyAnalysis | None:
        """Compute the baseline and add spike-day counts to the tallies."""
        if not poops:
            return None

        per_day: dict[date, list[datetime]] = defaultdict(list)
        for poop in poops:
            per_day[poop.timestamp.date()].append(poop.timestamp)
        counts = {day: len(times) for day, times in per_day.items()}

        baseline = statistics.median(counts.values())
        ceiling = self.engine.settings.healthy_daily_ceiling
        threshold = max(ceiling, baseline)
        spike_days = [
            SpikeDay(day=day, count=count)
            for day, count in sorted(counts.items())
            if count > threshold
        ]

        for spike in spike_days:
            self._attribute(tally, per_day[spike.day])

        return FrequencyAnalysis(
            baseline_frequency=baseline,
            high_baseline=baseline > ceiling,
            spike_days=spike_days,
            days_tracked=len(counts),
            max_daily=max(counts.values()),
            min_daily=min(counts.values()),
        )

    def _attribute(self, tally: CorrelationTally, poop_times: list[datetime]) -> None:
        """Credit each implicated ingredient once for this spike day."""
        implicated: dict[str, None] = {}
        for meal in tally.meals:
            if any(self.engine.in_window(meal.timestamp, t) for t in poop_times):
                for name in meal.ingredients:
                    implicated.setdefault(name)
        for name in implicated:
            tally.tallies[name].frequency_suspect += 1
