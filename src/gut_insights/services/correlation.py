"""Time-windowed suspect/safe classification of ingredients.

For each bowel movement, meals eaten 6-36 hours earlier are "suspect" and
their ingredients get a suspect tally. Meals never followed by a bowel
movement inside that window mark their ingredients as "safe". The numbers are
computed up front so the insight prompt receives statistics, not raw logs.
"""

import math
import statistics
from collections import Counter
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from datetime import datetime, timedelta

from gut_insights.config import Settings
from gut_insights.domain.events import Meal, PoopEvent
from gut_insights.domain.ingredients import NormalizedIngredient
from gut_insights.domain.stats import CoOccurrence, IngredientStat, SymptomCount
from gut_insights.services.normalizer import normalize_ingredient

SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR

Normalizer = Callable[[object], NormalizedIngredient]


@dataclass(frozen=True)
class PreparedMeal:
    """Meal reduced to its timestamp, canonical ingredients and confidence."""

    timestamp: datetime
    ingredients: tuple[str, ...]
    confidence: float


@dataclass
class IngredientTally:
    """Mutable per-ingredient counters filled during one analysis run."""

    category: str | None = None
    suspect: int = 0
    safe: int = 0
    severe_suspect: int = 0
    frequency_suspect: int = 0
    low_confidence: int = 0
    lags: list[float] = field(default_factory=list)
    bristol: Counter[str] = field(default_factory=Counter)
    symptoms: Counter[str] = field(default_factory=Counter)

    @property
    def total(self) -> int:
        return self.suspect + self.safe


@dataclass
class CorrelationTally:
    """Raw output of the windowing pass, shared by the other analyzers."""

    meals: list[PreparedMeal]
    tallies: dict[str, IngredientTally]
    suspect_meals: set[int]


@dataclass
class CorrelationEngine:
    """Joins meals and bowel movements through the suspect window."""

    settings: Settings
    normalizer: Normalizer = normalize_ingredient

    def prepare_meals(
        self, meals: Sequence[Meal]
    ) -> tuple[list[PreparedMeal], dict[str, str | None]]:
        """Canonicalize each meal's ingredients, deduplicated per meal."""
        prepared: list[PreparedMeal] = []
        categories: dict[str, str | None] = {}
        for meal in meals:
            seen: dict[str, None] = {}
            for food in meal.foods:
                for raw in food.ingredients:
                    normalized = self.normalizer(raw)
                    if not normalized.canonical:
                        continue
                    seen.setdefault(normalized.canonical)
                    categories.setdefault(normalized.canonical, normalized.category)
            prepared.append(
                PreparedMeal(
                    timestamp=meal.timestamp,
                    ingredients=tuple(seen),
                    confidence=meal.confidence,
                )
            )
        return prepared, categories

    def in_window(self, meal_time: datetime, poop_time: datetime) -> bool:
        """Return True when the meal falls 6-36h (inclusive) before the poop."""
        earliest = poop_time - timedelta(hours=self.settings.window_max_hours)
        latest = poop_time - timedelta(hours=self.settings.window_min_hours)
        return earliest <= meal_time <= latest

    def tally(
        self, meals: Sequence[Meal], poops: Sequence[PoopEvent]
    ) -> CorrelationTally:
        """Accumulate suspect, safe and low-confidence counts per ingredient."""
        prepared, categories = self.prepare_meals(meals)
        tallies: dict[str, IngredientTally] = {}
        suspect_meals: set[int] = set()

        def tally_for(name: str) -> IngredientTally:
            if name not in tallies:
                tallies[name] = IngredientTally(category=categories.get(name))
            return tallies[name]

        for poop in poops:
            bristol = poop.bristol_type
            severe = (
                bristol is not None
                and bristol >= self.settings.severe_bristol_threshold
            )
            for index, meal in enumerate(prepared):
                if not self.in_window(meal.timestamp, poop.timestamp):
                    continue
                suspect_meals.add(index)
                lag_hours = (
                    poop.timestamp - meal.timestamp
                ).total_seconds() / SECONDS_PER_HOUR
                # one increment per (poop, meal) pairing
                for name in meal.ingredients:
                    entry = tally_for(name)
                    entry.suspect += 1
                    entry.lags.append(lag_hours)
                    if severe:
                        entry.severe_suspect += 1
                    if bristol is not None:
                        entry.bristol[str(bristol)] += 1
                    entry.symptoms.update(poop.symptoms)

        for index, meal in enumerate(prepared):
            low_confidence = meal.confidence < self.settings.low_confidence_threshold
            for name in meal.ingredients:
                entry = tally_for(name)
                if index not in suspect_meals:
                    entry.safe += 1
                if low_confidence:
                    entry.low_confidence += 1

        return CorrelationTally(
            meals=prepared, tallies=tallies, suspect_meals=suspect_meals
        )

    def build_ingredient_stats(
        self,
        tally: CorrelationTally,
        co_occurrences: dict[str, list[CoOccurrence]] | None = None,
    ) -> dict[str, IngredientStat]:
        """Turn raw tallies into reportable stats, dropping rare ingredients."""
        co_occurrences = co_occurrences or {}
        stats: dict[str, IngredientStat] = {}
        for name, entry in tally.tallies.items():
            total = entry.total
            if total < self.settings.min_ingredient_occurrences:
                continue
            top_symptoms = [
                SymptomCount(name=symptom, count=count)
                for symptom, count in top_counts(
                    entry.symptoms, self.settings.top_symptoms_limit
                )
            ]
            stats[name] = IngredientStat(
                total=total,
                suspect=entry.suspect,
                safe=entry.safe,
                suspect_rate=round(entry.suspect / total, 2),
                severe_suspect=entry.severe_suspect,
                severe_suspect_rate=round(entry.severe_suspect / total, 2),
                frequency_suspect=entry.frequency_suspect,
                frequency_suspect_rate=round(entry.frequency_suspect / total, 2),
                avg_lag_hours=(
                    round(statistics.median(entry.lags), 1) if entry.lags else None
                ),
                low_confidence_count=entry.low_confidence,
                category=entry.category,
                bristol_breakdown=dict(entry.bristol),
                top_symptoms=top_symptoms or None,
                top_co_occurrences=co_occurrences.get(name),
            )
        return stats


def top_counts(counter: Counter[str], limit: int) -> list[tuple[str, int]]:
    """Highest counts first; ties keep first-seen order."""
    return sorted(counter.items(), key=lambda item: item[1], reverse=True)[:limit]


def span_in_days(timestamps: Iterable[datetime]) -> int:
    """Whole days (rounded up) between the earliest and latest timestamp."""
    ordered = sorted(timestamps)
    if len(ordered) < 2:  # noqa: PLR2004
        return 0
    elapsed = (ordered[-1] - ordered[0]).total_seconds()
    return math.ceil(elapsed / SECONDS_PER_DAY)


def bristol_distribution(poops: Iterable[PoopEvent]) -> dict[str, int] | None:
    """Count valid Bristol types, or None when there are none."""
    counts = Counter(
        str(poop.bristol_type) for poop in poops if poop.bristol_type is not None
    )
    return dict(counts) or None


def symptom_distribution(poops: Iterable[PoopEvent]) -> dict[str, int] | None:
    """Count symptom tags across events, or None when there are none."""
    counts: Counter[str] = Counter()
    for poop in poops:
        counts.update(poop.symptoms)
    return dict(counts) or None
