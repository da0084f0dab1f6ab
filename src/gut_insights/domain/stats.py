"""Domain models for correlation statistics."""

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class SymptomCount:
    """How often a symptom followed an ingredient."""

    name: str
    count: int

    def to_dict(self) -> dict[str, object]:
        return {"name": self.name, "count": self.count}


@dataclass(frozen=True)
class CoOccurrence:
    """Another ingredient eaten in the same meals."""

    ingredient: str
    shared_meals: int
    shared_suspect_meals: int

    def to_dict(self) -> dict[str, object]:
        return {
            "ingredient": self.ingredient,
            "sharedMeals": self.shared_meals,
            "sharedSuspectMeals": self.shared_suspect_meals,
        }


@dataclass(frozen=True)
class IngredientStat:
    """Suspect/safe tallies and derived rates for one canonical ingredient."""

    total: int
    suspect: int
    safe: int
    suspect_rate: float
    severe_suspect: int
    severe_suspect_rate: float
    frequency_suspect: int
    frequency_suspect_rate: float
    avg_lag_hours: float | None
    low_confidence_count: int
    category: str | None
    bristol_breakdown: dict[str, int] = field(default_factory=dict)
    top_symptoms: list[SymptomCount] | None = None
    top_co_occurrences: list[CoOccurrence] | None = None

    def to_dict(self) -> dict[str, object]:
        """Return the JSON-ready representation; optional lists are omitted."""
        payload: dict[str, object] = {
            "total": self.total,
            "suspect": self.suspect,
            "safe": self.safe,
            "suspectRate": self.suspect_rate,
            "severeSuspect": self.severe_suspect,
            "severeSuspectRate": self.severe_suspect_rate,
            "frequencySuspect": self.frequency_suspect,
            "frequencySuspectRate": self.frequency_suspect_rate,
            "avgLagHours": self.avg_lag_hours,
            "lowConfidenceCount": self.low_confidence_count,
            "category": self.category,
            "bristolBreakdown": dict(self.bristol_breakdown),
        }
        if self.top_symptoms is not None:
            payload["topSymptoms"] = [item.to_dict() for item in self.top_symptoms]
        if self.top_co_occurrences is not None:
            payload["topCoOccurrences"] = [
                item.to_dict() for item in self.top_co_occurrences
            ]
        return payload


@dataclass(frozen=True)
class SpikeDay:
    """A calendar day with unusually many bowel movements."""

    day: date
    count: int

    def to_dict(self) -> dict[str, object]:
        return {"date": self.day.isoformat(), "count": self.count}


@dataclass(frozen=True)
class FrequencyAnalysis:
    """Daily frequency baseline and spike days."""

    baseline_frequency: float
    high_baseline: bool
    spike_days: list[SpikeDay]
    days_tracked: int
    max_daily: int
    min_daily: int

    @property
    def total_spike_days(self) -> int:
        return len(self.spike_days)

    def to_dict(self) -> dict[str, object]:
        return {
            "baselineFrequency": self.baseline_frequency,
            "highBaseline": self.high_baseline,
            "spikeDays": [day.to_dict() for day in self.spike_days],
            "totalSpikeDays": self.total_spike_days,
            "daysTracked": self.days_tracked,
            "maxDaily": self.max_daily,
            "minDaily": self.min_daily,
        }


@dataclass(frozen=True)
class TrendHalf:
    """Aggregates for one half of the event timeline."""

    poop_count: int
    meal_count: int
    span_days: int
    poops_per_day: float
    avg_bristol: float | None
    bristol_distribution: dict[str, int] | None
    symptom_counts: dict[str, int] | None

    def to_dict(self) -> dict[str, object]:
        return {
            "poopCount": self.poop_count,
            "mealCount": self.meal_count,
            "spanDays": self.span_days,
            "poopsPerDay": self.poops_per_day,
            "avgBristol": self.avg_bristol,
            "bristolDistribution": self.bristol_distribution,
            "symptomCounts": self.symptom_counts,
        }


@dataclass(frozen=True)
class TemporalTrend:
    """Before/after comparison split at the timeline midpoint."""

    first_half: TrendHalf
    second_half: TrendHalf
    midpoint_date: date

    def to_dict(self) -> dict[str, object]:
        return {
            "firstHalf": self.first_half.to_dict(),
            "secondHalf": self.second_half.to_dict(),
            "midpointDate": self.midpoint_date.isoformat(),
        }


@dataclass(frozen=True)
class CorrelationStats:
    """Aggregate statistics handed to the insight prompt builder."""

    ingredients: dict[str, IngredientStat]
    total_meals: int
    total_poops: int
    span_days: int
    poops_per_day: float | None
    bristol_distribution: dict[str, int] | None
    symptom_distribution: dict[str, int] | None
    frequency_analysis: FrequencyAnalysis | None
    temporal_trend: TemporalTrend | None

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-serializable dict using camelCase keys."""
        return {
            "ingredients": {
                name: stat.to_dict() for name, stat in self.ingredients.items()
            },
            "totalMeals": self.total_meals,
            "totalPoops": self.total_poops,
            "spanDays": self.span_days,
            "poopsPerDay": self.poops_per_day,
            "bristolDistribution": self.bristol_distribution,
            "symptomDistribution": self.symptom_distribution,
            "frequencyAnalysis": (
                self.frequency_analysis.to_dict() if self.frequency_analysis else None
            ),
            "temporalTrend": (
                self.temporal_trend.to_dict() if self.temporal_trend else None
            ),
        }
