"""Pairwise ingredient co-occurrence within meals."""

from dataclasses import dataclass
from itertools import combinations

from gut_insights.domain.stats import CoOccurrence
from gut_insights.services.correlation import CorrelationTally


@dataclass
class _PairCount:
    shared_meals: int = 0
    shared_suspect_meals: int = 0


@dataclass
class CoOccurrenceTracker:
    """Counts how often ingredients share a meal, and a suspect meal."""

    limit: int = 5

    def track(self, tally: CorrelationTally) -> dict[str, list[CoOccurrence]]:
        """Return each ingredient's most frequent meal companions."""
        partners: dict[str, dict[str, _PairCount]] = {}
        for index, meal in enumerate(tally.meals):
            suspect = index in tally.suspect_meals
            for first, second in combinations(meal.ingredients, 2):
                for name, other in ((first, second), (second, first)):
                    pair = partners.setdefault(name, {}).setdefault(other, _PairCount())
                    pair.shared_meals += 1
                    if suspect:
                        pair.shared_suspect_meals += 1

        return {
            name: [
                CoOccurrence(
                    ingredient=other,
                    shared_meals=pair.shared_meals,
                    shared_suspect_meals=pair.shared_suspect_meals,
                )
                for other, pair in sorted(
                    others.items(), key=lambda item: item[1].shared_meals, reverse=True
                )[: self.limit]
            ]
            for name, others in partners.items()
        }
