"""Tests for ingredient co-occurrence tracking."""

from gut_insights.services.co_occurrence import CoOccurrenceTracker
from gut_insights.services.correlation import CorrelationTally, PreparedMeal
from gut_insights.services.stats import compute_correlation_stats
from tests.conftest import BASE, hours_from, meal, poop


def _partner(stats: dict, name: str, other: str) -> dict | None:
    entries = stats["ingredients"][name].get("topCoOccurrences", [])
    return next((entry for entry in entries if entry["ingredient"] == other), None)


def test_pairs_in_suspect_meals_are_tracked() -> None:
    meals = [
        meal(hours_from(0), ["garlic", "cheese"]),
        meal(hours_from(48), ["garlic", "cheese"]),
        meal(hours_from(96), ["garlic", "rice"]),
    ]
    poops = [poop(hours_from(12)), poop(hours_from(60))]

    stats = compute_correlation_stats(meals, poops)

    assert stats["ingredients"]["garlic"]["topCoOccurrences"] == [
        {"ingredient": "cheese", "sharedMeals": 2, "sharedSuspectMeals": 2},
        {"ingredient": "rice", "sharedMeals": 1, "sharedSuspectMeals": 0},
    ]


def test_suspect_meals_counted_separately_from_total() -> None:
    meals = [
        meal(hours_from(0), ["garlic", "cheese"]),
        meal(hours_from(48), ["garlic", "cheese"]),
        meal(hours_from(96), ["garlic", "cheese"]),
    ]
    poops = [poop(hours_from(12)), poop(hours_from(108))]

    stats = compute_correlation_stats(meals, poops)

    entry = _partner(stats, "garlic", "cheese")
    assert entry == {"ingredient": "cheese", "sharedMeals": 3, "sharedSuspectMeals": 2}


def test_single_ingredient_meals_omit_co_occurrences() -> None:
    meals = [meal(hours_from(0), ["rice"]), meal(hours_from(48), ["rice"])]
    poops = [poop(hours_from(12))]

    stats = compute_correlation_stats(meals, poops)

    assert "topCoOccurrences" not in stats["ingredients"]["rice"]


def test_co_occurrences_limited_to_top_five() -> None:
    names = ["a", "b", "c", "d", "e", "f", "g"]
    meals = [meal(hours_from(0), names), meal(hours_from(48), names)]
    poops = [poop(hours_from(12))]

    stats = compute_correlation_stats(meals, poops)

    for name in names:
        assert len(stats["ingredients"][name]["topCoOccurrences"]) == 5
    top = stats["ingredients"]["a"]["topCoOccurrences"]
    assert [entry["ingredient"] for entry in top] == ["b", "c", "d", "e", "f"]


def test_repeated_ingredient_in_one_meal_counts_one_shared_meal() -> None:
    meals = [
        {
            "timestamp": hours_from(0),
            "foods": [
                {"name": "pasta", "ingredients": ["wheat", "garlic"]},
                {"name": "bread", "ingredients": ["wheat", "garlic"]},
            ],
        },
        meal(hours_from(48), ["wheat", "garlic"]),
    ]
    poops = [poop(hours_from(12))]

    stats = compute_correlation_stats(meals, poops)

    assert _partner(stats, "wheat", "garlic")["sharedMeals"] == 2


def test_tracker_orders_by_shared_meals() -> None:
    tally = CorrelationTally(
        meals=[
            PreparedMeal(BASE, ("garlic", "rice"), 1.0),
            PreparedMeal(BASE, ("garlic", "cheese"), 1.0),
            PreparedMeal(BASE, ("garlic", "onion", "cheese"), 1.0),
            PreparedMeal(BASE, ("garlic", "onion"), 1.0),
            PreparedMeal(BASE, ("onion", "garlic"), 1.0),
        ],
        tallies={},
        suspect_meals={0, 4},
    )

    result = CoOccurrenceTracker(limit=2).track(tally)

    assert [entry.ingredient for entry in result["garlic"]] == ["onion", "cheese"]
    assert result["garlic"][0].shared_meals == 3
    assert result["garlic"][0].shared_suspect_meals == 1
    assert [entry.ingredient for entry in result["rice"]] == ["garlic"]
