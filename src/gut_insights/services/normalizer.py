"""Ingredient normalization for correlation analysis.

Maps ingredient variants to canonical names so that "whole milk", "2% milk"
and "skim milk" are all counted as "milk". Raw event data is never modified;
normalization only happens inside the stats pipeline.
"""

import re

from gut_insights.domain.ingredients import (
    CANONICAL_MAP,
    INGREDIENT_CATEGORIES,
    PREP_PREFIXES,
    NormalizedIngredient,
)

_SEPARATORS = re.compile(r"[-_%]")
_WHITESPACE = re.compile(r"\s+")
_MIN_PLURAL_LENGTH = 3


def clean_for_lookup(raw: object) -> str:
    """Lowercase and tidy a raw ingredient string into a lookup key."""
    if not isinstance(raw, str):
        return ""
    key = _SEPARATORS.sub(" ", raw.lower())
    return _WHITESPACE.sub(" ", key).strip()


def strip_prep_prefix(key: str) -> str | None:
    """Remove one leading preparation word, or return None if none matched."""
    for prefix in PREP_PREFIXES:
        if key.startswith(f"{prefix} "):
            return key[len(prefix) + 1 :].strip()
    return None


def normalize_ingredient(raw: object) -> NormalizedIngredient:
    """Normalize a raw ingredient name to its canonical form and category."""
    key = clean_for_lookup(raw)
    if not key:
        return NormalizedIngredient(canonical="")

    found = _lookup(key)
    if found is not None:
        return found

    stripped = strip_prep_prefix(key)
    if stripped:
        found = _lookup(stripped)
        if found is not None:
            return found

    for candidate in (key, stripped):
        singular = _singularize(candidate)
        if singular:
            found = _lookup(singular)
            if found is not None:
                return found

    return NormalizedIngredient(canonical=key)


def _lookup(key: str) -> NormalizedIngredient | None:
    canonical = CANONICAL_MAP.get(key)
    if canonical is not None:
        return NormalizedIngredient(
            canonical=canonical, category=INGREDIENT_CATEGORIES.get(canonical)
        )
    category = INGREDIENT_CATEGORIES.get(key)
    if category is not None:
        return NormalizedIngredient(canonical=key, category=category)
    return None


def _singularize(key: str | None) -> str | None:
    """Drop a trailing "s" from simple plurals."""
    if key and key.endswith("s") and len(key) > _MIN_PLURAL_LENGTH:
        return key[:-1]
    return None
