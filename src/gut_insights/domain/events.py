"""Input models for meal and bowel-movement events."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

MIN_BRISTOL = 1
MAX_BRISTOL = 7


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def _string_list(value: object) -> list[str]:
    if not isinstance(value, list | tuple):
        return []
    return [str(item) for item in value if item is not None]


class Food(BaseModel):
    """A detected food with its raw ingredient names."""

    model_config = ConfigDict(from_attributes=True)

    name: str = ""
    ingredients: list[str] = Field(default_factory=list)
    confidence: float = 1.0

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, value: object) -> str:
        return "" if value is None else str(value)

    @field_validator("ingredients", mode="before")
    @classmethod
    def _coerce_ingredients(cls, value: object) -> list[str]:
        return _string_list(value)

    @field_validator("confidence", mode="before")
    @classmethod
    def _coerce_confidence(cls, value: object) -> float:
        if isinstance(value, bool):
            return 1.0
        try:
            return float(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return 1.0


class Meal(BaseModel):
    """A logged meal made of one or more foods."""

    model_config = ConfigDict(from_attributes=True)

    timestamp: datetime
    foods: list[Food] = Field(default_factory=list)

    @field_validator("timestamp")
    @classmethod
    def _normalize_timestamp(cls, value: datetime) -> datetime:
        return _as_utc(value)

    @field_validator("foods", mode="before")
    @classmethod
    def _coerce_foods(cls, value: object) -> object:
        return value if isinstance(value, list | tuple) else []

    @property
    def confidence(self) -> float:
        """Meal reliability: the lowest confidence across its foods."""
        if not self.foods:
            return 1.0
        return min(food.confidence for food in self.foods)


class PoopEvent(BaseModel):
    """A logged bowel movement."""

    model_config = ConfigDict(from_attributes=True)

    timestamp: datetime
    severity: str | None = None
    symptoms: list[str] = Field(default_factory=list)

    @field_validator("timestamp")
    @classmethod
    def _normalize_timestamp(cls, value: datetime) -> datetime:
        return _as_utc(value)

    @field_validator("severity", mode="before")
    @classmethod
    def _coerce_severity(cls, value: object) -> str | None:
        if value is None or isinstance(value, bool):
            return None
        if isinstance(value, int | float | str):
            return str(value).strip()
        return None

    @field_validator("symptoms", mode="before")
    @classmethod
    def _coerce_symptoms(cls, value: object) -> list[str]:
        return _string_list(value)

    @property
    def bristol_type(self) -> int | None:
        """Severity as a Bristol type, or None when missing or out of range."""
        if self.severity is None:
            return None
        try:
            value = float(self.severity)
        except ValueError:
            return None
        if not value.is_integer() or not MIN_BRISTOL <= value <= MAX_BRISTOL:
            return None
        return int(value)
