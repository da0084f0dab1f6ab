"""Boundary parsing for raw meal and bowel-movement records."""

import logging
from collections.abc import Iterable
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from gut_insights.domain.events import Meal, PoopEvent

_logger = logging.getLogger(__name__)

_ModelT = TypeVar("_ModelT", bound=BaseModel)


def parse_meals(records: Iterable[object]) -> list[Meal]:
    """Validate raw meal records, skipping ones with unusable timestamps."""
    return _parse(Meal, records, kind="meal")


def parse_poops(records: Iterable[object]) -> list[PoopEvent]:
    """Validate raw bowel-movement records, skipping malformed ones."""
    return _parse(PoopEvent, records, kind="poop")


def _parse(
    model: type[_ModelT], records: Iterable[object], *, kind: str
) -> list[_ModelT]:
    parsed: list[_ModelT] = []
    for index, record in enumerate(records):
        if isinstance(record, model):
            parsed.append(record)
            continue
        try:
            parsed.append(model.model_validate(record))
        except ValidationError as exc:
            fields = sorted({".".join(map(str, err["loc"])) for err in exc.errors()})
            _logger.warning(
                "Skipping malformed %s record %s: %s error(s) in %s",
                kind,
                index,
                exc.error_count(),
                ", ".join(fields) or "record",
            )
    return parsed
