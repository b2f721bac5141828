"""Field constraints for animal records.

The rules are declared once on a pydantic model and applied to domain
``Animal`` instances, so callers only ever see a yes/no answer.
"""

from __future__ import annotations

from dataclasses import asdict

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from src.domain.models.animal import Animal

CATALOG_NUMBER_PATTERN = r"^[A-Z0-9]{12}$"


class AnimalConstraints(BaseModel):
    model_config = ConfigDict(strict=True, extra="forbid")

    catalog_number: str = Field(min_length=12, max_length=12, pattern=CATALOG_NUMBER_PATTERN)
    name: str = Field(min_length=2, max_length=30)
    breed: str = Field(min_length=2, max_length=30)
    type: str = Field(min_length=2, max_length=30)
    age: int = Field(ge=0, le=99)
    gender: str = Field(min_length=2, max_length=10)
    is_healthy: bool


def validation_errors(animal: Animal) -> list[str]:
    """Return the names of the fields that break a constraint (empty when valid)."""
    try:
        AnimalConstraints.model_validate(asdict(animal))
    except PydanticValidationError as exc:
        return [".".join(str(part) for part in error["loc"]) for error in exc.errors()]
    return []


def is_valid(animal: Animal) -> bool:
    return not validation_errors(animal)
