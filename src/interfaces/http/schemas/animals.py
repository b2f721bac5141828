from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from src.domain.models.animal import Animal


# Field bounds are enforced by the domain validator, not here, so that an
# out-of-range record is reported as an invalid animal. Types are strict: a
# bool age or a "yes" health flag must not be coerced into a valid record.
class AnimalFields(BaseModel):
    model_config = ConfigDict(strict=True)

    name: str
    breed: str
    type: str
    age: int
    gender: str
    is_healthy: bool = True


class AnimalCreate(AnimalFields):
    catalog_number: str

    def to_domain(self) -> Animal:
        return Animal(**self.model_dump())


class AnimalUpdate(AnimalFields):
    def to_domain(self, catalog_number: str) -> Animal:
        return Animal(catalog_number=catalog_number, **self.model_dump())


class AnimalResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    catalog_number: str
    name: str
    breed: str
    type: str
    age: int
    gender: str
    is_healthy: bool


class AnimalsListResponse(BaseModel):
    items: list[AnimalResponse]
    total: int
