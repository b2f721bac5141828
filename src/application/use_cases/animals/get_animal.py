from __future__ import annotations

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.animal import Animal


async def execute(uow: UnitOfWork, catalog_number: str) -> Animal:
    animal = await uow.animals.get(catalog_number)
    if not animal:
        raise NotFound(f"No animal found with catalog number: {catalog_number}")
    return animal
