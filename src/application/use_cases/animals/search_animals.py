from __future__ import annotations

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.animal import Animal


async def execute(uow: UnitOfWork, animal_type: str) -> list[Animal]:
    # Exact, case-sensitive match on the type label
    items = [animal for animal in await uow.animals.list() if animal.type == animal_type]
    if not items:
        raise NotFound("No animal found with the given type.")
    return items
