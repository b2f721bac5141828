from __future__ import annotations

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.animal import Animal


async def execute(uow: UnitOfWork) -> list[Animal]:
    items = await uow.animals.list()
    if not items:
        raise NotFound("No animal found.")
    return items
