from __future__ import annotations

from collections.abc import Callable

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.animals import (
    add_animal,
    delete_animal,
    get_animal,
    list_animals,
    search_animals,
    update_animal,
)
from src.domain.models.animal import Animal


class AnimalsManager:
    """Catalog operations, each run in a fresh unit of work.

    Mutations are validated before anything reaches storage. Absence and
    invalid input surface as ``AppError`` subclasses; nothing is retried.
    """

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def add(self, animal: Animal) -> Animal:
        async with self._uow_factory() as uow:
            return await add_animal.execute(uow, animal)

    async def delete(self, catalog_number: str | None) -> None:
        async with self._uow_factory() as uow:
            await delete_animal.execute(uow, catalog_number)

    async def get_all(self) -> list[Animal]:
        async with self._uow_factory() as uow:
            return await list_animals.execute(uow)

    async def get_specific(self, catalog_number: str) -> Animal:
        async with self._uow_factory() as uow:
            return await get_animal.execute(uow, catalog_number)

    async def search_by_type(self, animal_type: str) -> list[Animal]:
        async with self._uow_factory() as uow:
            return await search_animals.execute(uow, animal_type)

    async def update(self, animal: Animal) -> Animal:
        async with self._uow_factory() as uow:
            return await update_animal.execute(uow, animal)
