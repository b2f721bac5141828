from __future__ import annotations

import logging

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.animals.add_animal import ensure_valid
from src.domain.models.animal import Animal

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork, animal: Animal) -> Animal:
    ensure_valid(animal)
    updated = await uow.animals.update(animal)
    if not updated:
        raise NotFound(f"No animal found with catalog number: {animal.catalog_number}")
    await uow.commit()
    logger.info("Animal %s updated", updated.catalog_number)
    return updated
