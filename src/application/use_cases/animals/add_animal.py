from __future__ import annotations

import logging

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.validators.animals import validation_errors
from src.domain.models.animal import Animal

logger = logging.getLogger(__name__)


def ensure_valid(animal: Animal) -> None:
    invalid_fields = validation_errors(animal)
    if invalid_fields:
        raise ValidationError("Invalid animal!", details={"fields": invalid_fields})


async def execute(uow: UnitOfWork, animal: Animal) -> Animal:
    ensure_valid(animal)
    created = await uow.animals.add(animal)
    await uow.commit()
    logger.info("Animal %s added", created.catalog_number)
    return created
