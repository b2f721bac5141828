from __future__ import annotations

import logging

from src.application.errors import ArgumentError
from src.application.interfaces.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork, catalog_number: str | None) -> None:
    if catalog_number is None or not catalog_number.strip():
        raise ArgumentError("Catalog number cannot be empty.")
    # Deleting a missing animal is not an error
    deleted = await uow.animals.delete(catalog_number)
    await uow.commit()
    if deleted:
        logger.info("Animal %s deleted", catalog_number)
