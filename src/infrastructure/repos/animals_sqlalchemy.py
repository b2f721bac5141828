from __future__ import annotations

import logging

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError, InfrastructureError
from src.application.interfaces.repositories.animals import AnimalRepository
from src.domain.models.animal import Animal
from src.infrastructure.db.orm.animal import AnimalORM

logger = logging.getLogger(__name__)


class AnimalsSQLAlchemyRepository(AnimalRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: AnimalORM) -> Animal:
        return Animal(
            catalog_number=orm.catalog_number,
            name=orm.name,
            breed=orm.breed,
            type=orm.type,
            age=orm.age,
            gender=orm.gender,
            is_healthy=orm.is_healthy,
        )

    async def add(self, animal: Animal) -> Animal:
        orm = AnimalORM(
            catalog_number=animal.catalog_number,
            name=animal.name,
            breed=animal.breed,
            type=animal.type,
            age=animal.age,
            gender=animal.gender,
            is_healthy=animal.is_healthy,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError(
                f"Animal with catalog number {animal.catalog_number} already exists"
            ) from exc
        return self._to_domain(orm)

    async def get(self, catalog_number: str) -> Animal | None:
        stmt = select(AnimalORM).where(AnimalORM.catalog_number == catalog_number)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(self) -> list[Animal]:
        stmt = select(AnimalORM).order_by(AnimalORM.id)
        result = await self.session.execute(stmt)
        return [self._to_domain(item) for item in result.scalars().all()]

    async def update(self, animal: Animal) -> Animal | None:
        stmt = (
            update(AnimalORM)
            .where(AnimalORM.catalog_number == animal.catalog_number)
            .values(
                name=animal.name,
                breed=animal.breed,
                type=animal.type,
                age=animal.age,
                gender=animal.gender,
                is_healthy=animal.is_healthy,
            )
            .returning(AnimalORM)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise ConflictError("Failed to update animal due to constraint violation") from exc
        orm = result.scalar_one_or_none()
        if not orm:
            return None
        return self._to_domain(orm)

    async def delete(self, catalog_number: str) -> bool:
        stmt = (
            delete(AnimalORM)
            .where(AnimalORM.catalog_number == catalog_number)
            .returning(AnimalORM.id)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise InfrastructureError("Failed to delete animal") from exc
        deleted = result.scalar_one_or_none() is not None
        if not deleted:
            logger.debug("No animal with catalog number %s to delete", catalog_number)
        return deleted
