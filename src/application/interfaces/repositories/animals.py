from __future__ import annotations

from typing import Protocol

from src.domain.models.animal import Animal


class AnimalRepository(Protocol):
    async def add(self, animal: Animal) -> Animal: ...

    async def get(self, catalog_number: str) -> Animal | None: ...

    async def list(self) -> list[Animal]: ...

    async def update(self, animal: Animal) -> Animal | None: ...

    async def delete(self, catalog_number: str) -> bool: ...
