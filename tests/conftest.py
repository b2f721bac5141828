from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient

from src.application.services.animals_manager import AnimalsManager
from src.config.settings import Settings
from src.domain.models.animal import Animal
from src.infrastructure.db.base import Base
from src.infrastructure.db.orm import animal  # noqa: F401
from src.infrastructure.db.session import (
    SQLAlchemyUnitOfWork,
    create_engine,
    create_session_factory,
)
from src.interfaces.http.main import create_app


def make_animal(**overrides) -> Animal:
    values = {
        "catalog_number": "11HHTYRSDG9Q",
        "name": "Kaya",
        "breed": "Mini spitz",
        "type": "Mammal",
        "age": 2,
        "gender": "Female",
        "is_healthy": True,
    }
    values.update(overrides)
    return Animal(**values)


@pytest.fixture()
def animal_factory():
    return make_animal


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings.model_validate(
        {
            "database_url": f"sqlite+aiosqlite:///{db_path}",
            "log_level": "INFO",
            "environment": "test",
            "create_schema_on_startup": False,
        }
    )


@pytest.fixture()
async def engine(test_settings: Settings):
    engine = create_engine(test_settings.database_url)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture()
def manager(session_factory) -> AnimalsManager:
    return AnimalsManager(lambda: SQLAlchemyUnitOfWork(session_factory))


@pytest.fixture()
def app(test_settings: Settings):
    return create_app(settings=test_settings)


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        engine = app.state.engine
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
        yield client
    await app.state.engine.dispose()
