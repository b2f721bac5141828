from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Request

from src.config.settings import Settings
from src.infrastructure.db.session import SQLAlchemyUnitOfWork


async def get_uow(request: Request) -> AsyncIterator[SQLAlchemyUnitOfWork]:
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        raise RuntimeError("Session factory not configured")
    uow = SQLAlchemyUnitOfWork(session_factory)
    async with uow:
        yield uow


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
