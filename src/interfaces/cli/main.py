r"""Console front end for the animal catalog.

Usage:
  zoo-catalog init-db
  zoo-catalog add 11HHTYRSDG9Q --name Kaya --breed "Mini spitz" --type Mammal \
      --age 2 --gender Female
  zoo-catalog list
  zoo-catalog get 11HHTYRSDG9Q
  zoo-catalog search Mammal
  zoo-catalog update 11HHTYRSDG9Q --name Kaya --breed "Mini spitz" --type Mammal \
      --age 3 --gender Female --unhealthy
  zoo-catalog delete 11HHTYRSDG9Q
  zoo-catalog serve --port 8000
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence

import uvicorn

from src.application.errors import AppError
from src.application.services.animals_manager import AnimalsManager
from src.config.logging_config import configure_logging
from src.config.settings import Settings, get_settings
from src.domain.models.animal import Animal
from src.infrastructure.db.session import (
    SQLAlchemyUnitOfWork,
    create_engine,
    create_session_factory,
    init_db,
)

logger = logging.getLogger(__name__)


def _add_record_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("catalog_number", help="12 uppercase letters or digits")
    parser.add_argument("--name", required=True)
    parser.add_argument("--breed", required=True)
    parser.add_argument("--type", dest="animal_type", required=True)
    parser.add_argument("--age", type=int, required=True)
    parser.add_argument("--gender", required=True)
    parser.add_argument(
        "--unhealthy",
        dest="is_healthy",
        action="store_false",
        help="Mark the animal as not healthy",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="zoo-catalog",
        description="Manage the zoo animal catalog",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--database-url", help="Overrides DATABASE_URL")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("init-db", help="Create the catalog tables")
    _add_record_arguments(subparsers.add_parser("add", help="Add a new animal"))
    _add_record_arguments(subparsers.add_parser("update", help="Overwrite an animal"))
    delete = subparsers.add_parser("delete", help="Delete an animal by catalog number")
    delete.add_argument("catalog_number")
    subparsers.add_parser("list", help="List every animal")
    get = subparsers.add_parser("get", help="Show one animal")
    get.add_argument("catalog_number")
    search = subparsers.add_parser("search", help="List animals of a type")
    search.add_argument("animal_type")
    serve = subparsers.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    return parser


def _animal_from_args(args: argparse.Namespace) -> Animal:
    return Animal(
        catalog_number=args.catalog_number,
        name=args.name,
        breed=args.breed,
        type=args.animal_type,
        age=args.age,
        gender=args.gender,
        is_healthy=args.is_healthy,
    )


async def run(args: argparse.Namespace, settings: Settings) -> list[str]:
    """Execute one command and return the lines to print."""
    engine = create_engine(settings.database_url)
    try:
        if args.command == "init-db" or settings.create_schema_on_startup:
            await init_db(engine)
        if args.command == "init-db":
            return ["Database ready."]

        session_factory = create_session_factory(engine)
        manager = AnimalsManager(lambda: SQLAlchemyUnitOfWork(session_factory))

        if args.command == "add":
            created = await manager.add(_animal_from_args(args))
            return [f"Added {created.catalog_number}."]
        if args.command == "update":
            updated = await manager.update(_animal_from_args(args))
            return [f"Updated {updated.catalog_number}."]
        if args.command == "delete":
            await manager.delete(args.catalog_number)
            return [f"Deleted {args.catalog_number}."]
        if args.command == "get":
            return [(await manager.get_specific(args.catalog_number)).describe()]
        if args.command == "search":
            return [animal.describe() for animal in await manager.search_by_type(args.animal_type)]
        return [animal.describe() for animal in await manager.get_all()]
    finally:
        await engine.dispose()


def serve(args: argparse.Namespace, settings: Settings) -> None:
    from src.interfaces.http.main import create_app

    uvicorn.run(
        create_app(settings=settings),
        host=args.host,
        port=args.port,
        log_level=settings.log_level.lower(),
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings(database_url=args.database_url) if args.database_url else get_settings()
    configure_logging(settings.log_level)
    if args.command == "serve":
        serve(args, settings)
        return 0
    try:
        lines = asyncio.run(run(args, settings))
    except AppError as exc:
        logger.debug("Command %s failed: %s", args.command, exc.code)
        print(exc.message, file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
