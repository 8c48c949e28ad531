"""
Catalog Seeder.

Loads the curated sample tools into the configured database.

Usage:
    python -m apps.seeder.main [--force] [--create-tables] [--database-url URL]

Skips seeding when the ``tools`` table already holds rows, unless --force.
Exit code 0 on success, 1 on failure.
"""

import argparse
import asyncio
import sys

from sqlalchemy.exc import SQLAlchemyError

from netbox_catalog.exceptions import StoreUnavailableError
from netbox_catalog.seed_data import sample_tools
from netbox_config.settings import Settings
from netbox_obs.logging import get_logger, setup_logging
from netbox_store.database import close_db_connections, create_tables, get_engine, get_session_factory
from netbox_store.stores import PostgresToolStore, ToolStore

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Seed the AINetBox catalog with sample tools")
    parser.add_argument("--force", action="store_true", help="Insert even if tools already exist")
    parser.add_argument("--create-tables", action="store_true", help="Create missing tables first (dev only)")
    parser.add_argument("--database-url", default=None, help="Override DATABASE_URL")
    return parser


async def seed(store: ToolStore, force: bool = False) -> int:
    """
    Insert the sample tools.

    Returns:
        Number of tools inserted (0 when skipped)
    """
    existing = await store.count()
    if existing and not force:
        logger.info("seed_skipped", existing_tools=existing)
        return 0

    created = await store.create_many(sample_tools())
    logger.info("seed_complete", inserted=len(created), previously=existing)
    return len(created)


async def main(argv: list[str] | None = None) -> int:
    """Main entry point for the seeder."""
    args = build_parser().parse_args(argv)
    settings = Settings()
    setup_logging(settings)

    database_url = args.database_url or settings.DATABASE_URL

    try:
        if args.create_tables:
            await create_tables(get_engine(database_url))

        store = PostgresToolStore(get_session_factory(database_url))
        await seed(store, force=args.force)
    except (StoreUnavailableError, SQLAlchemyError, OSError, ValueError) as e:
        logger.error("seed_failed", error=str(e), exc_type=type(e).__name__)
        return 1
    finally:
        await close_db_connections()

    return 0


def run() -> None:
    """Console-script entry point."""
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        logger.info("seeder_interrupted")
        sys.exit(1)


if __name__ == "__main__":
    run()
