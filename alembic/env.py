"""Alembic environment for the fun-fact overlay table.

The database URL comes from statefacts.config, so migrations and the app
always target the same database (DATABASE_URL, already asyncpg-normalized).
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.ext.asyncio import create_async_engine

from alembic import context

from statefacts.config import get_settings
from statefacts.db.base import Base
import statefacts.models  # noqa: F401

if context.config.config_file_name is not None:
    fileConfig(context.config.config_file_name)

DATABASE_URL = get_settings().database_url


def _migrate(connection=None) -> None:
    if connection is None:
        context.configure(
            url=DATABASE_URL, target_metadata=Base.metadata, literal_binds=True,
        )
    else:
        context.configure(connection=connection, target_metadata=Base.metadata)
    with context.begin_transaction():
        context.run_migrations()


async def _migrate_online() -> None:
    engine = create_async_engine(DATABASE_URL, poolclass=pool.NullPool)
    async with engine.connect() as connection:
        await connection.run_sync(_migrate)
    await engine.dispose()


if context.is_offline_mode():
    _migrate()
else:
    asyncio.run(_migrate_online())
