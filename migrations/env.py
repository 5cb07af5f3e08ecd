"""Alembic migration environment for the account server schema."""

from __future__ import annotations

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy.engine import Connection

from account_server.core.config import get_settings
from account_server.db import models  # noqa: F401
from account_server.infrastructure.database.base import Base
from account_server.infrastructure.database.session import dispose_engine, get_engine

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def _is_sqlite() -> bool:
    return get_settings().database_url.startswith("sqlite")


def _offline_url() -> str:
    # offline mode only renders SQL, so use the sync driver name
    return get_settings().database_url.replace("sqlite+aiosqlite", "sqlite")


def run_migrations_offline() -> None:
    """Emit migration SQL without connecting to the database."""
    context.configure(
        url=_offline_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        render_as_batch=_is_sqlite(),
    )

    with context.begin_transaction():
        context.run_migrations()


def _run_migrations_online(connection: Connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        compare_type=True,
        render_as_batch=_is_sqlite(),
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    async with get_engine().connect() as connection:
        await connection.run_sync(_run_migrations_online)
    await dispose_engine()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
