# flowershop/database/alembic/env.py
from __future__ import annotations

import os
from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool, text
from sqlalchemy.engine import Connection

from flowershop.common.settings import get_settings
from flowershop.database.models import Base

cfg = get_settings()
alembic_config = context.config

if alembic_config.config_file_name is not None:
    fileConfig(alembic_config.config_file_name)

# DATABASE_URL in the environment beats .env / defaults
database_url = os.getenv("DATABASE_URL", cfg.database_url)
target_metadata = Base.metadata
version_table_schema = cfg.alembic_version_table_schema


def include_object(object, name, type_, reflected, compare_to):
    """Autogenerate only looks at catalog tables and the version table."""
    if type_ != "table":
        return True
    schema = getattr(object, "schema", None)
    return schema is None or schema in {cfg.db_schema, version_table_schema}


def _configure(**kw) -> None:
    context.configure(
        target_metadata=target_metadata,
        include_schemas=True,
        include_object=include_object,
        version_table_schema=version_table_schema,
        **kw,
    )


def run_migrations_offline() -> None:
    _configure(url=database_url, literal_binds=True, dialect_opts={"paramstyle": "named"})
    with context.begin_transaction():
        context.run_migrations()


def _prepare_connection(conn: Connection) -> None:
    """Catalog schema, search_path and pgcrypto (for gen_random_uuid)."""
    conn.execute(text(f'CREATE SCHEMA IF NOT EXISTS "{cfg.db_schema}"'))
    conn.execute(text(f'SET search_path TO "{cfg.db_schema}", public'))
    conn.execute(text('CREATE EXTENSION IF NOT EXISTS "pgcrypto"'))


def run_migrations_online() -> None:
    engine = create_engine(database_url, poolclass=pool.NullPool, future=True)
    with engine.connect() as connection:
        _prepare_connection(connection)
        _configure(connection=connection, compare_type=True, compare_server_default=True)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
