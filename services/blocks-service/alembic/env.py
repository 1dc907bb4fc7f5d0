import os
from logging.config import fileConfig

from alembic import context
from backend_common.database import to_sync_url
from blocks_service.config import get_settings
from blocks_service.models import Base
from sqlalchemy import create_engine

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)


target_metadata = Base.metadata


def _database_url() -> str:
    """Sync driver URL for Alembic; the service itself runs on async drivers."""
    url = os.getenv("BLOCKS_DATABASE_URL") or get_settings().BLOCKS_DATABASE_URL
    return to_sync_url(url)


def run_migrations_offline():
    """Run migrations in 'offline' mode."""
    context.configure(
        url=_database_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    """Run migrations in 'online' mode."""
    connectable = create_engine(_database_url())

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            render_as_batch=connection.dialect.name == "sqlite",
        )

        with context.begin_transaction():
            context.run_migrations()

    connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
