from logging.config import fileConfig
from alembic import context
from flask import current_app
import os
import sys

config = context.config


if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)


sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
import tablebook.models

def get_db():
    """The Flask-SQLAlchemy instance of the app running the migration."""
    return current_app.extensions["migrate"].db

target_metadata = get_db().metadata

def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode."""
    url = get_db().engine.url.render_as_string(hide_password=False)
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()

def run_migrations_online() -> None:
    """Run migrations in 'online' mode against the app's own engine."""
    connectable = get_db().engine

    with connectable.connect() as connection:
        context.configure(
            connection=connection, target_metadata=target_metadata
        )

        with context.begin_transaction():
            context.run_migrations()

if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
