"""
Alembic migration environment for the CoachWeek schema.

The database URL comes from ``coachweek.core.config.settings`` unless one
is passed on the command line (``alembic -x db_url=... upgrade head``).
Enum columns are compared so status value changes show up in
autogenerated revisions.
"""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool
from sqlmodel import SQLModel

from coachweek.core.config import settings
from coachweek.db.base import *  # noqa

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

database_url = context.get_x_argument(as_dictionary=True).get("db_url") or settings.DATABASE_URL
config.set_main_option("sqlalchemy.url", database_url)

target_metadata = SQLModel.metadata


def _configure_options() -> dict:
    # SQLite cannot ALTER most constraints in place
    return {
        "target_metadata": target_metadata,
        "compare_type": True,
        "render_as_batch": database_url.startswith("sqlite"),
    }


def run_migrations_offline() -> None:
    """Emit the migration SQL to the script output without connecting."""
    context.configure(url=database_url, literal_binds=True, dialect_opts={"paramstyle": "named"},
                      **_configure_options())

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run the migrations against a live connection."""
    connectable = engine_from_config(config.get_section(config.config_ini_section, {}), prefix="sqlalchemy.",
                                     poolclass=pool.NullPool, )

    with connectable.connect() as connection:
        context.configure(connection=connection, **_configure_options())

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
