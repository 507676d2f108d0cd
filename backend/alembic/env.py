from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool

from espace_formation.core.settings import settings
from espace_formation.db.base import Base
import espace_formation.models  # noqa: F401  (enregistre les tables dans Base.metadata)

"""
Environnement Alembic.

Rôle (fonctionnel) :
- Exécute les migrations en mode sync via DATABASE_URL_SYNC (psycopg).
- Cible la metadata ORM (Base.metadata) pour l’autogénération.
"""

config = context.config
config.set_main_option("sqlalchemy.url", settings.DATABASE_URL_SYNC)

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
