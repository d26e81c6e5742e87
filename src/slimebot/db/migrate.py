from logging import getLogger
from pathlib import Path

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext

from .engine import create_engine

logger = getLogger(__name__)
MIGRATIONS_DIR = Path(__file__).resolve().parent / 'migrations'


def get_config(url):
    """
    Build an Alembic config for the packaged migration environment.

    Args:
        url (str): SQLAlchemy URL of the database to migrate.

    Returns:
        alembic.config.Config: Config ready to be passed to :mod:`alembic.command`.
    """
    config = Config(str(MIGRATIONS_DIR / 'alembic.ini'))
    config.set_main_option('script_location', str(MIGRATIONS_DIR))
    # Config values go through ConfigParser interpolation
    config.set_main_option('sqlalchemy.url', url.replace('%', '%%'))
    return config


def upgrade(url, revision='head'):
    logger.info(f'Upgrading database to revision "{revision}".')
    command.upgrade(get_config(url), revision)


def downgrade(url, revision):
    logger.info(f'Downgrading database to revision "{revision}".')
    command.downgrade(get_config(url), revision)


def current_revision(url):
    """
    Look up the revision a database is currently at.

    Returns:
        typing.Optional[str]: Current revision or `None` if no migration has been applied yet.
    """
    engine = create_engine(url)
    try:
        with engine.connect() as connection:
            return MigrationContext.configure(connection).get_current_revision()
    finally:
        engine.dispose()
