from logging import getLogger

from sqlalchemy import create_engine as _create_engine
from sqlalchemy import event

logger = getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    try:
        cursor.execute('PRAGMA foreign_keys=ON')
    finally:
        cursor.close()


def create_engine(connect_string, **options):
    """
    Create an engine for the given connection string.

    SQLite does not enforce foreign keys unless asked to on every connection,
    so a listener doing that is attached for SQLite engines.

    Args:
        connect_string (str): SQLAlchemy database URL.
        **options: Passed through to :func:`sqlalchemy.create_engine`.

    Returns:
        sqlalchemy.engine.Engine: Newly created engine.
    """
    engine = _create_engine(connect_string, **options)

    if engine.dialect.name == 'sqlite':
        logger.debug('Enabling foreign key enforcement for SQLite.')
        event.listen(engine, 'connect', _enable_sqlite_foreign_keys)

    return engine
