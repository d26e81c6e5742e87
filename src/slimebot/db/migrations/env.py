from logging import getLogger

from alembic import context

from slimebot.db import Base, create_engine

logger = getLogger('alembic.env')
config = context.config
target_metadata = Base.metadata


def get_url():
    url = context.get_x_argument(as_dictionary=True).get('url')
    if not url:
        url = config.get_main_option('sqlalchemy.url')

    if not url:
        raise RuntimeError('No database URL given. Pass one with "-x url=..."')

    return url


def run_migrations_offline():
    """Emit the migration SQL to the script output instead of a database."""
    context.configure(
        url=get_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        render_as_batch=True
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    engine = create_engine(get_url())

    try:
        with engine.connect() as connection:
            context.configure(
                connection=connection,
                target_metadata=target_metadata,
                render_as_batch=True
            )

            with context.begin_transaction():
                context.run_migrations()
    finally:
        engine.dispose()


if context.is_offline_mode():
    logger.info('Running migrations in offline mode.')
    run_migrations_offline()
else:
    run_migrations_online()
