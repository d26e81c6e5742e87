
from dependency_injector.containers import DeclarativeContainer
from dependency_injector.providers import (
    Callable,
    Configuration,
    DelegatedFactory,
    Singleton,
)
from sqlalchemy.orm import scoped_session as _scoped_session
from sqlalchemy.orm import sessionmaker as _sessionmaker

from .bot import Bot, event_context
from .context import Context
from .db import create_engine


def _create_engine_wrapper(connect_string, options):
    return create_engine(connect_string, **(options or {}))


class RootContainer(DeclarativeContainer):
    """Application IoC container"""

    config = Configuration("config")

    # Remote services
    engine = Singleton(
        _create_engine_wrapper, config.db.connect_string, config.db.options
    )

    sessionmaker = Singleton(_sessionmaker, bind=engine)

    scoped_session = Singleton(
        _scoped_session, sessionmaker, scopefunc=event_context.get
    )

    context_factory = DelegatedFactory(Context, scoped_session=scoped_session)

    bot = Singleton(
        Bot,
        command_prefix=config.cmd_prefix,
        context_factory=context_factory,
        default_game=config.default_game,
        scoped_session=scoped_session,
    )

    # Main
    start_bot = Callable(Bot.start, bot, config.token)
