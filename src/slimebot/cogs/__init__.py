from logging import getLogger

from dependency_injector.containers import DeclarativeContainer
from dependency_injector.providers import DependenciesContainer, Singleton

from .greeting import Greeting
from .guilds import Guilds

logger = getLogger(__name__)
cog_names = (
    "greeting",
    "guilds",
)


class CogsContainer(DeclarativeContainer):
    root = DependenciesContainer()

    greeting = Singleton(Greeting)

    guilds = Singleton(Guilds, bot=root.bot, scoped_session=root.scoped_session)


async def load_cogs(root):
    bot = root.bot()
    cogs = CogsContainer(root=root)

    for cog_name in cog_names:
        cog_provider = getattr(cogs, cog_name)
        logger.debug(f'Adding cog "{cog_name}".')
        await bot.add_cog(cog_provider())
