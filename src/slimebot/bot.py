import sys
from contextvars import ContextVar
from logging import getLogger

from discord import Game, Intents
from discord.ext.commands import Bot as BaseBot
from discord.ext.commands import CommandError, CommandInvokeError

from .utils import format_message

event_context = ContextVar('event_context')
logger = getLogger(__name__)
intents = Intents(
    guilds=True,
    guild_messages=True,
    message_content=True,
    guild_scheduled_events=True,
    dm_messages=True
)


class Bot(BaseBot):
    def __init__(
            self,
            *args,
            context_factory,
            default_game,
            scoped_session,
            **kwargs
    ):
        activity = None
        if default_game:
            activity = Game(name=default_game)

        super().__init__(*args, **kwargs, description='slimebot', activity=activity, intents=intents)

        self._context_factory = context_factory
        self._session = scoped_session
        self._event_counter = 0  # Dummy variable to have unique keys for `event_context`

    # Override to hook into event processing to manage event context
    async def _run_event(self, *args, **kwargs):
        # No need for copy_context because events run a new task anyway
        self._event_counter = (self._event_counter + 1) % sys.maxsize
        event_context.set(self._event_counter)

        try:
            await super()._run_event(*args, **kwargs)
        finally:
            self._session.remove()

    async def setup_hook(self):
        synced = await self.tree.sync()
        logger.info(f'Registered {len(synced)} application command(s) globally.')

    async def on_ready(self):
        logger.info(f'Logged into Discord as {self.user}')

    async def on_message(self, msg):
        if msg.author.bot:
            return

        ctx = await self.get_context(msg, cls=self._context_factory)
        await self.invoke(ctx)

        # Commit once per message instead of every time something touches the session
        if not ctx.command_failed and ctx.session.registry.has():
            ctx.session.commit()

    async def on_command(self, ctx):
        logger.info(format_message(ctx.message))

    async def on_command_error(self, ctx, ex: CommandError):
        # Only failures raised inside a command are reported back
        if not isinstance(ex, CommandInvokeError):
            return

        logger.error(
            f'An exception was raised while executing the command for "{ctx.message.content}".',
            exc_info=ex.original)
        await ctx.send('An error occurred while executing the command.')

    async def on_error(self, event, *args, **kwargs):
        logger.exception(f'An exception occured while handling event "{event}".')
