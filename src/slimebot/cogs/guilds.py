from logging import getLogger

from discord import Guild as DiscordGuild
from discord.ext.commands import Cog

from ..db import Guild

logger = getLogger(__name__)


class Guilds(Cog):
    """
    Mirror the guilds the bot is a member of into the `guilds` table.

    Everything keyed on a guild references that table, so rows have to exist
    before anything else can be stored for a guild.
    Removing a guild cascades to all of its dependent rows.
    """

    def __init__(self, bot, scoped_session):
        self._bot = bot
        self._session = scoped_session

    def _register(self, guild: DiscordGuild):
        if self._session.get(Guild, guild.id):
            return False

        self._session.add(Guild(guild_id=guild.id))
        logger.info(f'Registered guild {guild} ({guild.id}).')
        return True

    @Cog.listener()
    async def on_ready(self):
        known = {guild_id for guild_id, in self._session.query(Guild.guild_id)}
        current = {guild.id for guild in self._bot.guilds}
        joined = current - known
        left = known - current

        for guild_id in joined:
            self._session.add(Guild(guild_id=guild_id))

        if left:
            # Cascades to the settings of those guilds
            self._session.query(Guild).filter(Guild.guild_id.in_(left)).delete(
                synchronize_session=False
            )

        self._session.commit()
        logger.info(
            f'Registered {len(joined)} guild(s) joined '
            f'and removed {len(left)} guild(s) left while offline.'
        )

    @Cog.listener()
    async def on_guild_join(self, guild: DiscordGuild):
        if self._register(guild):
            self._session.commit()

    @Cog.listener()
    async def on_guild_remove(self, guild: DiscordGuild):
        db_guild = self._session.get(Guild, guild.id)
        if not db_guild:
            return

        self._session.delete(db_guild)
        self._session.commit()
        logger.info(f'Removed guild {guild} ({guild.id}) and its settings.')
