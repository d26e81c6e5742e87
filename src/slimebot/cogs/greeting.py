from discord.ext.commands import Cog, hybrid_command


class Greeting(Cog):
    @hybrid_command()
    async def hello(self, ctx):
        """
        Check whether the bot is responsive.
        """

        await ctx.send('world!')
