def format_message(msg):
    """
    Format a :class:`discord.Message` for convenient output to e.g. loggers.

    Args:
        msg (discord.Message): Message to format.

    Returns:
        str: Input message formatted as a string.
    """

    if msg.guild is None:
        return '[DM] {0.author.name} ({0.author.id}): {0.content}'.format(msg)
    else:
        return '[{0.guild.name} ({0.guild.id}) -> #{0.channel.name} ({0.channel.id})] ' \
               '{0.author.name} ({0.author.id}): {0.content}'.format(msg)
