from sqlalchemy import (
    BigInteger, Column, ForeignKeyConstraint, PrimaryKeyConstraint, UniqueConstraint
)
from sqlalchemy.orm import relationship

from .base import Base
from .guilds import Guild


class SpamChannel(Base):
    """Channel designated for spam-related bot output, at most one per guild."""

    __tablename__ = 'admin_bot_spam_channel'

    channel_id = Column(BigInteger, nullable=False)
    guild_id = Column(BigInteger, nullable=False, autoincrement=False)

    __table_args__ = (
        PrimaryKeyConstraint(guild_id, name='admin_bot_spam_channel_pkey'),
        UniqueConstraint(guild_id, name='admin_bot_spam_channel_guild_id_key'),
        ForeignKeyConstraint(
            [guild_id],
            ['guilds.guild_id'],
            name='fk_guild',
            ondelete='CASCADE'
        ),
    )


# Unloaded mappings are left to the database's ON DELETE CASCADE
Guild.spam_channel = relationship(SpamChannel,
                                  backref='guild',
                                  cascade='all, delete-orphan',
                                  uselist=False,
                                  passive_deletes=True,
                                  lazy=True)
