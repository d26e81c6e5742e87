from sqlalchemy import BigInteger, Column, PrimaryKeyConstraint

from .base import Base


class Guild(Base):
    __tablename__ = 'guilds'

    guild_id = Column(BigInteger, autoincrement=False)

    __table_args__ = (
        PrimaryKeyConstraint(guild_id, name='guilds_pkey'),
    )
