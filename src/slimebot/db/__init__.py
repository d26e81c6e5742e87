from .base import Base
from .engine import create_engine
from .guilds import Guild
from .spam import SpamChannel

__all__ = [
    'Base',
    'create_engine',
    'Guild',
    'SpamChannel',
]
