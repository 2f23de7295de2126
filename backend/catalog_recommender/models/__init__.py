"""Database models"""

from .game import Game, GameProduct, Tag, Platform
from .member import Member
from .order import WebOrder, OrderItem

__all__ = [
    "Game",
    "GameProduct",
    "Tag",
    "Platform",
    "Member",
    "WebOrder",
    "OrderItem",
]
