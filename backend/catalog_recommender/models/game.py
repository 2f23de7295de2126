"""Game catalog models"""

from sqlalchemy import Column, Integer, String, Text, ForeignKey, Enum, Table
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin
from ..schemas.catalog import AvailabilityStatus


game_tags = Table(
    "game_tags",
    Base.metadata,
    Column("game_id", Integer, ForeignKey("games.id", ondelete="CASCADE"), primary_key=True),
    Column("tag_name", String(100), ForeignKey("tags.name", ondelete="CASCADE"), primary_key=True),
)


class Tag(Base):
    """Thematic category attached to games"""

    __tablename__ = "tags"

    name = Column(String(100), primary_key=True)

    games = relationship("Game", secondary=game_tags, back_populates="tags")

    def __repr__(self):
        return f"<Tag(name='{self.name}')>"


class Platform(Base):
    """Hardware/software platform an edition targets"""

    __tablename__ = "platforms"

    platform_code = Column(String(20), primary_key=True)
    platform_name = Column(String(100), nullable=False)

    game_products = relationship("GameProduct", back_populates="platform")

    def __repr__(self):
        return f"<Platform(code='{self.platform_code}')>"


class Game(Base, TimestampMixin):
    """Non platform-specific information about a game"""

    __tablename__ = "games"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, index=True)
    short_description = Column(String(140))
    long_description = Column(Text)

    # Relationships
    tags = relationship("Tag", secondary=game_tags, back_populates="games", order_by="Tag.name")
    game_products = relationship(
        "GameProduct",
        back_populates="game",
        cascade="all, delete-orphan",
        order_by="GameProduct.id"
    )

    def __repr__(self):
        return f"<Game(id={self.id}, name='{self.name}')>"


class GameProduct(Base, TimestampMixin):
    """Sellable version of a game for one platform (an SKU)"""

    __tablename__ = "game_products"

    id = Column(Integer, primary_key=True, index=True)
    game_id = Column(Integer, ForeignKey("games.id", ondelete="CASCADE"), nullable=False, index=True)
    platform_code = Column(String(20), ForeignKey("platforms.platform_code"), nullable=False)
    availability_status = Column(
        Enum(AvailabilityStatus, native_enum=False, length=40),
        nullable=False,
        default=AvailabilityStatus.AVAILABLE
    )

    # Relationships
    game = relationship("Game", back_populates="game_products")
    platform = relationship("Platform", back_populates="game_products")

    def __repr__(self):
        return f"<GameProduct(id={self.id}, game_id={self.game_id}, platform='{self.platform_code}')>"
