"""Member model"""

from sqlalchemy import Column, Integer, String, ForeignKey, Table
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin


member_favorite_tags = Table(
    "member_favorite_tags",
    Base.metadata,
    Column("member_id", Integer, ForeignKey("members.id", ondelete="CASCADE"), primary_key=True),
    Column("tag_name", String(100), ForeignKey("tags.name", ondelete="CASCADE"), primary_key=True),
)

member_favorite_platforms = Table(
    "member_favorite_platforms",
    Base.metadata,
    Column("member_id", Integer, ForeignKey("members.id", ondelete="CASCADE"), primary_key=True),
    Column(
        "platform_code",
        String(20),
        ForeignKey("platforms.platform_code", ondelete="CASCADE"),
        primary_key=True
    ),
)


class Member(Base, TimestampMixin):
    """Site member with stated favorites and an order history"""

    __tablename__ = "members"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(100), unique=True, index=True, nullable=False)

    # Relationships
    favorite_tags = relationship("Tag", secondary=member_favorite_tags)
    favorite_platforms = relationship("Platform", secondary=member_favorite_platforms)
    web_orders = relationship("WebOrder", back_populates="member", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Member(id={self.id}, username='{self.username}')>"
