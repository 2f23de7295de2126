"""Web order models"""

from sqlalchemy import Column, Integer, ForeignKey, Enum
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin
from ..schemas.catalog import OrderStatus


class WebOrder(Base, TimestampMixin):
    """An order placed by a member through the web store"""

    __tablename__ = "web_orders"

    id = Column(Integer, primary_key=True, index=True)
    member_id = Column(Integer, ForeignKey("members.id", ondelete="CASCADE"), nullable=False, index=True)
    status = Column(
        Enum(OrderStatus, native_enum=False, length=20),
        nullable=False,
        default=OrderStatus.PENDING
    )

    # Relationships
    member = relationship("Member", back_populates="web_orders")
    order_items = relationship("OrderItem", back_populates="order", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<WebOrder(id={self.id}, member_id={self.member_id}, status='{self.status}')>"


class OrderItem(Base):
    """A line item on a web order"""

    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(Integer, ForeignKey("web_orders.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("game_products.id"), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)

    # Relationships
    order = relationship("WebOrder", back_populates="order_items")
    product = relationship("GameProduct")

    def __repr__(self):
        return f"<OrderItem(order_id={self.order_id}, product_id={self.product_id})>"
