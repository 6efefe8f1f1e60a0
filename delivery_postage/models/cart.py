"""
Cart model

The cart a postage is computed for. Delivery modules typically read its
total amount, quantity or weight.
"""
from decimal import Decimal

from sqlalchemy import Column, Integer, String, Numeric, ForeignKey, Index
from sqlalchemy.orm import relationship

from delivery_postage.core.database import Base


class Cart(Base):
    __tablename__ = "carts"

    id = Column(Integer, primary_key=True, index=True)
    token = Column(String(64), nullable=True, unique=True)
    currency = Column(String(3), nullable=True)

    items = relationship("CartItem", back_populates="cart", cascade="all, delete-orphan")

    def get_total_amount(self) -> Decimal:
        """Sum of price * quantity over all items."""
        return sum((item.get_total_price() for item in self.items), Decimal("0"))

    def get_total_quantity(self) -> int:
        return sum(item.quantity or 0 for item in self.items)

    def get_weight(self) -> Decimal:
        """Total weight of the cart; items without a weight count as zero."""
        return sum(
            (Decimal(str(item.weight or 0)) * (item.quantity or 0) for item in self.items),
            Decimal("0"),
        )

    def __repr__(self):
        return f"<Cart(id={self.id}, items={len(self.items)})>"


class CartItem(Base):
    __tablename__ = "cart_items"
    __table_args__ = (
        Index("ix_cart_items_cart_product", "cart_id", "product_ref"),
    )

    id = Column(Integer, primary_key=True, index=True)
    cart_id = Column(Integer, ForeignKey("carts.id", ondelete="CASCADE"), nullable=False, index=True)
    product_ref = Column(String(100), nullable=False)
    quantity = Column(Integer, default=1)
    price = Column(Numeric(12, 2), nullable=False)
    weight = Column(Numeric(10, 3), nullable=True)  # kilograms

    cart = relationship("Cart", back_populates="items")

    def get_total_price(self) -> Decimal:
        return Decimal(str(self.price or 0)) * (self.quantity or 0)
