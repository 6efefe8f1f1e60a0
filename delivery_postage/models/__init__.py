from delivery_postage.models.country import Country, State
from delivery_postage.models.address import Address
from delivery_postage.models.cart import Cart, CartItem
from delivery_postage.models.order_postage import OrderPostage

__all__ = [
    "Country",
    "State",
    "Address",
    "Cart",
    "CartItem",
    "OrderPostage",
]
