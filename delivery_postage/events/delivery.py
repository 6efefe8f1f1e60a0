"""
Delivery postage event

Carries a postage request from the checkout flow to a delivery module and
the module's answer back: validity, postage, delivery date and mode, plus
any module-specific additional data.

Every field is readable and writable as a property. Each mutator also
exists as a fluent set_* method returning the event:

    event = DeliveryPostageEvent(module, cart, address)
    event.set_valid_module(True).set_postage(12.5).set_delivery_mode("delivery")
"""
from datetime import datetime
from typing import Any, Dict, Optional, Union

from delivery_postage.core.exceptions import InvalidArgumentError
from delivery_postage.core.i18n import Translator
from delivery_postage.events.base import ActionEvent
from delivery_postage.models.address import Address
from delivery_postage.models.cart import Cart
from delivery_postage.models.country import Country, State
from delivery_postage.models.order_postage import OrderPostage, RawAmount
from delivery_postage.modules.delivery.base import BaseDeliveryModule, DeliveryMode


class DeliveryPostageEvent(ActionEvent):
    """
    Postage request/result for one module, cart and destination.

    The destination is the address when one is set. Otherwise it is the
    country/state given at construction (e.g. a cart estimate before the
    customer has entered an address).
    """

    def __init__(
        self,
        module: BaseDeliveryModule,
        cart: Cart,
        address: Optional[Address] = None,
        country: Optional[Country] = None,
        state: Optional[State] = None,
    ):
        super().__init__()
        self._module = module
        self._cart = cart
        self._address = address
        self._country = country
        self._state = state

        self._valid_module = False
        self._postage: Optional[OrderPostage] = None
        self._delivery_date: Optional[datetime] = None
        self._delivery_mode: Optional[str] = None
        self._additional_data: Dict[str, Any] = {}

    # Cart

    @property
    def cart(self) -> Cart:
        return self._cart

    @cart.setter
    def cart(self, cart: Cart) -> None:
        self._cart = cart

    def set_cart(self, cart: Cart) -> "DeliveryPostageEvent":
        self.cart = cart
        return self

    # Address

    @property
    def address(self) -> Optional[Address]:
        return self._address

    @address.setter
    def address(self, address: Optional[Address]) -> None:
        self._address = address

    def set_address(self, address: Optional[Address]) -> "DeliveryPostageEvent":
        self.address = address
        return self

    # Destination (derived)

    @property
    def country(self) -> Optional[Country]:
        """Address country when an address is set, else the fallback country."""
        if self._address is not None:
            return self._address.country
        return self._country

    @property
    def state(self) -> Optional[State]:
        """Address state when an address is set, else the fallback state."""
        if self._address is not None:
            return self._address.state
        return self._state

    # Delivery date

    @property
    def delivery_date(self) -> Optional[datetime]:
        return self._delivery_date

    @delivery_date.setter
    def delivery_date(self, delivery_date: Optional[datetime]) -> None:
        self._delivery_date = delivery_date

    def set_delivery_date(self, delivery_date: Optional[datetime]) -> "DeliveryPostageEvent":
        self.delivery_date = delivery_date
        return self

    # Module

    @property
    def module(self) -> BaseDeliveryModule:
        return self._module

    @module.setter
    def module(self, module: BaseDeliveryModule) -> None:
        self._module = module

    def set_module(self, module: BaseDeliveryModule) -> "DeliveryPostageEvent":
        self.module = module
        return self

    # Postage

    @property
    def postage(self) -> Optional[OrderPostage]:
        return self._postage

    @postage.setter
    def postage(self, postage: Union[OrderPostage, RawAmount, None]) -> None:
        self._postage = OrderPostage.load_from_postage(postage)

    def set_postage(self, postage: Union[OrderPostage, RawAmount, None]) -> "DeliveryPostageEvent":
        self.postage = postage
        return self

    # Module validity

    @property
    def valid_module(self) -> bool:
        return self._valid_module

    @valid_module.setter
    def valid_module(self, valid_module: bool) -> None:
        self._valid_module = bool(valid_module)

    def is_valid_module(self) -> bool:
        return self._valid_module

    def set_valid_module(self, valid_module: bool) -> "DeliveryPostageEvent":
        self.valid_module = valid_module
        return self

    # Additional data

    @property
    def additional_data(self) -> Dict[str, Any]:
        return self._additional_data

    @additional_data.setter
    def additional_data(self, additional_data: Optional[Dict[str, Any]]) -> None:
        self._additional_data = dict(additional_data or {})

    def has_additional_data(self) -> bool:
        return len(self._additional_data) > 0

    def get_additional_data(self) -> Dict[str, Any]:
        return self._additional_data

    def set_additional_data(self, additional_data: Optional[Dict[str, Any]]) -> "DeliveryPostageEvent":
        self.additional_data = additional_data
        return self

    def add_additional_data(self, key: str, value: Any) -> "DeliveryPostageEvent":
        """Insert or overwrite a single entry."""
        self._additional_data[key] = value
        return self

    # Delivery mode

    @property
    def delivery_mode(self) -> Optional[str]:
        return self._delivery_mode

    @delivery_mode.setter
    def delivery_mode(self, delivery_mode: Union[DeliveryMode, str]) -> None:
        mode = delivery_mode.value if isinstance(delivery_mode, DeliveryMode) else delivery_mode
        allowed = DeliveryMode.values()
        if not isinstance(mode, str) or mode not in allowed:
            raise InvalidArgumentError(
                Translator.get_instance().trans(
                    "A delivery module can only be of type pickup or delivery"
                ),
                argument="delivery_mode",
                value=delivery_mode,
                allowed=allowed,
            )
        self._delivery_mode = mode

    def set_delivery_mode(self, delivery_mode: Union[DeliveryMode, str]) -> "DeliveryPostageEvent":
        self.delivery_mode = delivery_mode
        return self

    def __repr__(self):
        return (
            f"<DeliveryPostageEvent(module={self._module!r}, valid={self._valid_module}, "
            f"postage={self._postage!r}, mode={self._delivery_mode})>"
        )
