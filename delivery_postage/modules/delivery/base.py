"""
Base Delivery Module Interface v1.0.0

All delivery modules implement this interface. Each module provides its own:
- Availability check for a destination country/state
- Postage calculation
- Delivery mode (home delivery or pickup point)

A module can also fill a DeliveryPostageEvent directly by overriding
handle_postage_event(); stopping the event's propagation there skips the
interface methods above.
"""
import enum
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import TYPE_CHECKING, Optional, Union

from delivery_postage.models.country import Country, State
from delivery_postage.models.order_postage import OrderPostage

if TYPE_CHECKING:
    from delivery_postage.events.delivery import DeliveryPostageEvent


class DeliveryMode(str, enum.Enum):
    """How the parcel reaches the customer."""
    PICKUP = "pickup"
    DELIVERY = "delivery"

    @classmethod
    def values(cls):
        return [mode.value for mode in cls]


class BaseDeliveryModule(ABC):
    """
    Abstract base class for all delivery modules.

    This is the capability type a postage request refers to.
    """

    @property
    @abstractmethod
    def code(self) -> str:
        """Return the unique module code."""
        pass

    @abstractmethod
    def is_valid_delivery(self, country: Optional[Country], state: Optional[State] = None) -> bool:
        """
        Whether this module can deliver to the destination.

        Args:
            country: Destination country
            state: Destination state, when the country has states

        Returns:
            True if the module can be used for this destination
        """
        pass

    @abstractmethod
    def get_postage(
        self,
        country: Optional[Country],
        state: Optional[State] = None,
    ) -> Union[OrderPostage, Decimal, float, int]:
        """
        Calculate the postage for the destination.

        Returns:
            OrderPostage or a bare amount (normalized by the caller)
        """
        pass

    def get_delivery_mode(self) -> str:
        """Return the delivery mode; override for pickup-point modules."""
        return DeliveryMode.DELIVERY.value

    def handle_postage_event(self, event: "DeliveryPostageEvent") -> None:
        """Hook to fill the event directly. Default does nothing."""
        return None

    def __repr__(self):
        return f"<{self.__class__.__name__}(code={self.code})>"
