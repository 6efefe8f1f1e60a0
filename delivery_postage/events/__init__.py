from delivery_postage.events.base import ActionEvent
from delivery_postage.events.delivery import DeliveryPostageEvent

__all__ = [
    "ActionEvent",
    "DeliveryPostageEvent",
]
