"""
Delivery Module Interface v1.0.0

- BaseDeliveryModule interface every delivery module implements
- DeliveryMode: the two kinds of delivery a module can offer
"""
from delivery_postage.modules.delivery.base import BaseDeliveryModule, DeliveryMode

__all__ = [
    "BaseDeliveryModule",
    "DeliveryMode",
]
