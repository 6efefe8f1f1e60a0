"""
Postage Service v1.0.0

Lets a delivery module answer a postage request:
- Module hook first (handle_postage_event); a stopped event is final
- Otherwise validity, delivery mode and postage come from the module interface
- Postage is only computed for a module that can deliver to the destination

Usage:
    event = DeliveryPostageEvent(module, cart, address)
    PostageService().get_postage(event)
    if event.is_valid_module():
        amount = event.postage.amount
"""
import logging

from delivery_postage.core.exceptions import DeliveryModuleError, InvalidArgumentError
from delivery_postage.core.i18n import Translator
from delivery_postage.events.delivery import DeliveryPostageEvent

logger = logging.getLogger(__name__)


class PostageService:
    """Fills a DeliveryPostageEvent from its target module."""

    def get_postage(self, event: DeliveryPostageEvent) -> DeliveryPostageEvent:
        """
        Populate validity, delivery mode and postage on the event.

        Args:
            event: The postage request; its module must be set

        Returns:
            The same event, filled

        Raises:
            DeliveryModuleError: the event has no module
            InvalidArgumentError: the module reported an unknown delivery mode
                or a non-numeric postage
        """
        module = event.module
        if module is None:
            raise DeliveryModuleError(
                Translator.get_instance().trans("No delivery module given for postage request")
            )

        module.handle_postage_event(event)
        if event.is_propagation_stopped():
            logger.debug(f"Postage for {module.code} provided by module hook: {event!r}")
            return event

        country = event.country
        state = event.state

        event.set_valid_module(module.is_valid_delivery(country, state))
        try:
            event.set_delivery_mode(module.get_delivery_mode())
        except InvalidArgumentError as e:
            logger.warning(f"Module {module.code} returned an invalid delivery mode: {e.to_dict()}")
            raise

        if event.is_valid_module():
            event.set_postage(module.get_postage(country, state))
        else:
            logger.debug(
                f"Module {module.code} cannot deliver to "
                f"{getattr(country, 'iso_alpha2', None)}/{getattr(state, 'iso_code', None)}"
            )

        logger.debug(f"Postage computed for {module.code}: {event!r}")
        return event
