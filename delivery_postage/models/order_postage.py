"""
Order postage value

Computed shipping cost of a cart plus its tax share. Delivery modules may
return either a bare amount or a full OrderPostage; load_from_postage()
normalizes both to an OrderPostage.
"""
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional, Union

from delivery_postage.core.config import settings
from delivery_postage.core.exceptions import InvalidArgumentError
from delivery_postage.core.i18n import Translator

RawAmount = Union[int, float, Decimal, str]


def to_decimal(value: RawAmount) -> Decimal:
    """Convert a raw amount to Decimal via its string form (42.5 -> Decimal('42.5'))."""
    if isinstance(value, bool):
        raise InvalidArgumentError(
            Translator.get_instance().trans("A postage amount must be a number"),
            argument="amount",
            value=value,
        )
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        amount = None
    if amount is None or not amount.is_finite():
        raise InvalidArgumentError(
            Translator.get_instance().trans("A postage amount must be a number"),
            argument="amount",
            value=value,
        )
    return amount


@dataclass
class OrderPostage:
    """Postage amount, tax included, with the tax rule it was computed under."""
    amount: Decimal = Decimal("0")
    amount_tax: Decimal = Decimal("0")
    tax_rule_title: str = ""
    currency: Optional[str] = None  # POSTAGE_CURRENCY when not given

    def __post_init__(self):
        if not self.currency:
            self.currency = settings.POSTAGE_CURRENCY
        self.currency = self.currency.upper()
        self.amount = to_decimal(self.amount)
        self.amount_tax = to_decimal(self.amount_tax)

    @property
    def amount_without_tax(self) -> Decimal:
        return self.amount - self.amount_tax

    def quantized_amount(self, places: Optional[int] = None) -> Decimal:
        """Amount rounded half-up to POSTAGE_DECIMAL_PLACES (or places)."""
        if places is None:
            places = settings.POSTAGE_DECIMAL_PLACES
        return self.amount.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)

    @classmethod
    def from_amount(
        cls,
        amount: RawAmount,
        amount_tax: RawAmount = 0,
        tax_rule_title: str = "",
        currency: Optional[str] = None,
    ) -> "OrderPostage":
        return cls(
            amount=amount,
            amount_tax=amount_tax,
            tax_rule_title=tax_rule_title,
            currency=currency,
        )

    @classmethod
    def load_from_postage(
        cls,
        postage: Union["OrderPostage", RawAmount, None],
    ) -> Optional["OrderPostage"]:
        """
        Normalize a module's postage output.

        Args:
            postage: an OrderPostage (returned unchanged), a raw amount, or None

        Returns:
            OrderPostage, or None when postage is None

        Raises:
            InvalidArgumentError: postage is neither an OrderPostage nor a number
        """
        if postage is None:
            return None
        if isinstance(postage, OrderPostage):
            return postage
        return cls.from_amount(postage)
