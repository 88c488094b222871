"""
Data models for the Campus Café quote calculator.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Union

from prices import Money, TaxedMoney


class QuoteError(ValueError):
    """Base class for input problems detected before a quote is computed."""


class InvalidItemType(QuoteError):
    """Item type is not one of coffee, sandwich or salad."""

    def __init__(self, value: Any = None, message: str = "Item must be coffee, sandwich, or salad."):
        super().__init__(message)
        self.value = value


class InvalidQuantity(QuoteError):
    """Quantity is not an integer inside the allowed range."""

    def __init__(self, value: Any = None, message: str = "Quantity must be an integer between 1 and 10."):
        super().__init__(message)
        self.value = value


class ConfigError(QuoteError):
    """Pricing configuration could not be loaded."""


class ItemType(str, Enum):
    """Menu items the café can quote."""
    COFFEE = "coffee"
    SANDWICH = "sandwich"
    SALAD = "salad"

    @classmethod
    def coerce(cls, value: Union["ItemType", str]) -> "ItemType":
        """Return the member for ``value`` or raise InvalidItemType.

        No normalisation happens here: ``"Coffee "`` is rejected. Trimming and
        lower-casing user text is the job of the input boundary.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidItemType(value) from None


@dataclass(frozen=True)
class QuoteInput:
    """A single validated quote request."""
    item_type: ItemType
    quantity: int
    is_student: bool = False
    add_eco_cup: bool = False


@dataclass(frozen=True)
class QuoteBreakdown:
    """Price breakdown for one quote. Amounts are unrounded."""
    unit_price: Money
    subtotal: Money
    student_discount: Money
    eco_fee: Money
    bulk_discount: Money
    taxable: Money
    tax: Money
    total: Money

    @property
    def currency(self) -> str:
        return self.total.currency

    @property
    def taxed_total(self) -> TaxedMoney:
        """Taxable amount and total as a net/gross pair."""
        return TaxedMoney(net=self.taxable, gross=self.total)

    def to_dict(self) -> Dict[str, str]:
        """Convert to a JSON-safe dict (Decimal amounts become strings)."""
        return {
            'currency': self.currency,
            'unitPrice': str(self.unit_price.amount),
            'subtotal': str(self.subtotal.amount),
            'studentDiscount': str(self.student_discount.amount),
            'ecoFee': str(self.eco_fee.amount),
            'bulkDiscount': str(self.bulk_discount.amount),
            'taxable': str(self.taxable.amount),
            'tax': str(self.tax.amount),
            'total': str(self.total.amount),
        }
