#!/usr/bin/env python3
"""
Quote Calculator for the Campus Café
Computes the price breakdown for a quote using the prices library and renders it as a receipt.
"""

import logging
from decimal import Decimal
from typing import Optional, Union

from prices import Money

from .config import DEFAULT_CONFIG, PricingConfig
from .models import InvalidItemType, InvalidQuantity, ItemType, QuoteBreakdown, QuoteInput
from .receipt import build_receipt

logger = logging.getLogger(__name__)


class QuoteCalculator:
    """
    Computes quote breakdowns from an injected pricing config.

    Holds no state besides the config, so one instance can serve any number
    of callers.
    """

    def __init__(self, config: Optional[PricingConfig] = None):
        self.config = config or DEFAULT_CONFIG

    def compute(self, quote: QuoteInput) -> QuoteBreakdown:
        """
        Compute the price breakdown for a quote.

        The eco fee is added and both discounts are subtracted from the
        subtotal in one step, before tax. Nothing is rounded and a negative
        taxable amount is passed through as is.
        """
        item_type = ItemType.coerce(quote.item_type)
        quantity = self._check_quantity(quote.quantity)

        unit_price = self._unit_price(item_type)
        subtotal = unit_price * quantity

        student_discount = subtotal * self.config.student_rate if quote.is_student else self._zero()
        eco_fee = self._money(self.config.eco_fee) if item_type is ItemType.COFFEE and quote.add_eco_cup else self._zero()
        bulk_discount = self._money(self.config.bulk_discount) if quantity >= self.config.bulk_quantity else self._zero()

        taxable = subtotal - student_discount + eco_fee - bulk_discount
        tax = taxable * self.config.tax_rate
        total = taxable + tax

        logger.debug(f"Quote for {quantity} x {item_type.value}: subtotal={subtotal.amount}, "
                     f"student={student_discount.amount}, eco={eco_fee.amount}, "
                     f"bulk={bulk_discount.amount}, tax={tax.amount}")
        logger.info(f"Quote computed: {quantity} x {item_type.value}, total={total.amount}")

        return QuoteBreakdown(
            unit_price=unit_price,
            subtotal=subtotal,
            student_discount=student_discount,
            eco_fee=eco_fee,
            bulk_discount=bulk_discount,
            taxable=taxable,
            tax=tax,
            total=total,
        )

    def render(self, item_type: Union[ItemType, str], quantity: int, is_student: bool,
               add_eco_cup: bool, breakdown: QuoteBreakdown) -> str:
        """Render a computed breakdown as receipt text."""
        return build_receipt(item_type, quantity, is_student, add_eco_cup, breakdown, self.config)

    def quote(self, quote: QuoteInput) -> str:
        """Compute and render in one call."""
        breakdown = self.compute(quote)
        return self.render(quote.item_type, quote.quantity, quote.is_student, quote.add_eco_cup, breakdown)

    def _unit_price(self, item_type: ItemType) -> Money:
        try:
            return self._money(self.config.prices[item_type])
        except KeyError:
            raise InvalidItemType(item_type) from None

    def _check_quantity(self, quantity) -> int:
        low, high = self.config.min_quantity, self.config.max_quantity
        if isinstance(quantity, bool) or not isinstance(quantity, int) or not low <= quantity <= high:
            raise InvalidQuantity(quantity, f"Quantity must be an integer between {low} and {high}.")
        return quantity

    def _money(self, amount: Decimal) -> Money:
        return Money(amount, self.config.currency)

    def _zero(self) -> Money:
        return Money(0, self.config.currency)


def calculate_quote(item_type: Union[ItemType, str], quantity: int, is_student: bool = False,
                    add_eco_cup: bool = False, config: Optional[PricingConfig] = None) -> QuoteBreakdown:
    """
    Convenience function to compute a breakdown with the default config.
    """
    calculator = QuoteCalculator(config)
    return calculator.compute(QuoteInput(item_type, quantity, is_student, add_eco_cup))
