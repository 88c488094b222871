"""
Receipt text for a computed quote.

Formatting only: everything here reads a finished ``QuoteBreakdown`` and
never feeds back into pricing.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

from prices import Money

from .config import DEFAULT_CONFIG, PricingConfig
from .models import ItemType, QuoteBreakdown

RECEIPT_TITLE = "CAMPUS CAFÉ RECEIPT"
NO_ORDER_TEXT = "No order data."

CENTS = Decimal('0.01')


def format_money(amount: Union[Money, Decimal], symbol: str = '$') -> str:
    """Format an amount as $X.XX, rounding half up to the cent."""
    value = amount.amount if isinstance(amount, Money) else Decimal(amount)
    rounded = value.quantize(CENTS, rounding=ROUND_HALF_UP)
    return f"{symbol}{rounded:.2f}"


def format_rate(rate: Decimal) -> str:
    """Turn a fractional rate into a percentage label: 0.05 -> '5%'."""
    percent = (Decimal(rate) * 100).normalize()
    return f"{percent:f}%"


def icons_for(item_type: Union[ItemType, str], quantity: int,
              config: PricingConfig = DEFAULT_CONFIG) -> str:
    # Display cap only; pricing always uses the full quantity.
    item = ItemType.coerce(item_type)
    return config.icons[item] * max(0, min(quantity, config.icon_cap))


def yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def build_receipt(item_type: Union[ItemType, str], quantity: int, is_student: bool,
                  add_eco_cup: bool, breakdown: QuoteBreakdown,
                  config: PricingConfig = DEFAULT_CONFIG) -> str:
    """Build the multi-line receipt shown to the customer."""
    item = ItemType.coerce(item_type)
    eco_text = yes_no(add_eco_cup) if item is ItemType.COFFEE else "N/A"

    def money(value: Money) -> str:
        return format_money(value, config.currency_symbol)

    lines = [
        RECEIPT_TITLE,
        "",
        f"Item: {item.value}",
        f"Unit price: {money(breakdown.unit_price)}",
        f"Quantity: {quantity}  {icons_for(item, quantity, config)}",
        "",
        f"Student discount: {yes_no(is_student)}",
        f"Eco cup add-on: {eco_text}",
        "",
        f"Subtotal: {money(breakdown.subtotal)}",
        f"Student -{format_rate(config.student_rate)}: -{money(breakdown.student_discount)}",
        f"Eco cup fee: {money(breakdown.eco_fee)}",
        f"Bulk deal: -{money(breakdown.bulk_discount)}",
        f"Tax ({format_rate(config.tax_rate)}): {money(breakdown.tax)}",
        "",
        f"TOTAL: {money(breakdown.total)}",
    ]
    return "\n".join(lines) + "\n"


def error_text(message: str) -> str:
    """Text shown in place of a receipt when input is rejected."""
    return f"ERROR:\n{message}"
