"""
Input validation at the collector boundary.

Raw text from prompts or command-line arguments is normalised here and turned
into a typed ``QuoteInput``. Anything that cannot be coerced raises a
``QuoteError`` subclass carrying the message shown to the user.
"""

import logging
import re
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from .config import DEFAULT_CONFIG, PricingConfig
from .models import InvalidItemType, InvalidQuantity, ItemType, QuoteInput

logger = logging.getLogger(__name__)

# Plain ASCII decimal literal, optionally signed, with an optional exponent
QUANTITY_PATTERN = re.compile(r'[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?', re.ASCII)


def normalize_item_type(raw: Optional[str]) -> str:
    """Trim and lower-case user text; cancelled or empty input becomes ''."""
    if not raw:
        return ""
    return str(raw).strip().lower()


def is_valid_item_type(raw: Optional[str]) -> bool:
    """Check whether raw user text names a menu item."""
    return normalize_item_type(raw) in {item.value for item in ItemType}


def parse_item_type(raw: Optional[str]) -> ItemType:
    name = normalize_item_type(raw)
    if not is_valid_item_type(name):
        logger.warning(f"Rejected item type: {raw!r}")
        raise InvalidItemType(raw)
    return ItemType(name)


def parse_quantity(raw: Any, config: PricingConfig = DEFAULT_CONFIG) -> int:
    """
    Convert a raw quantity to an int within the configured range.

    Accepts ints and plain decimal strings that denote a whole number ("6",
    " 6 ", "6.0", "6e0"). Booleans, fractions, blanks, digit separators,
    hex and other non-decimal text are rejected.

    The range is checked before any conversion to int, so huge values such
    as "1e3000000" are rejected without being expanded.
    """
    message = f"Quantity must be an integer between {config.min_quantity} and {config.max_quantity}."

    if isinstance(raw, bool):
        raise InvalidQuantity(raw, message)

    if isinstance(raw, int):
        if not config.min_quantity <= raw <= config.max_quantity:
            logger.warning("Quantity out of range")
            raise InvalidQuantity(raw, message)
        return raw

    if not isinstance(raw, str):
        raise InvalidQuantity(raw, message)

    text = raw.strip()
    if not QUANTITY_PATTERN.fullmatch(text):
        logger.warning(f"Rejected quantity: {raw[:40]!r}")
        raise InvalidQuantity(raw, message)

    try:
        number = Decimal(text)
    except InvalidOperation:
        # exponent beyond what the decimal module can represent
        logger.warning(f"Rejected quantity: {raw[:40]!r}")
        raise InvalidQuantity(raw, message) from None
    if not config.min_quantity <= number <= config.max_quantity:
        logger.warning(f"Quantity out of range: {raw[:40]!r}")
        raise InvalidQuantity(raw, message)
    if number != number.to_integral_value():
        logger.warning(f"Rejected quantity: {raw[:40]!r}")
        raise InvalidQuantity(raw, message)
    return int(number)


def parse_quote_input(raw_item: Optional[str], raw_quantity: Any,
                      is_student: bool = False, add_eco_cup: bool = False,
                      config: PricingConfig = DEFAULT_CONFIG) -> QuoteInput:
    """
    Build a QuoteInput from raw collector values.

    The item type is checked before the quantity, so a request that gets both
    wrong reports the item first. The eco cup flag is dropped for anything
    other than coffee.
    """
    item_type = parse_item_type(raw_item)
    quantity = parse_quantity(raw_quantity, config)
    return QuoteInput(
        item_type=item_type,
        quantity=quantity,
        is_student=bool(is_student),
        add_eco_cup=bool(add_eco_cup) and item_type is ItemType.COFFEE,
    )
