"""
Campus Café Quote

Price calculator and receipt printer for the campus café point of sale.
"""

__version__ = "1.0.0"

from .calculator import QuoteCalculator, calculate_quote
from .config import DEFAULT_CONFIG, PricingConfig, load_config
from .models import (
    ConfigError,
    InvalidItemType,
    InvalidQuantity,
    ItemType,
    QuoteBreakdown,
    QuoteError,
    QuoteInput,
)
from .receipt import build_receipt, format_money
from .validation import parse_quote_input

__all__ = [
    "QuoteCalculator",
    "calculate_quote",
    "PricingConfig",
    "DEFAULT_CONFIG",
    "load_config",
    "ItemType",
    "QuoteInput",
    "QuoteBreakdown",
    "QuoteError",
    "InvalidItemType",
    "InvalidQuantity",
    "ConfigError",
    "build_receipt",
    "format_money",
    "parse_quote_input",
]
