"""
Pricing configuration for the quote calculator.

All café constants (prices, icons, rates, fees and thresholds) live in a
frozen ``PricingConfig`` that is handed to ``QuoteCalculator`` when it is
built. ``load_config`` overlays a JSON file on top of the defaults.
"""

import json
import logging
from dataclasses import dataclass, field, fields, replace
from decimal import Decimal, InvalidOperation
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from .models import ConfigError, ItemType

logger = logging.getLogger(__name__)


def _frozen(table: Mapping[ItemType, Any]) -> Mapping[ItemType, Any]:
    return MappingProxyType(dict(table))


DEFAULT_PRICES = _frozen({
    ItemType.COFFEE: Decimal('3.25'),
    ItemType.SANDWICH: Decimal('8.50'),
    ItemType.SALAD: Decimal('7.25'),
})

DEFAULT_ICONS = _frozen({
    ItemType.COFFEE: '☕',
    ItemType.SANDWICH: '🥪',
    ItemType.SALAD: '🥗',
})


@dataclass(frozen=True)
class PricingConfig:
    """Immutable price table and pricing constants."""
    currency: str = 'CAD'
    currency_symbol: str = '$'
    prices: Mapping[ItemType, Decimal] = field(default_factory=lambda: DEFAULT_PRICES)
    icons: Mapping[ItemType, str] = field(default_factory=lambda: DEFAULT_ICONS)
    tax_rate: Decimal = Decimal('0.05')
    student_rate: Decimal = Decimal('0.10')
    eco_fee: Decimal = Decimal('1.00')
    bulk_quantity: int = 6
    bulk_discount: Decimal = Decimal('2.00')
    min_quantity: int = 1
    max_quantity: int = 10
    icon_cap: int = 10

    @classmethod
    def from_dict(cls, data: Dict[str, Any], base: Optional['PricingConfig'] = None) -> 'PricingConfig':
        """
        Build a config from a plain dict, keeping ``base`` values for missing keys.

        Raises ConfigError for unknown keys, unknown item names or values that
        are not valid numbers.
        """
        base = base or DEFAULT_CONFIG
        if not isinstance(data, dict):
            raise ConfigError("Pricing config must be a JSON object")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown pricing config keys: {', '.join(unknown)}")

        changes: Dict[str, Any] = {}
        for key, value in data.items():
            if key in ('prices', 'icons'):
                merged = dict(getattr(base, key))
                merged.update(_item_table(key, value, _to_decimal if key == 'prices' else _to_icon))
                changes[key] = _frozen(merged)
            elif key in ('currency', 'currency_symbol'):
                changes[key] = str(value)
            elif key in ('bulk_quantity', 'min_quantity', 'max_quantity', 'icon_cap'):
                changes[key] = _to_int(value, key)
            else:
                changes[key] = _to_decimal(value, key)

        config = replace(base, **changes)
        if config.min_quantity > config.max_quantity:
            raise ConfigError("min_quantity cannot be greater than max_quantity")
        return config


def _item_table(key: str, value: Any, convert) -> Dict[ItemType, Any]:
    if not isinstance(value, dict):
        raise ConfigError(f"'{key}' must map item names to values")
    table = {}
    for name, raw in value.items():
        try:
            item = ItemType(str(name).strip().lower())
        except ValueError:
            raise ConfigError(f"Unknown item '{name}' in '{key}'") from None
        table[item] = convert(raw, f"{key}.{name}")
    return table


def _to_decimal(value: Any, key: str) -> Decimal:
    if isinstance(value, bool):
        raise ConfigError(f"'{key}' must be a number")
    try:
        number = Decimal(str(value))
    except InvalidOperation:
        raise ConfigError(f"'{key}' must be a number, got {value!r}") from None
    if not number.is_finite():
        raise ConfigError(f"'{key}' must be a finite number")
    return number


def _to_icon(value: Any, key: str) -> str:
    if not isinstance(value, str) or not value:
        raise ConfigError(f"'{key}' must be a non-empty string")
    return value


def _to_int(value: Any, key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"'{key}' must be an integer, got {value!r}")
    return value


DEFAULT_CONFIG = PricingConfig()


def load_config(path: Union[str, Path]) -> PricingConfig:
    """Load a pricing config JSON file on top of the defaults."""
    config_path = Path(path)
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = json.load(f, parse_float=Decimal)
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {config_path}") from None
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {config_path}: {e}") from None

    config = PricingConfig.from_dict(data)
    logger.info(f"Loaded pricing config from {config_path}")
    return config
