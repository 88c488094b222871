#!/usr/bin/env python3
"""
Example usage of the Campus Café quote calculator
Prices a few sample orders and prints their receipts.
"""

import json
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from cafe_quote import QuoteCalculator, QuoteError, load_config, parse_quote_input


SAMPLE_ORDERS = [
    ("coffee", "6", True, True),
    ("salad", "3", False, False),
    (" Sandwich ", "10", True, False),
    ("tea", "2", False, False),
    ("coffee", "12", False, False),
]


def demonstrate_receipts(calculator: QuoteCalculator):
    """Print a receipt for each sample order."""
    print("=" * 60)
    print("DEMONSTRATION: Receipts")
    print("=" * 60)

    for raw_item, raw_quantity, is_student, eco_cup in SAMPLE_ORDERS:
        print(f"\nOrder: item={raw_item!r} qty={raw_quantity!r} student={is_student} eco={eco_cup}")
        print("-" * 60)
        try:
            quote = parse_quote_input(raw_item, raw_quantity, is_student, eco_cup, calculator.config)
        except QuoteError as e:
            print(f"ERROR:\n{e}")
            continue
        print(calculator.quote(quote))


def demonstrate_breakdown(calculator: QuoteCalculator):
    """Show the unrounded breakdown behind a receipt."""
    print("=" * 60)
    print("DEMONSTRATION: Raw breakdown")
    print("=" * 60)

    quote = parse_quote_input("coffee", 6, is_student=True, add_eco_cup=True)
    breakdown = calculator.compute(quote)
    print(json.dumps(breakdown.to_dict(), indent=2))
    print(f"Tax from net/gross pair: {breakdown.taxed_total.tax.amount}")


def main():
    """Run the demonstrations."""
    demonstrate_receipts(QuoteCalculator())
    demonstrate_breakdown(QuoteCalculator())

    config_path = Path(__file__).parent / "pricing_config.json"
    print("=" * 60)
    print(f"DEMONSTRATION: Custom config ({config_path.name})")
    print("=" * 60)
    calculator = QuoteCalculator(load_config(config_path))
    print(calculator.quote(parse_quote_input("coffee", 5, add_eco_cup=True, config=calculator.config)))


if __name__ == "__main__":
    main()
