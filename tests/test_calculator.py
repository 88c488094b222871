#!/usr/bin/env python3
"""
Tests for the quote calculator.
"""

import unittest
from decimal import Decimal
from types import MappingProxyType

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from prices import Money, TaxedMoney

from cafe_quote.calculator import QuoteCalculator, calculate_quote
from cafe_quote.config import DEFAULT_CONFIG, PricingConfig
from cafe_quote.models import InvalidItemType, InvalidQuantity, ItemType, QuoteInput


class TestQuoteCalculator(unittest.TestCase):
    """Test cases for QuoteCalculator.compute."""

    def setUp(self):
        """Set up test fixtures."""
        self.calculator = QuoteCalculator()

    def test_coffee_student_eco_bulk_example(self):
        """Coffee x6 with every option matches the worked example."""
        breakdown = self.calculator.compute(QuoteInput(ItemType.COFFEE, 6, True, True))

        self.assertEqual(breakdown.unit_price.amount, Decimal('3.25'))
        self.assertEqual(breakdown.subtotal.amount, Decimal('19.50'))
        self.assertEqual(breakdown.student_discount.amount, Decimal('1.95'))
        self.assertEqual(breakdown.eco_fee.amount, Decimal('1.00'))
        self.assertEqual(breakdown.bulk_discount.amount, Decimal('2.00'))
        self.assertEqual(breakdown.taxable.amount, Decimal('16.55'))
        self.assertEqual(breakdown.tax.amount, Decimal('0.8275'))
        self.assertEqual(breakdown.total.amount, Decimal('17.3775'))

    def test_salad_no_options_example(self):
        """Salad x3 without options has no discounts or fees."""
        breakdown = self.calculator.compute(QuoteInput(ItemType.SALAD, 3))

        self.assertEqual(breakdown.subtotal.amount, Decimal('21.75'))
        self.assertEqual(breakdown.student_discount.amount, Decimal('0'))
        self.assertEqual(breakdown.eco_fee.amount, Decimal('0'))
        self.assertEqual(breakdown.bulk_discount.amount, Decimal('0'))
        self.assertEqual(breakdown.tax.amount, Decimal('1.0875'))
        self.assertEqual(breakdown.total.amount, Decimal('22.8375'))

    def test_subtotal_is_unit_price_times_quantity(self):
        for item in ItemType:
            for quantity in range(1, 11):
                with self.subTest(item=item, quantity=quantity):
                    breakdown = self.calculator.compute(QuoteInput(item, quantity))
                    self.assertEqual(breakdown.unit_price.amount, DEFAULT_CONFIG.prices[item])
                    self.assertEqual(breakdown.subtotal.amount, DEFAULT_CONFIG.prices[item] * quantity)

    def test_bulk_discount_threshold(self):
        """Bulk discount applies from six items up, for every item type."""
        for item in ItemType:
            for quantity in range(1, 11):
                with self.subTest(item=item, quantity=quantity):
                    breakdown = self.calculator.compute(QuoteInput(item, quantity))
                    expected = Decimal('2.00') if quantity >= 6 else Decimal('0')
                    self.assertEqual(breakdown.bulk_discount.amount, expected)

    def test_eco_fee_only_for_coffee(self):
        test_cases = [
            (ItemType.COFFEE, True, Decimal('1.00')),
            (ItemType.COFFEE, False, Decimal('0')),
            (ItemType.SANDWICH, True, Decimal('0')),
            (ItemType.SALAD, True, Decimal('0')),
            (ItemType.SALAD, False, Decimal('0')),
        ]

        for item, eco_cup, expected in test_cases:
            with self.subTest(item=item, eco_cup=eco_cup):
                breakdown = self.calculator.compute(QuoteInput(item, 2, add_eco_cup=eco_cup))
                self.assertEqual(breakdown.eco_fee.amount, expected)

    def test_student_discount_is_ten_percent_of_subtotal(self):
        breakdown = self.calculator.compute(QuoteInput(ItemType.SANDWICH, 4, is_student=True))
        self.assertEqual(breakdown.student_discount.amount, Decimal('3.40'))

        breakdown = self.calculator.compute(QuoteInput(ItemType.SANDWICH, 4, is_student=False))
        self.assertEqual(breakdown.student_discount.amount, Decimal('0'))

    def test_total_is_taxable_plus_five_percent(self):
        """Fee and discounts are settled before tax, with no rounding."""
        for item in ItemType:
            for quantity in (1, 5, 6, 10):
                for is_student in (False, True):
                    for eco_cup in (False, True):
                        with self.subTest(item=item, quantity=quantity, student=is_student, eco=eco_cup):
                            b = self.calculator.compute(QuoteInput(item, quantity, is_student, eco_cup))
                            taxable = b.subtotal - b.student_discount + b.eco_fee - b.bulk_discount
                            self.assertEqual(b.taxable, taxable)
                            self.assertEqual(b.tax.amount, taxable.amount * Decimal('0.05'))
                            self.assertEqual(b.total.amount, taxable.amount * Decimal('1.05'))

    def test_negative_taxable_is_not_clamped(self):
        config = PricingConfig(bulk_discount=Decimal('50.00'))
        breakdown = QuoteCalculator(config).compute(QuoteInput(ItemType.COFFEE, 6))

        self.assertEqual(breakdown.taxable.amount, Decimal('-30.50'))
        self.assertEqual(breakdown.tax.amount, Decimal('-1.525'))
        self.assertEqual(breakdown.total.amount, Decimal('-32.025'))

    def test_invalid_item_type(self):
        for value in ["tea", "Coffee", " coffee", "", None, 3]:
            with self.subTest(value=value):
                with self.assertRaises(InvalidItemType) as ctx:
                    self.calculator.compute(QuoteInput(value, 1))
                self.assertEqual(str(ctx.exception), "Item must be coffee, sandwich, or salad.")

    def test_item_type_accepts_enum_value_string(self):
        breakdown = self.calculator.compute(QuoteInput("sandwich", 2))
        self.assertEqual(breakdown.subtotal.amount, Decimal('17.00'))

    def test_item_missing_from_price_table(self):
        config = PricingConfig(prices=MappingProxyType({ItemType.COFFEE: Decimal('3.25')}))
        with self.assertRaises(InvalidItemType):
            QuoteCalculator(config).compute(QuoteInput(ItemType.SALAD, 1))

    def test_invalid_quantity(self):
        for value in [0, 11, -1, True, 2.5, "6", None]:
            with self.subTest(value=value):
                with self.assertRaises(InvalidQuantity) as ctx:
                    self.calculator.compute(QuoteInput(ItemType.COFFEE, value))
                self.assertEqual(str(ctx.exception), "Quantity must be an integer between 1 and 10.")

    def test_huge_quantity_rejected(self):
        with self.assertRaises(InvalidQuantity):
            self.calculator.compute(QuoteInput(ItemType.COFFEE, 10 ** 5000))

    def test_item_type_checked_before_quantity(self):
        with self.assertRaises(InvalidItemType):
            self.calculator.compute(QuoteInput("tea", 99))

    def test_amounts_use_configured_currency(self):
        breakdown = QuoteCalculator(PricingConfig(currency='USD')).compute(QuoteInput(ItemType.COFFEE, 1))
        self.assertEqual(breakdown.currency, 'USD')
        self.assertEqual(breakdown.total, Money(Decimal('3.4125'), 'USD'))

    def test_taxed_total(self):
        breakdown = self.calculator.compute(QuoteInput(ItemType.SALAD, 3))
        taxed = breakdown.taxed_total

        self.assertIsInstance(taxed, TaxedMoney)
        self.assertEqual(taxed.net, breakdown.taxable)
        self.assertEqual(taxed.gross, breakdown.total)
        self.assertEqual(taxed.tax, breakdown.tax)

    def test_to_dict_is_json_safe(self):
        breakdown = self.calculator.compute(QuoteInput(ItemType.COFFEE, 6, True, True))
        data = breakdown.to_dict()

        self.assertEqual(data['currency'], 'CAD')
        for key in ('unitPrice', 'subtotal', 'studentDiscount', 'ecoFee',
                    'bulkDiscount', 'taxable', 'tax', 'total'):
            self.assertIsInstance(data[key], str)
        self.assertEqual(Decimal(data['total']), Decimal('17.3775'))
        self.assertEqual(Decimal(data['taxable']), Decimal('16.55'))

    def test_breakdown_is_immutable(self):
        breakdown = self.calculator.compute(QuoteInput(ItemType.COFFEE, 1))
        with self.assertRaises(AttributeError):
            breakdown.total = Money(0, 'CAD')

    def test_calculate_quote_convenience(self):
        breakdown = calculate_quote(ItemType.COFFEE, 6, is_student=True, add_eco_cup=True)
        self.assertEqual(breakdown.total.amount, Decimal('17.3775'))

    def test_quote_renders_receipt(self):
        text = self.calculator.quote(QuoteInput(ItemType.SALAD, 3))
        self.assertIn("TOTAL: $22.84", text)


if __name__ == "__main__":
    unittest.main()
