#!/usr/bin/env python3
"""
Campus Café Quote CLI
Collects an order from the terminal and prints the receipt.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, Prompt

from .calculator import QuoteCalculator
from .config import DEFAULT_CONFIG, PricingConfig, load_config
from .models import ItemType, QuoteError
from .receipt import NO_ORDER_TEXT, error_text, format_money, format_rate
from .validation import parse_item_type, parse_quantity, parse_quote_input

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

console = Console()


def setup_parser():
    """Set up command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="cafe-quote",
        description="Campus Café Quote - price a coffee, sandwich or salad order",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  cafe-quote quote coffee 6 --student --eco-cup     # Print the receipt
  cafe-quote quote salad 3 --json                   # Print the breakdown as JSON
  cafe-quote quote sandwich 2 -o receipt.txt        # Save the receipt to a file
  cafe-quote                                        # Start interactive mode
        """
    )

    parser.add_argument(
        'command',
        nargs='?',
        choices=['quote', 'interactive'],
        help='Command to execute (default: interactive)'
    )

    parser.add_argument('item', nargs='?', help='Item type: coffee, sandwich or salad')
    parser.add_argument('quantity', nargs='?', help='Quantity (1-10)')

    parser.add_argument(
        '--student',
        action='store_true',
        help='Apply the student discount'
    )

    parser.add_argument(
        '--eco-cup',
        action='store_true',
        help='Add a reusable cup (coffee only)'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Output the price breakdown as JSON instead of a receipt'
    )

    parser.add_argument(
        '-o', '--output',
        help='Output file path (default: print to console)'
    )

    parser.add_argument(
        '-c', '--config',
        help='Pricing config JSON file'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose logging'
    )

    return parser


def request_quote(calculator: QuoteCalculator) -> str:
    """
    Ask for one order and return the text to display.

    Item type and quantity are validated as soon as they are entered; the
    discount questions are only asked for a valid order, and the reusable cup
    question only for coffee.
    """
    config = calculator.config
    raw_item = Prompt.ask("Enter item type: coffee / sandwich / salad", default="", show_default=False)
    raw_quantity = Prompt.ask(f"Enter quantity ({config.min_quantity}-{config.max_quantity})",
                              default="", show_default=False)

    try:
        item_type = parse_item_type(raw_item)
        parse_quantity(raw_quantity, config)
    except QuoteError as e:
        return error_text(str(e))

    is_student = Confirm.ask(f"Student discount? ({format_rate(config.student_rate)} off)", default=False)

    add_eco_cup = False
    if item_type is ItemType.COFFEE:
        fee = format_money(config.eco_fee, config.currency_symbol)
        add_eco_cup = Confirm.ask(f"Add reusable cup? (+{fee})", default=False)

    quote = parse_quote_input(raw_item, raw_quantity, is_student, add_eco_cup, config)
    return calculator.quote(quote)


def show_display(text: str):
    console.print(Panel(text, title="Receipt", border_style="blue"))


def interactive_mode(config: PricingConfig = DEFAULT_CONFIG):
    """Interactive mode with rich UI."""
    calculator = QuoteCalculator(config)

    console.print(Panel.fit(
        "[bold blue]Campus Café[/bold blue]\n"
        "[dim]Quote calculator[/dim]",
        border_style="blue"
    ))

    display = NO_ORDER_TEXT
    show_display(display)

    while True:
        console.print("\n[bold]☕ Main Menu[/bold]")
        console.print("1. [cyan]Get Quote[/cyan] - Price an order and show the receipt")
        console.print("2. [cyan]Reset[/cyan] - Clear the receipt")
        console.print("3. [cyan]Exit[/cyan] - Quit the application")

        choice = Prompt.ask(
            "Select an option",
            choices=["1", "2", "3"],
            default="1"
        )

        if choice == "1":
            display = request_quote(calculator)
        elif choice == "2":
            display = NO_ORDER_TEXT
        elif choice == "3":
            console.print("[green]👋 Goodbye![/green]")
            break

        show_display(display)


def run_quote(args, config: PricingConfig = DEFAULT_CONFIG) -> str:
    """Compute a one-shot quote from parsed arguments and return the output text."""
    calculator = QuoteCalculator(config)
    quote = parse_quote_input(args.item, args.quantity, args.student, args.eco_cup, config)

    if args.eco_cup and not quote.add_eco_cup:
        logger.warning("Reusable cup is only available for coffee; ignoring --eco-cup")

    if args.json:
        breakdown = calculator.compute(quote)
        result = {
            'item': quote.item_type.value,
            'quantity': quote.quantity,
            'isStudent': quote.is_student,
            'addEcoCup': quote.add_eco_cup,
            'breakdown': breakdown.to_dict(),
        }
        return json.dumps(result, indent=2, ensure_ascii=False) + "\n"

    return calculator.quote(quote)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = setup_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        config = load_config(args.config) if args.config else DEFAULT_CONFIG
    except QuoteError as e:
        logger.error(f"❌ {e}")
        return 1

    if not args.command or args.command == 'interactive':
        try:
            interactive_mode(config)
        except KeyboardInterrupt:
            console.print("\n[green]👋 Operation cancelled by user.[/green]")
        return 0

    try:
        output = run_quote(args, config)
    except QuoteError as e:
        logger.error(f"❌ Quote rejected: {e}")
        print(error_text(str(e)), file=sys.stderr)
        return 1

    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(output)
        logger.info(f"✅ Results saved to: {args.output}")
    else:
        sys.stdout.write(output)
    return 0


def cli():
    """Console script entry point."""
    sys.exit(main())


if __name__ == '__main__':
    cli()
