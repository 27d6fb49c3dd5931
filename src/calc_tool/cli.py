"""
Command line entry point.

Usage:
    calc-tool bookstore <price> <copies>
    calc-tool bills <amount>
    calc-tool run [--quiet]

Exit status is 0 on success (a $0 bill amount included), 1 when the
input fails validation, 2 for unparseable arguments.
"""
import argparse
import sys
from decimal import Decimal, InvalidOperation
from typing import Optional

from .config.settings import get_settings
from .engine import BillBreakdownEngine, BookstoreCostEngine
from .engine.formatting import Sink, emit, format_bills_outcome, format_bookstore_outcome


def _price(text: str) -> Decimal:
    try:
        value = Decimal(text)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"invalid price: {text!r}") from None
    if not value.is_finite():
        raise argparse.ArgumentTypeError(f"invalid price: {text!r}")
    return value


def _discard(line: str) -> None:
    pass


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="calc-tool",
        description="Bookstore profit and dollar bill breakdown calculators.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    bookstore = sub.add_parser("bookstore", help="Wholesale cost and profit for a book order")
    bookstore.add_argument("price", type=_price, help="Cover price per book")
    bookstore.add_argument("copies", type=int, help="Number of copies ordered")

    bills = sub.add_parser("bills", help="Fewest bills for a whole-dollar amount")
    bills.add_argument("amount", type=int, help="Dollar amount")

    run = sub.add_parser("run", help="Run both calculators with the configured inputs")
    run.add_argument("-q", "--quiet", action="store_true", help="Only report errors and exit status")
    return parser


def run_bookstore(price, copies: int, sink: Optional[Sink] = None) -> int:
    outcome = BookstoreCostEngine().compute(price, copies)
    if not outcome.ok:
        print(outcome.error.message, file=sys.stderr)
        return 1
    emit(format_bookstore_outcome(outcome), sink)
    return 0


def run_bills(amount: int, sink: Optional[Sink] = None) -> int:
    outcome = BillBreakdownEngine().compute(amount)
    if not outcome.ok:
        print(outcome.error.message, file=sys.stderr)
        return 1
    emit(format_bills_outcome(outcome), sink)
    return 0


def run_configured(verbose: bool = True) -> int:
    """
    Run both calculators with the configured inputs.

    Args:
        verbose: Print the reports. Validation errors go to stderr either way.

    Returns:
        The worst exit status of the two runs
    """
    settings = get_settings()
    sink = None if verbose else _discard
    status = run_bookstore(settings.cover_price, settings.number_of_copies, sink)
    if verbose:
        print()
    return max(status, run_bills(settings.dollar_amount, sink))


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    if args.command == "bookstore":
        return run_bookstore(args.price, args.copies)
    if args.command == "bills":
        return run_bills(args.amount)
    return run_configured(verbose=not args.quiet)


if __name__ == "__main__":
    sys.exit(main())
