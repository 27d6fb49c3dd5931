"""
Text rendering for calculation results.

Engines never print. Hosts pass a result (or outcome) through these
helpers and hand the lines to a sink: `print` by default, or any
callable taking one string.
"""
from decimal import Decimal
from typing import Callable, Iterable, Optional

from .models import BillBreakdown, BillOutcome, BookstoreOutcome, BookstoreResult


Sink = Callable[[str], None]

BOOKSTORE_FOOTER = "=" * 43
BILLS_FOOTER = "=" * 37
EMPTY_BILLS_MESSAGE = "Amount is $0. No bills needed."


def money(value: Decimal) -> str:
    """Render as $x.xx, with the sign in front of the dollar symbol."""
    if value < 0:
        return f"-${-value:.2f}"
    return f"${value:.2f}"


def format_bookstore(result: BookstoreResult) -> list[str]:
    """Full financial breakdown for a bookstore order."""
    return [
        f"=== Bookstore Calculation for {result.number_of_copies} Copies ===",
        f"Cover Price per Book: {money(result.cover_price)}",
        f"Discounted Price per Book (40% off): {money(result.discounted_price)}",
        f"Cost of Books: {money(result.books_cost)}",
        f"Shipping Cost: {money(result.shipping_cost)}",
        f"Total Wholesale Cost: {money(result.total_wholesale_cost)}",
        f"Total Revenue (when sold): {money(result.total_revenue)}",
        f"Profit (before operational costs): {money(result.profit)}",
        BOOKSTORE_FOOTER,
    ]


def format_bills(breakdown: BillBreakdown) -> list[str]:
    """Bill breakdown. Denominations with a zero count are left out."""
    lines = [f"=== Dollar Bills Breakdown for ${breakdown.amount} ==="]
    for denomination, count in breakdown.counts():
        if count > 0:
            lines.append(f"{count} x ${denomination} bill(s)")
    lines.append(BILLS_FOOTER)
    return lines


def format_empty_bills() -> list[str]:
    return [EMPTY_BILLS_MESSAGE]


def format_bookstore_outcome(outcome: BookstoreOutcome) -> list[str]:
    if not outcome.ok:
        return [outcome.error.message]
    return format_bookstore(outcome.result)


def format_bills_outcome(outcome: BillOutcome) -> list[str]:
    if not outcome.ok:
        return [outcome.error.message]
    if outcome.empty:
        return format_empty_bills()
    return format_bills(outcome.breakdown)


def emit(lines: Iterable[str], sink: Optional[Sink] = None) -> None:
    """Write each line to the sink."""
    sink = sink or print
    for line in lines:
        sink(line)
