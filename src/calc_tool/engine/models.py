"""
Data models for the calculation engines.

Uses frozen dataclasses so a record cannot change once an engine has
built it. Money is held as Decimal; rounding to cents is left to the
text renderer.
"""
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional


def to_decimal(value) -> Decimal:
    """Convert a float/int/str price to Decimal through its string form."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def to_whole(value, name: str) -> int:
    """
    Accept an int, or a float/Decimal with no fractional part.

    Anything else raises TypeError rather than being truncated, so 1.9
    copies or -0.5 dollars never reach validation as 1 or 0.
    """
    if isinstance(value, bool):
        raise TypeError(f"{name} must be a whole number, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, Decimal) and value.is_finite() and value == value.to_integral_value():
        return int(value)
    raise TypeError(f"{name} must be a whole number, got {value!r}")


class ErrorKind(str, Enum):
    """Classified input validation failures."""
    NON_POSITIVE_PRICE = "NonPositivePrice"
    NON_POSITIVE_COPIES = "NonPositiveCopies"
    NEGATIVE_AMOUNT = "NegativeAmount"


ERROR_MESSAGES = {
    ErrorKind.NON_POSITIVE_PRICE: "Cover price must be greater than zero.",
    ErrorKind.NON_POSITIVE_COPIES: "Number of copies must be greater than zero.",
    ErrorKind.NEGATIVE_AMOUNT: "Dollar amount cannot be negative.",
}


@dataclass(frozen=True)
class ValidationError:
    """A rejected input, with the message shown to the user."""
    kind: ErrorKind
    message: str

    @classmethod
    def of(cls, kind: ErrorKind) -> 'ValidationError':
        return cls(kind=kind, message=ERROR_MESSAGES[kind])


# ============================================================================
# Bookstore
# ============================================================================

@dataclass(frozen=True)
class BookstoreInput:
    """Cover price and copy count for one bookstore order."""
    cover_price: Decimal
    number_of_copies: int


@dataclass(frozen=True)
class BookstoreResult:
    """Wholesale cost and profit breakdown for one bookstore order."""
    cover_price: Decimal
    number_of_copies: int
    discounted_price: Decimal
    books_cost: Decimal
    shipping_cost: Decimal
    total_wholesale_cost: Decimal
    total_revenue: Decimal
    profit: Decimal  # may be negative

    def to_dict(self) -> dict:
        """Plain dict with money rendered as strings (JSON safe, no float drift)."""
        return {
            "cover_price": str(self.cover_price),
            "number_of_copies": self.number_of_copies,
            "discounted_price": str(self.discounted_price),
            "books_cost": str(self.books_cost),
            "shipping_cost": str(self.shipping_cost),
            "total_wholesale_cost": str(self.total_wholesale_cost),
            "total_revenue": str(self.total_revenue),
            "profit": str(self.profit),
        }


@dataclass(frozen=True)
class BookstoreOutcome:
    """Either a result or a validation error, never both."""
    result: Optional[BookstoreResult] = None
    error: Optional[ValidationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


# ============================================================================
# Bills
# ============================================================================

@dataclass(frozen=True)
class BillInput:
    """Whole-dollar amount to break into bills."""
    amount: int


@dataclass(frozen=True)
class BillBreakdown:
    """Bill counts per denomination. Zero counts are kept."""
    amount: int
    hundreds: int = 0
    fifties: int = 0
    twenties: int = 0
    tens: int = 0
    fives: int = 0
    ones: int = 0

    def counts(self) -> list[tuple[int, int]]:
        """(denomination, count) pairs, largest bill first."""
        return [
            (100, self.hundreds),
            (50, self.fifties),
            (20, self.twenties),
            (10, self.tens),
            (5, self.fives),
            (1, self.ones),
        ]

    @property
    def total_bills(self) -> int:
        return sum(count for _, count in self.counts())

    @property
    def is_empty(self) -> bool:
        return self.total_bills == 0

    def to_dict(self) -> dict:
        return {
            "amount": self.amount,
            "hundreds": self.hundreds,
            "fifties": self.fifties,
            "twenties": self.twenties,
            "tens": self.tens,
            "fives": self.fives,
            "ones": self.ones,
        }


@dataclass(frozen=True)
class BillOutcome:
    """
    Breakdown or validation error.

    A zero amount is a success: ``ok`` is true and ``empty`` is true,
    with an all-zero breakdown.
    """
    breakdown: Optional[BillBreakdown] = None
    error: Optional[ValidationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def empty(self) -> bool:
        return self.ok and self.breakdown is not None and self.breakdown.is_empty
