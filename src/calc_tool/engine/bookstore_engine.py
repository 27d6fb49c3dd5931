"""
Bookstore Cost Engine - wholesale cost and profit for a book order.

The bookstore buys at a fixed 40% discount off the cover price and pays
tiered shipping: a flat rate for the first copy plus a lower rate for
each additional copy. Shipping is a cost to the store, not passed on
to customers.
"""
from decimal import Decimal

from .models import (
    BookstoreInput,
    BookstoreOutcome,
    BookstoreResult,
    ErrorKind,
    ValidationError,
    to_decimal,
    to_whole,
)


BOOKSTORE_DISCOUNT = Decimal("0.40")
FIRST_COPY_SHIPPING = Decimal("3.00")
ADDITIONAL_COPY_SHIPPING = Decimal("0.75")


def discounted_price(cover_price: Decimal) -> Decimal:
    """Apply the 40% bookstore discount to the cover price."""
    return cover_price * (1 - BOOKSTORE_DISCOUNT)


def books_cost(unit_price: Decimal, copies: int) -> Decimal:
    return unit_price * copies


def shipping_cost(copies: int) -> Decimal:
    """$3.00 for the first copy, $0.75 per additional copy."""
    if copies == 1:
        return FIRST_COPY_SHIPPING
    return FIRST_COPY_SHIPPING + ADDITIONAL_COPY_SHIPPING * (copies - 1)


def total_revenue(cover_price: Decimal, copies: int) -> Decimal:
    """Revenue if every copy sells at cover price."""
    return cover_price * copies


def profit(revenue: Decimal, cost: Decimal) -> Decimal:
    """Profit before operational costs (rent, salaries, etc.). Not clamped."""
    return revenue - cost


class BookstoreCostEngine:
    """
    Computes a BookstoreResult from a cover price and copy count.

    Resolution order:
    1. Validate price, then copies (first failure wins)
    2. Discounted unit price and cost of books
    3. Tiered shipping
    4. Total wholesale cost = books + shipping
    5. Revenue at cover price, profit = revenue - wholesale cost
    """

    def validate(self, cover_price: Decimal, copies: int) -> ValidationError | None:
        """Return the first validation failure, or None if inputs are usable."""
        if not cover_price.is_finite() or cover_price <= 0:
            return ValidationError.of(ErrorKind.NON_POSITIVE_PRICE)
        if copies <= 0:
            return ValidationError.of(ErrorKind.NON_POSITIVE_COPIES)
        return None

    def compute(self, cover_price, number_of_copies: int) -> BookstoreOutcome:
        """
        Calculate wholesale cost and profit.

        Args:
            cover_price: List price per book (Decimal, float, int or str)
            number_of_copies: Copies ordered

        Returns:
            BookstoreOutcome holding the result, or the validation error

        Raises:
            TypeError: number_of_copies has a fractional part
        """
        price = to_decimal(cover_price)
        copies = to_whole(number_of_copies, "number_of_copies")

        error = self.validate(price, copies)
        if error is not None:
            return BookstoreOutcome(error=error)

        unit = discounted_price(price)
        cost_of_books = books_cost(unit, copies)
        shipping = shipping_cost(copies)
        wholesale = cost_of_books + shipping
        revenue = total_revenue(price, copies)

        return BookstoreOutcome(result=BookstoreResult(
            cover_price=price,
            number_of_copies=copies,
            discounted_price=unit,
            books_cost=cost_of_books,
            shipping_cost=shipping,
            total_wholesale_cost=wholesale,
            total_revenue=revenue,
            profit=profit(revenue, wholesale),
        ))

    def compute_input(self, request: BookstoreInput) -> BookstoreOutcome:
        return self.compute(request.cover_price, request.number_of_copies)
