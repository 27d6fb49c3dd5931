"""
Bill Breakdown Engine - splits a dollar amount into the fewest bills.

Single greedy pass from the largest denomination down. Greedy is optimal
for the US bill set {100, 50, 20, 10, 5, 1}; no claim is made for other sets.
"""
from functools import reduce

from .models import BillBreakdown, BillInput, BillOutcome, ErrorKind, ValidationError, to_whole


# Ones are whatever remains after the last step.
DENOMINATIONS = (100, 50, 20, 10, 5)


def bill_count(remaining: int, denomination: int) -> tuple[int, int]:
    """How many bills of `denomination` fit. Returns (count, new_remaining)."""
    return remaining // denomination, remaining % denomination


def _step(state: tuple[int, tuple[int, ...]], denomination: int) -> tuple[int, tuple[int, ...]]:
    remaining, counts = state
    count, remaining = bill_count(remaining, denomination)
    return remaining, counts + (count,)


def greedy_counts(amount: int) -> tuple[int, ...]:
    """Counts for 100, 50, 20, 10, 5 and 1 in that order."""
    ones, counts = reduce(_step, DENOMINATIONS, (amount, ()))
    return counts + (ones,)


class BillBreakdownEngine:
    """Computes a BillBreakdown for a non-negative whole-dollar amount."""

    def compute(self, amount: int) -> BillOutcome:
        """
        Break `amount` into bills.

        Returns:
            BillOutcome with a NegativeAmount error for amount < 0,
            the empty (all-zero) breakdown for 0, else the greedy breakdown

        Raises:
            TypeError: amount has a fractional part
        """
        amount = to_whole(amount, "amount")
        if amount < 0:
            return BillOutcome(error=ValidationError.of(ErrorKind.NEGATIVE_AMOUNT))
        if amount == 0:
            return BillOutcome(breakdown=BillBreakdown(amount=0))

        hundreds, fifties, twenties, tens, fives, ones = greedy_counts(amount)
        return BillOutcome(breakdown=BillBreakdown(
            amount=amount,
            hundreds=hundreds,
            fifties=fifties,
            twenties=twenties,
            tens=tens,
            fives=fives,
            ones=ones,
        ))

    def compute_input(self, request: BillInput) -> BillOutcome:
        return self.compute(request.amount)
