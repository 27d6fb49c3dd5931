import pytest
import sys
import os
from decimal import Decimal

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from calc_tool.engine import BookstoreCostEngine, BookstoreInput, ErrorKind
from calc_tool.engine.bookstore_engine import shipping_cost, discounted_price


@pytest.fixture
def engine():
    return BookstoreCostEngine()


def test_default_order(engine):
    """$24.95 cover, 60 copies: the configured default order."""
    outcome = engine.compute(24.95, 60)
    assert outcome.ok
    result = outcome.result
    
    assert result.discounted_price == Decimal("14.97")
    assert result.books_cost == Decimal("898.20")
    assert result.shipping_cost == Decimal("47.25")
    assert result.total_wholesale_cost == Decimal("945.45")
    assert result.total_revenue == Decimal("1497.00")
    assert result.profit == Decimal("551.55")
    assert result.number_of_copies == 60


def test_float_price_is_converted_exactly(engine):
    """24.95 as a float must not drag binary noise into the result."""
    result = engine.compute(24.95, 1).result
    assert result.cover_price == Decimal("24.95")


@pytest.mark.parametrize("copies,expected", [
    (1, Decimal("3.00")),
    (2, Decimal("3.75")),
    (3, Decimal("4.50")),
    (60, Decimal("47.25")),
])
def test_shipping_tiers(copies, expected):
    assert shipping_cost(copies) == expected, \
        f"Shipping for {copies} copies should be {expected}, got {shipping_cost(copies)}"


@pytest.mark.parametrize("price", ["0.01", "1", "9.99", "24.95", "100.00", "1234.56"])
@pytest.mark.parametrize("copies", [1, 2, 7, 60, 500])
def test_invariants(engine, price, copies):
    result = engine.compute(price, copies).result
    
    assert result.discounted_price == Decimal(price) * Decimal("0.6")
    assert result.total_wholesale_cost == result.books_cost + result.shipping_cost
    assert result.profit == result.total_revenue - result.total_wholesale_cost
    assert result.total_revenue == Decimal(price) * copies


def test_negative_profit_is_not_clamped(engine):
    """Cheap books: shipping eats the margin."""
    result = engine.compute("1.00", 10).result
    assert result.profit == Decimal("-5.75")


@pytest.mark.parametrize("price", [-5, 0, "0.00", "-0.01"])
def test_non_positive_price_rejected(engine, price):
    outcome = engine.compute(price, 10)
    assert not outcome.ok
    assert outcome.result is None
    assert outcome.error.kind == ErrorKind.NON_POSITIVE_PRICE
    assert outcome.error.message == "Cover price must be greater than zero."


@pytest.mark.parametrize("copies", [0, -1, -60])
def test_non_positive_copies_rejected(engine, copies):
    outcome = engine.compute(24.95, copies)
    assert not outcome.ok
    assert outcome.error.kind == ErrorKind.NON_POSITIVE_COPIES
    assert outcome.error.message == "Number of copies must be greater than zero."


def test_price_checked_before_copies(engine):
    outcome = engine.compute(-5, -10)
    assert outcome.error.kind == ErrorKind.NON_POSITIVE_PRICE


def test_non_finite_price_rejected(engine):
    outcome = engine.compute(float("nan"), 10)
    assert outcome.error.kind == ErrorKind.NON_POSITIVE_PRICE


def test_compute_input_matches_compute(engine):
    request = BookstoreInput(cover_price=Decimal("24.95"), number_of_copies=60)
    assert engine.compute_input(request) == engine.compute("24.95", 60)


def test_result_is_immutable(engine):
    result = engine.compute(24.95, 60).result
    with pytest.raises(AttributeError):
        result.profit = Decimal("0")


def test_discounted_price_helper():
    assert discounted_price(Decimal("10")) == Decimal("6")


@pytest.mark.parametrize("copies", [1.9, 0.5, -0.5, Decimal("2.5")])
def test_fractional_copies_are_not_truncated(engine, copies):
    with pytest.raises(TypeError, match="number_of_copies must be a whole number"):
        engine.compute(24.95, copies)


def test_bool_copies_rejected(engine):
    with pytest.raises(TypeError):
        engine.compute(24.95, True)


def test_integral_copies_accepted(engine):
    assert engine.compute(24.95, 60.0) == engine.compute(24.95, 60)
    assert engine.compute(24.95, Decimal("60")) == engine.compute(24.95, 60)
