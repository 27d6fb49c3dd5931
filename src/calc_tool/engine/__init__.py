"""Engine subpackage - core calculation logic and result records."""
from .bookstore_engine import BookstoreCostEngine
from .bill_engine import BillBreakdownEngine
from .models import (
    BookstoreInput,
    BookstoreResult,
    BookstoreOutcome,
    BillInput,
    BillBreakdown,
    BillOutcome,
    ErrorKind,
    ValidationError,
)

__all__ = [
    'BookstoreCostEngine', 'BillBreakdownEngine',
    'BookstoreInput', 'BookstoreResult', 'BookstoreOutcome',
    'BillInput', 'BillBreakdown', 'BillOutcome',
    'ErrorKind', 'ValidationError',
]
