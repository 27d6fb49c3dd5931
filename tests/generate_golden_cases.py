"""
Generate golden test cases by running the current engines on sample inputs.
This captures current behavior as a regression baseline.
"""
import pandas as pd
import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src'))

from calc_tool.engine import BillBreakdownEngine, BookstoreCostEngine

BOOKSTORE_INPUTS = [
    ('24.95', 60),   # Default configured order
    ('10.00', 1),    # Single copy, first-copy shipping only
    ('10.00', 2),    # First additional-copy shipping step
    ('1.00', 10),    # Shipping outweighs margin, negative profit
    ('19.99', 100),
    ('0.50', 1),
]

BILL_AMOUNTS = [247, 0, 1, 4, 5, 99, 100, 188, 376, 1000]


def generate_golden_cases():
    here = os.path.dirname(os.path.abspath(__file__))

    bookstore = BookstoreCostEngine()
    rows = []
    for price, copies in BOOKSTORE_INPUTS:
        outcome = bookstore.compute(price, copies)
        if outcome.ok:
            rows.append(outcome.result.to_dict())
    df_bookstore = pd.DataFrame(rows)
    df_bookstore.to_csv(os.path.join(here, 'golden_bookstore.csv'), index=False)
    print(f"Generated {len(df_bookstore)} bookstore cases")

    bills = BillBreakdownEngine()
    rows = []
    for amount in BILL_AMOUNTS:
        outcome = bills.compute(amount)
        if outcome.ok:
            rows.append(outcome.breakdown.to_dict())
    df_bills = pd.DataFrame(rows)
    df_bills.to_csv(os.path.join(here, 'golden_bills.csv'), index=False)
    print(f"Generated {len(df_bills)} bill cases")
    print()
    print("Sample cases:")
    print(df_bookstore.head(5).to_string(index=False))
    print(df_bills.head(5).to_string(index=False))

if __name__ == "__main__":
    generate_golden_cases()
