"""
Calc Tool API - FastAPI surface for both calculators.
"""
from decimal import Decimal

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from ..config.settings import get_settings
from ..engine import BillBreakdownEngine, BookstoreCostEngine, ValidationError
from ..engine.formatting import format_bills_outcome, format_bookstore_outcome

app = FastAPI(
    title="Calc Tool API",
    description="Bookstore profit and dollar bill breakdown calculators",
    version="1.0.0"
)

# Enable CORS for frontend development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

bookstore_engine = BookstoreCostEngine()
bill_engine = BillBreakdownEngine()


class BookstoreRequest(BaseModel):
    """Request model for a bookstore calculation."""
    cover_price: Decimal = Field(allow_inf_nan=False)
    number_of_copies: int


class BillsRequest(BaseModel):
    """Request model for a bill breakdown."""
    amount: int


def _rejected(error: ValidationError) -> HTTPException:
    return HTTPException(
        status_code=422,
        detail={"kind": error.kind.value, "message": error.message},
    )


@app.get("/")
async def root():
    return {"status": "online", "message": "Calc Tool API Active"}


@app.get("/defaults")
async def get_defaults():
    settings = get_settings()
    return {
        "cover_price": str(settings.cover_price),
        "number_of_copies": settings.number_of_copies,
        "dollar_amount": settings.dollar_amount,
    }


@app.post("/bookstore")
async def calculate_bookstore(req: BookstoreRequest):
    outcome = bookstore_engine.compute(req.cover_price, req.number_of_copies)
    if not outcome.ok:
        raise _rejected(outcome.error)
    return {
        **outcome.result.to_dict(),
        "lines": format_bookstore_outcome(outcome),
    }


@app.post("/bills")
async def calculate_bills(req: BillsRequest):
    outcome = bill_engine.compute(req.amount)
    if not outcome.ok:
        raise _rejected(outcome.error)
    return {
        **outcome.breakdown.to_dict(),
        "total_bills": outcome.breakdown.total_bills,
        "empty": outcome.empty,
        "lines": format_bills_outcome(outcome),
    }
