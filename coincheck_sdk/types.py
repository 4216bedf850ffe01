"""Type definitions for the Coincheck SDK."""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from .exceptions import APIError


# ============================================================================
# Enums
# ============================================================================


class SortOrder(str, Enum):
    """Sort direction for paginated list endpoints."""

    ASC = "asc"
    DESC = "desc"


# ============================================================================
# Envelope & Pagination
# ============================================================================


class APIResponse(BaseModel):
    """Envelope carried by every private API response."""

    success: bool = False
    error: Optional[str] = None

    def raise_for_error(self, status_code: Optional[int] = None) -> None:
        """
        Raise APIError if the envelope reports a failure.

        An explicit error message wins over the success flag, so a response
        with ``success: true`` and a non-empty ``error`` still fails.
        """
        if self.error:
            raise APIError(self.error, status_code=status_code)
        if not self.success:
            raise APIError("unknown API error", status_code=status_code)


class PaginationRequest(BaseModel):
    """Pagination options sent with list requests."""

    limit: Optional[int] = None
    order: Optional[SortOrder] = None
    starting_after: Optional[int] = None
    ending_before: Optional[int] = None

    def to_params(self) -> list[tuple[str, str]]:
        """
        Query parameters for this page request, sorted by key.

        Unset values (None, a non-positive limit, a zero cursor) are omitted.
        """
        params: dict[str, str] = {}
        if self.limit is not None and self.limit > 0:
            params["limit"] = str(self.limit)
        if self.order:
            params["order"] = SortOrder(self.order).value
        if self.starting_after:
            params["starting_after"] = str(self.starting_after)
        if self.ending_before:
            params["ending_before"] = str(self.ending_before)
        return sorted(params.items())


class PaginationResponse(BaseModel):
    """Pagination metadata echoed back by the exchange."""

    limit: Optional[int] = None
    order: Optional[SortOrder] = None
    starting_after: Optional[int] = None
    ending_before: Optional[int] = None


# ============================================================================
# Public Market Data
# ============================================================================


class Ticker(BaseModel):
    """Latest ticker. ``volume`` arrives JSON-string encoded."""

    last: float
    bid: float
    ask: float
    high: float
    low: float
    volume: float
    timestamp: int


# ============================================================================
# Account Records
# ============================================================================


class OrderTransaction(BaseModel):
    """A single fill from the order history."""

    id: int
    order_id: int
    created_at: datetime
    funds: dict[str, str] = Field(default_factory=dict)
    pair: str
    rate: str
    fee_currency: Optional[str] = None
    fee: str
    liquidity: str
    side: str


class SentMoney(BaseModel):
    """An outgoing transfer."""

    id: int
    amount: float
    currency: str
    fee: float
    address: str
    created_at: datetime


class DepositMoney(BaseModel):
    """An incoming deposit."""

    id: int
    amount: float
    currency: str
    address: str
    status: str
    confirmed_at: Optional[datetime] = None
    created_at: datetime


class OpenOrder(BaseModel):
    """An order still resting on the book."""

    id: int
    order_type: str
    rate: Optional[float] = None
    pair: str
    pending_amount: Optional[float] = None
    pending_market_buy_amount: Optional[float] = None
    stop_loss_rate: Optional[float] = None
    created_at: datetime


# ============================================================================
# API Response Models
# ============================================================================


class OrderHistoryResponse(APIResponse):
    """Response of the order history endpoints."""

    pagination: Optional[PaginationResponse] = None
    data: list[OrderTransaction] = Field(default_factory=list)
    transactions: list[OrderTransaction] = Field(default_factory=list)

    @property
    def items(self) -> list[OrderTransaction]:
        """Transactions from whichever endpoint variant answered."""
        return self.data or self.transactions


class SentHistoryResponse(APIResponse):
    """Response of the send history endpoint."""

    pagination: Optional[PaginationResponse] = None
    sends: list[SentMoney] = Field(default_factory=list)


class DepositHistoryResponse(APIResponse):
    """Response of the deposit history endpoint."""

    pagination: Optional[PaginationResponse] = None
    deposits: list[DepositMoney] = Field(default_factory=list)


class OpenOrdersResponse(APIResponse):
    """Response of the open orders endpoint."""

    orders: list[OpenOrder] = Field(default_factory=list)
