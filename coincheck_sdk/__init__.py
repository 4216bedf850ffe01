"""Coincheck SDK for Python."""

# Client
from .client import CoincheckClient
from .config import ClientConfig

# Signing
from .signing import make_signature, NonceGenerator

# Logging
from .logger import Logger, ConsoleLogger, NoopLogger, LogLevel

# Types
from .types import (
    SortOrder,
    APIResponse,
    PaginationRequest,
    PaginationResponse,
    Ticker,
    OrderTransaction,
    OrderHistoryResponse,
    SentMoney,
    SentHistoryResponse,
    DepositMoney,
    DepositHistoryResponse,
    OpenOrder,
    OpenOrdersResponse,
)

# Exceptions
from .exceptions import (
    CoincheckError,
    TransportError,
    RequestTimeoutError,
    DecodeError,
    APIError,
    UsageError,
)

__all__ = [
    # Client
    "CoincheckClient",
    "ClientConfig",
    # Signing
    "make_signature",
    "NonceGenerator",
    # Logging
    "Logger",
    "ConsoleLogger",
    "NoopLogger",
    "LogLevel",
    # Types
    "SortOrder",
    "APIResponse",
    "PaginationRequest",
    "PaginationResponse",
    "Ticker",
    "OrderTransaction",
    "OrderHistoryResponse",
    "SentMoney",
    "SentHistoryResponse",
    "DepositMoney",
    "DepositHistoryResponse",
    "OpenOrder",
    "OpenOrdersResponse",
    # Exceptions
    "CoincheckError",
    "TransportError",
    "RequestTimeoutError",
    "DecodeError",
    "APIError",
    "UsageError",
]

__version__ = "0.1.0"
