"""REST client for the Coincheck exchange API."""

from typing import Mapping, Optional, Sequence, TypeVar, Union

import httpx
from pydantic import BaseModel, ValidationError

from .config import ClientConfig, DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from .exceptions import APIError, DecodeError, RequestTimeoutError, TransportError, UsageError
from .logger import ConsoleLogger, Logger, LogLevel
from .signing import NonceGenerator, make_signature
from .types import (
    APIResponse,
    DepositHistoryResponse,
    OpenOrdersResponse,
    OrderHistoryResponse,
    PaginationRequest,
    SentHistoryResponse,
    Ticker,
)

Query = Union[Mapping[str, str], Sequence[tuple[str, str]]]
Body = Union[bytes, str]
ModelT = TypeVar("ModelT", bound=BaseModel)


class CoincheckClient:
    """
    Async client for the Coincheck REST API.

    Public endpoints are sent as-is. Private endpoints carry ACCESS-KEY,
    ACCESS-NONCE and ACCESS-SIGNATURE headers, the signature being an
    HMAC-SHA256 of nonce + URL + body keyed by the API secret.

    Example:
        ```python
        async with CoincheckClient(api_key, api_secret) as client:
            ticker = await client.ticker()
            history = await client.order_history(PaginationRequest(limit=10))
        ```
    """

    def __init__(
        self,
        api_key: str = "",
        api_secret: str = "",
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        log_level: LogLevel = LogLevel.INFO,
        logger: Optional[Logger] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        nonce_generator: Optional[NonceGenerator] = None,
    ):
        """
        Initialize the client.

        Args:
            api_key: API key, sent in cleartext as ACCESS-KEY
            api_secret: API secret, used only as the HMAC key
            base_url: API root (e.g., "https://coincheck.com/api")
            timeout: Request timeout in seconds for the owned transport
            log_level: Minimum log level for the default logger
            logger: Custom logger instance
            http_client: Transport to use; the client creates and owns one when omitted
            nonce_generator: Nonce source for private requests
        """
        self._api_key = api_key
        self._api_secret = api_secret
        self.base_url = base_url.rstrip("/")
        self.logger = logger or ConsoleLogger(level=log_level)
        self._nonces = nonce_generator or NonceGenerator()

        self._owns_http = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        logger: Optional[Logger] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> "CoincheckClient":
        """Build a client from a ClientConfig."""
        return cls(
            api_key=config.api_key,
            api_secret=config.api_secret,
            base_url=config.base_url,
            timeout=config.timeout,
            log_level=config.log_level,
            logger=logger,
            http_client=http_client,
        )

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_http:
            await self._http.aclose()

    # ========================================================================
    # Request construction
    # ========================================================================

    def _resolve(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    @staticmethod
    def _encode_query(query: Optional[Query]) -> Optional[list[tuple[str, str]]]:
        if not query:
            return None
        pairs = query.items() if isinstance(query, Mapping) else query
        return sorted((str(k), str(v)) for k, v in pairs)

    def new_public_request(
        self, method: str, path: str, query: Optional[Query] = None
    ) -> httpx.Request:
        """Build an unauthenticated request."""
        return self._http.build_request(
            method, self._resolve(path), params=self._encode_query(query)
        )

    def new_private_request(
        self,
        method: str,
        path: str,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
    ) -> httpx.Request:
        """
        Build a signed request.

        The body is buffered in full before signing, and the signature covers
        the URL exactly as it will go over the wire.

        Raises:
            UsageError: If the API key or secret is missing
        """
        if not self._api_key or not self._api_secret:
            raise UsageError("API key and secret are required for private endpoints")

        if isinstance(body, str):
            body = body.encode("utf-8")
        content = body or b""

        headers = {"Content-Type": "application/json"} if content else None
        request = self._http.build_request(
            method,
            self._resolve(path),
            params=self._encode_query(query),
            content=content or None,
            headers=headers,
        )

        nonce = self._nonces.next()
        signature = make_signature(nonce, str(request.url), content, self._api_secret)
        request.headers["ACCESS-KEY"] = self._api_key
        request.headers["ACCESS-NONCE"] = nonce
        request.headers["ACCESS-SIGNATURE"] = signature
        return request

    # ========================================================================
    # Dispatch & decoding
    # ========================================================================

    async def send(self, request: httpx.Request) -> httpx.Response:
        """
        Dispatch a request through the transport.

        Raises:
            RequestTimeoutError: If the transport timed out
            TransportError: On any other connection-level failure
        """
        self.logger.info(f"{request.method} {request.url}")
        try:
            return await self._http.send(request)
        except httpx.TimeoutException as e:
            self.logger.error(f"{request.method} {request.url} timed out: {e}")
            raise RequestTimeoutError(f"request timed out: {e}") from e
        except httpx.TransportError as e:
            self.logger.error(f"{request.method} {request.url} failed: {e}")
            raise TransportError(f"request failed: {e}") from e

    def decode(self, response: httpx.Response, model: type[ModelT]) -> ModelT:
        """
        Parse a response body into ``model``.

        Raises:
            DecodeError: If the body is not valid JSON of the expected shape
        """
        try:
            return model.model_validate_json(response.content)
        except ValidationError as e:
            self.logger.error(
                f"Failed to decode {model.__name__} (status {response.status_code}): {e}"
            )
            raise DecodeError(
                f"malformed {model.__name__} response: {e}",
                status_code=response.status_code,
            ) from e

    def _raise_for_status(self, response: httpx.Response) -> None:
        if response.is_success:
            return
        try:
            envelope = APIResponse.model_validate_json(response.content)
        except ValidationError:
            envelope = None
        message = envelope.error if envelope and envelope.error else None
        raise APIError(
            message or f"bad status: {response.status_code}",
            status_code=response.status_code,
        )

    def _raise_for_error_envelope(self, response: httpx.Response) -> None:
        """Raise if a successful public response is really an error envelope."""
        try:
            envelope = APIResponse.model_validate_json(response.content)
        except ValidationError:
            return
        explicit = envelope.model_fields_set
        if ("error" in explicit and envelope.error) or (
            "success" in explicit and not envelope.success
        ):
            envelope.raise_for_error(response.status_code)

    async def _private_get(
        self, path: str, model: type[ModelT], query: Optional[Query] = None
    ) -> ModelT:
        request = self.new_private_request("GET", path, query)
        response = await self.send(request)
        self._raise_for_status(response)

        result = self.decode(response, model)
        result.raise_for_error(response.status_code)
        return result

    # ========================================================================
    # Public API
    # ========================================================================

    async def ticker(self) -> Ticker:
        """Get the latest ticker. No authentication."""
        request = self.new_public_request("GET", "/ticker")
        response = await self.send(request)
        self._raise_for_status(response)
        self._raise_for_error_envelope(response)
        return self.decode(response, Ticker)

    # ========================================================================
    # Private API
    # ========================================================================

    async def order_history(
        self, pagination: Optional[PaginationRequest] = None
    ) -> OrderHistoryResponse:
        """
        Get the account's order transactions.

        Passing a PaginationRequest selects the paginated endpoint, even when
        all of its fields are unset.
        """
        if pagination is None:
            return await self._private_get("/exchange/orders/transactions", OrderHistoryResponse)
        return await self._private_get(
            "/exchange/orders/transactions_pagination",
            OrderHistoryResponse,
            pagination.to_params(),
        )

    async def sent_history(self, currency: str) -> SentHistoryResponse:
        """Get outgoing transfers for a currency."""
        return await self._private_get(
            "/send_money", SentHistoryResponse, {"currency": currency}
        )

    async def deposit_history(self, currency: str) -> DepositHistoryResponse:
        """Get deposits for a currency."""
        return await self._private_get(
            "/deposit_money", DepositHistoryResponse, {"currency": currency}
        )

    async def open_orders(self) -> OpenOrdersResponse:
        """Get orders that are still open."""
        return await self._private_get("/exchange/orders/opens", OpenOrdersResponse)
