"""
Base adapter interface for upstream data sources.

Defines the contract adapters implement and owns the shared HTTP client
lifecycle: the client is created by an explicit ``initialize()`` call
during application startup and disposed by ``close()`` on shutdown.

Responsibility: Abstract base class defining adapter contract
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar, Any, Optional
import logging

import httpx

from .errors import UpstreamHTTPError, UpstreamUnavailableError


# Generic type for normalized data models
T = TypeVar('T')


class BaseAdapter(ABC, Generic[T]):
    """
    Abstract base class for upstream data source adapters.

    Every adapter MUST:
    1. Be initialized (``await adapter.initialize()``) before fetching
    2. Implement normalize() to convert raw records to domain models
    3. Raise UpstreamError subclasses for failed requests
    4. Log all upstream calls for observability

    Subclasses should NOT:
    - Retry failed requests (a failure belongs to the calling request)
    - Store per-request state on the adapter (it is shared across requests)
    """

    def __init__(
        self,
        source_name: str,
        timeout_seconds: float = 30,
        user_agent: str = "TweedeKamerAttendance/1.0",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize base adapter.

        Args:
            source_name: Identifier for this adapter (e.g., "tweedekamer_activities")
            timeout_seconds: Request timeout in seconds
            user_agent: User-Agent header sent upstream
            transport: Optional httpx transport (used to stub the upstream in tests)
        """
        self.source_name = source_name
        self.timeout_seconds = timeout_seconds
        self.user_agent = user_agent
        self._transport = transport
        self.client: Optional[httpx.AsyncClient] = None

        # Set up logger
        self.logger = logging.getLogger(f"adapter.{source_name}")

    @property
    def is_ready(self) -> bool:
        """Whether the HTTP client has been created."""
        return self.client is not None

    async def initialize(self) -> None:
        """Create the shared HTTP client. Safe to call twice."""
        if self.client is not None:
            self.logger.warning("Adapter already initialized")
            return

        self.client = httpx.AsyncClient(
            timeout=self.timeout_seconds,
            headers={
                "User-Agent": self.user_agent,
                "Accept": "application/json"
            },
            follow_redirects=True,
            transport=self._transport,
        )
        self.logger.info(f"HTTP client ready for {self.source_name}")

    async def close(self) -> None:
        """Close HTTP client connection"""
        if self.client is None:
            return
        await self.client.aclose()
        self.client = None
        self.logger.info(f"HTTP client closed for {self.source_name}")

    async def _get_json(self, url: str) -> Any:
        """
        GET a URL and decode the JSON body.

        Raises:
            UpstreamUnavailableError: Client not initialized or transport failure
            UpstreamHTTPError: Non-2xx response
        """
        if self.client is None:
            raise UpstreamUnavailableError.not_ready()

        self.logger.debug(f"GET {url}")

        try:
            response = await self.client.get(url)
        except httpx.HTTPError as e:
            raise UpstreamUnavailableError(
                f"Could not reach upstream: {e}", url=url
            ) from e

        if not response.is_success:
            raise UpstreamHTTPError(
                response.status_code,
                response.reason_phrase,
                url=url
            )

        return response.json()

    @abstractmethod
    def normalize(self, raw_data: Any) -> T:
        """
        Normalize a raw upstream record into a domain model.

        Args:
            raw_data: Raw JSON record from the source

        Returns:
            Normalized domain model instance

        Raises:
            ValueError: If raw_data cannot be normalized
        """
        pass
