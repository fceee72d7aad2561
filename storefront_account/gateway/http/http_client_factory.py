import logging

import httpx

from storefront_account.gateway.utilities.logger.log_levels import SRC_LOG_LEVELS
from storefront_account.gateway.utilities.logger.logging_transport import (
    LoggingTransport,
)

logger = logging.getLogger(__name__)
logger.setLevel(SRC_LOG_LEVELS["HTTP"])


class HttpClientFactory:
    """Creates httpx clients for outbound calls to the commerce platform."""

    def __init__(self, *, log_requests: bool = False) -> None:
        self._log_requests: bool = log_requests

    def create_http_client(
        self,
        *,
        base_url: str,
        headers: dict[str, str] | None = None,
        timeout: float = 5.0,
    ) -> httpx.AsyncClient:
        transport: httpx.AsyncBaseTransport | None = None
        if self._log_requests:
            transport = LoggingTransport(httpx.AsyncHTTPTransport())
        logger.debug(f"Creating http client for {base_url}")
        return httpx.AsyncClient(
            base_url=base_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )
