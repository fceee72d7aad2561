import logging
import re
from typing import Any, AsyncIterator

import httpx

from storefront_account.gateway.utilities.logger.log_levels import SRC_LOG_LEVELS

logger = logging.getLogger(__name__)
logger.setLevel(SRC_LOG_LEVELS["HTTP"])

_MASKED_HEADERS: frozenset[str] = frozenset(
    {"x-shopify-storefront-access-token", "authorization", "cookie"}
)
_PASSWORD_PATTERN: re.Pattern[str] = re.compile(r'("password"\s*:\s*)"(?:[^"\\]|\\.)*"')


def mask_headers(headers: httpx.Headers) -> dict[str, str]:
    return {
        key: "***" if key.lower() in _MASKED_HEADERS else value
        for key, value in headers.items()
    }


def mask_passwords(content: str) -> str:
    return _PASSWORD_PATTERN.sub(r'\1"***"', content)


class LogResponse(httpx.Response):
    async def aiter_bytes(self, *args: Any, **kwargs: Any) -> AsyncIterator[bytes]:
        logger.debug(
            f"====== Response: {self.request.method} {self.url} {self.status_code} ====="
        )
        async for chunk in super().aiter_bytes(*args, **kwargs):
            logger.debug(chunk)
            yield chunk
        logger.debug(
            f"====== End Response: {self.request.method} {self.url} {self.status_code} ====="
        )


class LoggingTransport(httpx.AsyncBaseTransport):
    """Wraps a transport and logs every Storefront request with secrets masked."""

    def __init__(self, transport: httpx.AsyncBaseTransport) -> None:
        self.transport = transport

    async def handle_async_request(self, request: httpx.Request) -> LogResponse:
        logger.debug(f" ====== Request: {request.method} {request.url} =====")
        logger.debug(f"Headers: {mask_headers(request.headers)}")
        if request.content:
            logger.debug(
                f"Content: {mask_passwords(request.content.decode('utf-8', errors='ignore'))}"
            )

        response = await self.transport.handle_async_request(request)

        return LogResponse(
            status_code=response.status_code,
            headers=response.headers,
            stream=response.stream,
            extensions=response.extensions,
        )

    async def aclose(self) -> None:
        await self.transport.aclose()
