import logging

import httpx
import pytest
import respx

from storefront_account.gateway.http.http_client_factory import HttpClientFactory
from storefront_account.gateway.utilities.endpoint_filter import EndpointFilter
from storefront_account.gateway.utilities.logger.logging_transport import (
    LoggingTransport,
    mask_headers,
    mask_passwords,
)


def test_mask_headers_hides_storefront_token() -> None:
    masked = mask_headers(
        httpx.Headers(
            {
                "X-Shopify-Storefront-Access-Token": "secret",
                "accept": "application/json",
            }
        )
    )

    assert masked["x-shopify-storefront-access-token"] == "***"
    assert masked["accept"] == "application/json"


def test_mask_passwords_in_graphql_variables() -> None:
    content = '{"variables": {"input": {"email": "a@b.c", "password": "p\\"w"}}}'

    assert (
        mask_passwords(content)
        == '{"variables": {"input": {"email": "a@b.c", "password": "***"}}}'
    )


async def test_logging_transport_logs_masked_request(
    caplog: pytest.LogCaptureFixture,
) -> None:
    factory = HttpClientFactory(log_requests=True)
    caplog.set_level(
        logging.DEBUG,
        logger="storefront_account.gateway.utilities.logger.logging_transport",
    )

    with respx.mock(assert_all_called=True) as router:
        router.post("https://shop.example.com/graphql.json").respond(
            json={"data": {}}
        )
        async with factory.create_http_client(
            base_url="https://shop.example.com",
            headers={"X-Shopify-Storefront-Access-Token": "secret"},
        ) as client:
            assert isinstance(client._transport, LoggingTransport)
            response = await client.post(
                "/graphql.json", json={"variables": {"password": "hunter22"}}
            )

    assert response.json() == {"data": {}}
    assert "hunter22" not in caplog.text
    assert "secret" not in caplog.text
    assert "Request: POST https://shop.example.com/graphql.json" in caplog.text


@pytest.mark.parametrize(
    "message, kept",
    [
        ('127.0.0.1:5000 - "GET /health HTTP/1.1" 200', False),
        ('127.0.0.1:5000 - "GET /account/signup HTTP/1.1" 200', True),
    ],
)
def test_endpoint_filter(message: str, kept: bool) -> None:
    record = logging.LogRecord(
        name="uvicorn.access",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=None,
        exc_info=None,
    )

    assert EndpointFilter(paths=["/health"]).filter(record) is kept
