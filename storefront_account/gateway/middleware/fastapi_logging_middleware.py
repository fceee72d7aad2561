import logging
import time
from typing import Callable, Awaitable
from urllib.parse import parse_qsl, urlencode

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from typing_extensions import override

from storefront_account.gateway.utilities.logger.log_levels import SRC_LOG_LEVELS

logger = logging.getLogger(__name__)
logger.setLevel(SRC_LOG_LEVELS["HTTP_TRACING"])

_REDACTED_FIELDS: frozenset[str] = frozenset({"password", "passwordConfirm"})


def redact_form_body(body: bytes) -> str:
    """Form-encoded body with every password field replaced by ***."""
    fields = parse_qsl(body.decode("utf-8", errors="ignore"), keep_blank_values=True)
    return urlencode(
        [(key, "***" if key in _REDACTED_FIELDS else value) for key, value in fields]
    )


class FastApiLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware for logging requests and responses in FastAPI applications.
    4xx responses are logged at warning and 5xx at error. Other responses,
    with the form body (passwords redacted), are only logged at debug level.
    """

    @override
    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        # don't log health check requests
        if request.url.path == "/health":
            return await call_next(request)

        req_body_text: str = "No body"
        if logger.isEnabledFor(logging.DEBUG) and request.method == "POST":
            req_body_text = redact_form_body(await request.body())

        start_time = time.perf_counter()
        response: Response = await call_next(request)
        process_time = time.perf_counter() - start_time
        process_time_in_secs = f"{process_time:.4f} secs"

        if response.status_code >= 400:
            log_level = logging.ERROR if response.status_code >= 500 else logging.WARNING
            logger.log(
                log_level,
                f"\n====== Response ERROR : {response.status_code} {request.method} {request.url} (time: {process_time_in_secs}) ======",
            )
        elif logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                f"\n==== Request: {request.method} {request.url} ======"
                f"\n====== Request Body ====="
                f"\n{req_body_text}"
                f"\n==== End of Request Body ======"
            )
            logger.debug(
                f"\n====== Response: {response.status_code} {request.method} {request.url} (time: {process_time_in_secs}) ======"
                f"\n===== Location ======"
                f"\n{response.headers.get('location', '')}"
            )
        return response
