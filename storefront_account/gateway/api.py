import logging
import os
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from storefront_account.container.container_factory import (
    StorefrontAccountContainerFactory,
)
from storefront_account.gateway.middleware.fastapi_logging_middleware import (
    FastApiLoggingMiddleware,
)
from storefront_account.gateway.routers.account_signup_router import (
    AccountSignupRouter,
)
from storefront_account.gateway.utilities.endpoint_filter import EndpointFilter

logger = logging.getLogger(__name__)

log_level = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# disable INFO logging for httpx because it logs every request
logging.getLogger("httpx").setLevel(logging.WARNING)

# disable logging calls to /health endpoint
uvicorn_logger = logging.getLogger("uvicorn.access")
uvicorn_logger.addFilter(EndpointFilter(paths=["/health"]))


@asynccontextmanager
async def lifespan(app1: FastAPI) -> AsyncGenerator[None, None]:
    worker_id = id(app1)
    try:
        logger.info(f"Starting application initialization for worker {worker_id}...")
        yield
    except Exception as e:
        logger.exception(e, stack_info=True)
        raise
    finally:
        logger.info(f"Application shutdown completed for worker {worker_id}")


def create_app() -> FastAPI:
    app1: FastAPI = FastAPI(title="Storefront Account Sign-up", lifespan=lifespan)
    app1.state.container = StorefrontAccountContainerFactory.create_container()
    app1.add_middleware(FastApiLoggingMiddleware)
    app1.include_router(AccountSignupRouter().get_router())

    @app1.api_route("/health", methods=["GET", "POST"])
    async def health() -> str:
        return "OK"

    return app1


# Create the FastAPI app instance
app = create_app()
