import logging
import os

GLOBAL_LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()

log_sources = [
    "INITIALIZATION",
    "SIGNUP",
    "STOREFRONT",
    "SESSION",
    "HTTP",
    "HTTP_TRACING",
]

SRC_LOG_LEVELS: dict[str, str] = {}

for source in log_sources:
    log_env_var = f"LOG_LEVEL_{source}"
    SRC_LOG_LEVELS[source] = os.environ.get(log_env_var, "").upper()
    if SRC_LOG_LEVELS[source] not in logging.getLevelNamesMapping():
        SRC_LOG_LEVELS[source] = GLOBAL_LOG_LEVEL
