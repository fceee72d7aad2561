import os
from typing import Optional


class StorefrontEnvironmentVariables:
    @staticmethod
    def str2bool(v: str | None) -> bool:
        return v is not None and str(v).lower() in ("yes", "true", "t", "1", "y")

    @property
    def store_domain(self) -> Optional[str]:
        return os.environ.get("PUBLIC_STORE_DOMAIN")

    @property
    def storefront_api_token(self) -> Optional[str]:
        return os.environ.get("PUBLIC_STOREFRONT_API_TOKEN")

    @property
    def storefront_api_version(self) -> str:
        return os.environ.get("PUBLIC_STOREFRONT_API_VERSION", "2024-01")

    @property
    def storefront_api_timeout_seconds(self) -> float:
        return float(os.environ.get("STOREFRONT_API_TIMEOUT_SECONDS", 30))

    @property
    def session_secret(self) -> Optional[str]:
        return os.environ.get("SESSION_SECRET")

    @property
    def session_cookie_name(self) -> str:
        return os.environ.get("SESSION_COOKIE_NAME", "session")

    @property
    def session_max_age_seconds(self) -> int:
        return int(os.environ.get("SESSION_MAX_AGE_SECONDS", 60 * 60 * 24 * 30))

    @property
    def session_cookie_secure(self) -> bool:
        return self.str2bool(os.environ.get("SESSION_COOKIE_SECURE", "true"))

    @property
    def account_landing_path(self) -> str:
        return os.environ.get("ACCOUNT_LANDING_PATH", "/dashboard")

    @property
    def account_login_path(self) -> str:
        return os.environ.get("ACCOUNT_LOGIN_PATH", "/account/login")

    @property
    def log_storefront_requests(self) -> bool:
        return self.str2bool(os.environ.get("LOG_STOREFRONT_REQUESTS", "false"))
