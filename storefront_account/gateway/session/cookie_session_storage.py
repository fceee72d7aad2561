import http.cookies
import logging
from typing import Literal

from itsdangerous import BadSignature, URLSafeTimedSerializer

from storefront_account.gateway.session.customer_session import CustomerSession
from storefront_account.gateway.utilities.logger.log_levels import SRC_LOG_LEVELS

logger = logging.getLogger(__name__)
logger.setLevel(SRC_LOG_LEVELS["SESSION"])


class CookieSessionStorage:
    """
    Stores the whole session in a signed cookie.

    The payload is JSON serialized and signed with ``secret``; a cookie that
    fails verification or is older than ``max_age`` seconds yields an empty session.
    """

    _salt: str = "storefront-account-session"

    def __init__(
        self,
        *,
        secret: str | None,
        cookie_name: str = "session",
        max_age: int = 60 * 60 * 24 * 30,
        secure: bool = True,
        same_site: Literal["lax", "strict", "none"] = "lax",
        path: str = "/",
    ) -> None:
        if not secret:
            raise ValueError("SESSION_SECRET environment variable must be set")
        self.cookie_name: str = cookie_name
        self.max_age: int = max_age
        self.secure: bool = secure
        self.same_site: str = same_site
        self.path: str = path
        self._serializer = URLSafeTimedSerializer(secret, salt=self._salt)

    def get_session(self, cookie_value: str | None) -> CustomerSession:
        if not cookie_value:
            return CustomerSession()
        try:
            data = self._serializer.loads(cookie_value, max_age=self.max_age)
        except BadSignature:
            logger.info("Ignoring session cookie with an invalid or expired signature")
            return CustomerSession()
        if not isinstance(data, dict):
            logger.warning("Ignoring session cookie that does not hold an object")
            return CustomerSession()
        return CustomerSession(data)

    def commit_session(self, session: CustomerSession) -> str:
        """Serialize the session and return the value for a ``Set-Cookie`` header."""
        cookie: http.cookies.BaseCookie[str] = http.cookies.SimpleCookie()
        cookie[self.cookie_name] = self._serializer.dumps(session.data)
        cookie[self.cookie_name]["max-age"] = self.max_age
        cookie[self.cookie_name]["path"] = self.path
        cookie[self.cookie_name]["httponly"] = True
        cookie[self.cookie_name]["samesite"] = self.same_site
        if self.secure:
            cookie[self.cookie_name]["secure"] = True
        return cookie.output(header="").strip()
