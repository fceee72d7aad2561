import logging
from enum import Enum
from typing import Annotated, Sequence

from fastapi import APIRouter, Depends, HTTPException, Request, params
from fastapi.responses import JSONResponse, RedirectResponse, Response

from storefront_account.gateway.api_container import (
    get_customer_session,
    get_customer_signup_manager,
    get_environment_variables,
)
from storefront_account.gateway.managers.customer_signup_manager import (
    CustomerSignupManager,
)
from storefront_account.gateway.models.signup_response import SignupResult
from storefront_account.gateway.models.signup_submission import SubmittedCredentials
from storefront_account.gateway.session.customer_session import CustomerSession
from storefront_account.gateway.utilities.logger.log_levels import SRC_LOG_LEVELS
from storefront_account.gateway.utilities.sign_up_page import build_sign_up_page
from storefront_account.gateway.utilities.storefront_environment_variables import (
    StorefrontEnvironmentVariables,
)
from storefront_account.gateway.utilities.storefront_locale import (
    StorefrontLocale,
    get_locale_from_segment,
)

logger = logging.getLogger(__name__)
logger.setLevel(SRC_LOG_LEVELS["SIGNUP"])


def resolve_locale(request: Request) -> StorefrontLocale:
    """Locale from the optional leading path segment; unknown segments are a 404."""
    locale = get_locale_from_segment(request.path_params.get("locale"))
    if locale is None:
        logger.debug("No sign-up route for path %s", request.url.path)
        raise HTTPException(status_code=404, detail="Not Found")
    return locale


class AccountSignupRouter:
    """Router that renders the customer sign-up form and handles submissions."""

    _form_route: str = "/account/signup"
    _localized_form_route: str = "/{locale}/account/signup"
    _rejected_methods: list[str] = ["PUT", "PATCH", "DELETE"]

    def __init__(
        self,
        *,
        prefix: str = "",
        tags: list[str | Enum] | None = None,
        dependencies: Sequence[params.Depends] | None = None,
    ) -> None:
        self.prefix = prefix
        self.tags = tags or ["account"]
        self.dependencies = dependencies or []
        self.router = APIRouter(
            prefix=self.prefix, tags=self.tags, dependencies=self.dependencies
        )
        self._register_routes()

    def _register_routes(self) -> None:
        for route in (self._form_route, self._localized_form_route):
            self.router.add_api_route(
                route,
                self.render_form,
                methods=["GET"],
                response_class=Response,
                include_in_schema=False,
            )
            self.router.add_api_route(
                route,
                self.submit_form,
                methods=["POST", *self._rejected_methods],
                response_class=Response,
                include_in_schema=False,
            )

    async def render_form(
        self,
        request: Request,
        signup_manager: Annotated[
            CustomerSignupManager, Depends(get_customer_signup_manager)
        ],
        session: Annotated[CustomerSession, Depends(get_customer_session)],
        locale: Annotated[StorefrontLocale, Depends(resolve_locale)],
        environment_variables: Annotated[
            StorefrontEnvironmentVariables, Depends(get_environment_variables)
        ],
    ) -> Response:
        """Redirect signed-in visitors to their landing page, otherwise show the form."""
        landing_path = signup_manager.get_signed_in_redirect(
            session=session, locale=locale
        )
        if landing_path is not None:
            return RedirectResponse(url=landing_path, status_code=302)
        return build_sign_up_page(
            action_path=request.url.path,
            login_path=locale.localize_path(environment_variables.account_login_path),
        )

    async def submit_form(
        self,
        request: Request,
        signup_manager: Annotated[
            CustomerSignupManager, Depends(get_customer_signup_manager)
        ],
        session: Annotated[CustomerSession, Depends(get_customer_session)],
        locale: Annotated[StorefrontLocale, Depends(resolve_locale)],
        environment_variables: Annotated[
            StorefrontEnvironmentVariables, Depends(get_environment_variables)
        ],
    ) -> Response:
        credentials = SubmittedCredentials()
        if request.method == "POST":
            credentials = SubmittedCredentials.from_form(await request.form())

        result: SignupResult = await signup_manager.sign_up(
            method=request.method,
            credentials=credentials,
            session=session,
            locale=locale,
        )

        if not result.succeeded and self._accepts_html(request):
            return build_sign_up_page(
                action_path=request.url.path,
                login_path=locale.localize_path(
                    environment_variables.account_login_path
                ),
                error=result.error,
                status_code=result.status_code,
            )
        return JSONResponse(
            content=result.to_body(),
            status_code=result.status_code,
            headers=result.headers,
        )

    @staticmethod
    def _accepts_html(request: Request) -> bool:
        return "text/html" in request.headers.get("accept", "")

    def get_router(self) -> APIRouter:
        return self.router
