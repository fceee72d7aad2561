from pathlib import Path
from typing import Any, Final

from fastapi.responses import HTMLResponse
from jinja2 import Environment, FileSystemLoader, Template, select_autoescape

_TEMPLATE_NAME: Final[str] = "account_signup.html"
_STATIC_DIR: Final[Path] = Path(__file__).resolve().parents[2] / "static"
_TEMPLATE_PATH: Final[Path] = _STATIC_DIR / _TEMPLATE_NAME

if not _TEMPLATE_PATH.exists():
    raise FileNotFoundError(f"Sign-up template not found at {_TEMPLATE_PATH}")

_TEMPLATE_ENV: Final[Environment] = Environment(
    loader=FileSystemLoader(str(_STATIC_DIR)),
    autoescape=select_autoescape(enabled_extensions=("html", "xml")),
)
_SIGN_UP_TEMPLATE: Final[Template] = _TEMPLATE_ENV.get_template(_TEMPLATE_NAME)


def build_sign_up_page(
    *,
    action_path: str,
    login_path: str,
    error: Any = None,
    status_code: int = 200,
) -> HTMLResponse:
    """Render the sign-up form, with the last error shown above it when there is one."""
    rendered_content: str = _SIGN_UP_TEMPLATE.render(
        title="Sign Up",
        action_path=action_path,
        login_path=login_path,
        error=error,
    )
    return HTMLResponse(
        content=rendered_content, status_code=status_code, media_type="text/html"
    )
