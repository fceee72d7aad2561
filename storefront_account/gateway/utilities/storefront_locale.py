import re
from typing import Final, Optional

from pydantic import BaseModel

_LOCALE_PATTERN: Final[re.Pattern[str]] = re.compile(r"^([a-z]{2})-([a-z]{2})$", re.I)


class StorefrontLocale(BaseModel):
    """Language and country sent to the Storefront API through @inContext."""

    language: str = "EN"
    country: str = "US"
    path_prefix: str = ""
    """ Leading path segment the request came in with, e.g. ``/fr-ca``, or empty."""

    def localize_path(self, path: str) -> str:
        """Prefix an absolute path with the request's locale segment."""
        return f"{self.path_prefix}{path}"

    def as_variables(self) -> dict[str, str]:
        return {"country": self.country, "language": self.language}


def get_locale_from_segment(segment: Optional[str]) -> Optional[StorefrontLocale]:
    """
    Resolve the optional locale path segment.

    Returns the default locale when no segment is given and ``None`` when the
    segment is not a ``language-country`` pair, in which case the route does not exist.
    """
    if not segment:
        return StorefrontLocale()
    match = _LOCALE_PATTERN.match(segment)
    if match is None:
        return None
    return StorefrontLocale(
        language=match.group(1).upper(),
        country=match.group(2).upper(),
        path_prefix=f"/{segment.lower()}",
    )
