"""Configuration utilities for testing-example.

This module centralizes the environment variables and defaults used to wire
the in-memory site.
"""

import os
from dataclasses import dataclass
from urllib.parse import urlsplit

SITE_NAME_ENV = "TESTING_EXAMPLE_SITE_NAME"  # pragma: no mutate
BASE_URL_ENV = "TESTING_EXAMPLE_BASE_URL"  # pragma: no mutate

DEFAULT_SITE_NAME = "Drupal"
DEFAULT_BASE_URL = "http://localhost"


class InvalidBaseUrlError(Exception):
    """Raised when the configured base URL is not an http(s) URL with a host."""

    def __init__(self, url: str) -> None:
        super().__init__(
            f"{BASE_URL_ENV} must be an http(s) URL with a host, got {url!r}"
        )
        self.url = url


@dataclass(frozen=True, slots=True)
class SiteSettings:
    """Settings of the simulated site.

    Attributes:
        site_name: Shown in every page title as "<heading> | <site_name>".
        base_url: Scheme and host the simulated browser answers for.
    """

    site_name: str = DEFAULT_SITE_NAME
    base_url: str = DEFAULT_BASE_URL

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_url", validate_base_url(self.base_url))


def validate_base_url(url: str) -> str:
    """Return `url` without a trailing slash if it is an http(s) URL with a host.

    Raises:
        InvalidBaseUrlError: Otherwise.
    """
    parts = urlsplit(url)
    if parts.scheme not in {"http", "https"} or not parts.netloc:
        raise InvalidBaseUrlError(url)
    return url.rstrip("/")


def get_site_name() -> str:
    """Get the site name from `TESTING_EXAMPLE_SITE_NAME` (default "Drupal")."""
    return os.environ.get(SITE_NAME_ENV) or DEFAULT_SITE_NAME


def get_base_url() -> str:
    """Get the base URL from `TESTING_EXAMPLE_BASE_URL`.

    Returns:
        The validated URL, or "http://localhost" when unset.

    Raises:
        InvalidBaseUrlError: If the variable is set to an unusable URL.
    """
    return validate_base_url(os.environ.get(BASE_URL_ENV) or DEFAULT_BASE_URL)


def load_settings() -> SiteSettings:
    """Build `SiteSettings` from the environment."""
    return SiteSettings(site_name=get_site_name(), base_url=get_base_url())
