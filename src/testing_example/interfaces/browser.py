"""Interface for the simulated browser collaborator.

The browser keeps a session (the logged-in user) and returns `Response`
objects whose HTML can be queried with CSS selectors through `Page` and
`Element`, thin wrappers over BeautifulSoup.
"""

from __future__ import annotations

import abc
import re
from dataclasses import dataclass
from functools import cached_property
from urllib.parse import urlsplit

from bs4 import BeautifulSoup
from bs4.element import Tag

from .users import User

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Collapse runs of whitespace and trim, like a browser's visible text."""
    return _WHITESPACE_RE.sub(" ", text).strip()


class Element:
    """A single HTML element found on a page."""

    def __init__(self, tag: Tag) -> None:
        self._tag = tag

    @property
    def tag_name(self) -> str:
        """Lowercase tag name (e.g. "span")."""
        return self._tag.name

    def get_text(self) -> str:
        """Visible text of the element with whitespace normalised."""
        return normalize_text(self._tag.get_text(" "))

    def get_attribute(self, name: str) -> str | None:
        """Return the attribute value, or None when absent.

        Multi-valued attributes such as `class` are joined with spaces.
        """
        value = self._tag.get(name)
        if isinstance(value, list):
            return " ".join(value)
        return value

    def has_class(self, name: str) -> bool:
        """True if `name` is one of the element's classes."""
        return name in (self._tag.get("class") or [])

    def find(self, selector: str) -> Element | None:
        """Return the first descendant matching the CSS `selector`, or None."""
        tag = self._tag.select_one(selector)
        return Element(tag) if tag is not None else None

    def find_all(self, selector: str) -> list[Element]:
        """Return every descendant matching the CSS `selector`."""
        return [Element(tag) for tag in self._tag.select(selector)]

    def __repr__(self) -> str:
        return f"Element(<{self.tag_name}>)"


class Page:
    """A parsed HTML document."""

    def __init__(self, html: str) -> None:
        self._soup = BeautifulSoup(html, "html.parser")

    @property
    def title(self) -> str:
        """Content of `<title>`, or an empty string when missing."""
        if self._soup.title is None:
            return ""
        return normalize_text(self._soup.title.get_text())

    @property
    def text(self) -> str:
        """Visible text of `<body>` (whole document if there is no body)."""
        root = self._soup.body or self._soup
        return normalize_text(root.get_text(" "))

    def find(self, selector: str) -> Element | None:
        """Return the first element matching the CSS `selector`, or None."""
        tag = self._soup.select_one(selector)
        return Element(tag) if tag is not None else None

    def find_all(self, selector: str) -> list[Element]:
        """Return every element matching the CSS `selector`."""
        return [Element(tag) for tag in self._soup.select(selector)]


@dataclass(frozen=True)
class Response:
    """Result of navigating to a URL.

    `url` is absolute. `path` is the site-relative path that was routed, which
    differs from the URL path when the site lives under a base path. It
    defaults to the URL path.
    """

    status_code: int
    url: str
    html: str
    path: str | None = None

    @property
    def site_path(self) -> str:
        """The routed path ("/node/1"), without any base path."""
        if self.path is not None:
            return self.path
        return urlsplit(self.url).path or "/"

    @cached_property
    def page(self) -> Page:
        """The parsed document (parsed once, on first access)."""
        return Page(self.html)


class Browser(abc.ABC):
    """Contract for a browser session against the site."""

    @property
    @abc.abstractmethod
    def current_user(self) -> User:
        """The logged-in user, or the anonymous user."""

    @property
    @abc.abstractmethod
    def last_response(self) -> Response | None:
        """The response of the most recent navigation, if any."""

    @abc.abstractmethod
    def log_in(self, user: User) -> None:
        """Start a session as `user`, replacing any current session.

        Raises:
            LoginError: If the account is blocked, unknown, or its password
                does not match.
        """

    @abc.abstractmethod
    def log_out(self) -> None:
        """End the current session. A no-op when already anonymous."""

    @abc.abstractmethod
    def navigate(self, url: str) -> Response:
        """Request `url` (a path or an absolute URL) and return the response."""
