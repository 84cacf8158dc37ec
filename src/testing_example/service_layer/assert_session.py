"""Assertions about the browser's most recent response.

Failed expectations raise `ExpectationFailedError`, an `AssertionError`, so
pytest reports them as ordinary test failures.
"""

from __future__ import annotations

from testing_example.interfaces.browser import Browser, Element, Response, normalize_text


class ExpectationFailedError(AssertionError):
    """Raised when the current page does not meet an expectation."""


class AssertSession:
    """Checks run against `browser.last_response`."""

    def __init__(self, browser: Browser) -> None:
        self._browser = browser

    @property
    def response(self) -> Response:
        """The response under test.

        Raises:
            ExpectationFailedError: If the browser has not loaded a page yet.
        """
        if (response := self._browser.last_response) is None:
            raise ExpectationFailedError("No page has been loaded yet.")
        return response

    def status_code_equals(self, expected: int) -> None:
        """Check the HTTP status code."""
        actual = self.response.status_code
        if actual != expected:
            raise ExpectationFailedError(
                f"Current response status code is {actual}, but {expected} expected."
            )

    def title_equals(self, expected: str) -> None:
        """Check the text of `<title>`.

        Whitespace in `expected` is collapsed the way the page title is.
        """
        expected = normalize_text(expected)
        actual = self.response.page.title
        if actual != expected:
            raise ExpectationFailedError(
                f"Title {actual!r} does not match the expected {expected!r}."
            )

    def address_equals(self, path: str) -> None:
        """Check the site-relative path of the current page."""
        actual = self.response.site_path
        if actual != path:
            raise ExpectationFailedError(
                f"Current page is {actual!r}, but {path!r} expected."
            )

    def page_text_contains(self, text: str) -> None:
        """Check that the visible page text contains `text`."""
        text = normalize_text(text)
        if text not in self.response.page.text:
            raise ExpectationFailedError(
                f"The text {text!r} was not found anywhere in the text of the current page."
            )

    def page_text_not_contains(self, text: str) -> None:
        """Check that the visible page text does not contain `text`."""
        text = normalize_text(text)
        if text in self.response.page.text:
            raise ExpectationFailedError(
                f"The text {text!r} appears in the text of the current page, but it should not."
            )

    def element_exists(self, selector: str) -> Element:
        """Return the first element matching `selector`, failing if there is none."""
        if (element := self.response.page.find(selector)) is None:
            raise ExpectationFailedError(
                f"Element matching css {selector!r} not found."
            )
        return element

    def element_not_exists(self, selector: str) -> None:
        """Check that nothing matches `selector`."""
        if self.response.page.find(selector) is not None:
            raise ExpectationFailedError(
                f"An element matching css {selector!r} appears on this page, but it should not."
            )

    def element_text_contains(self, selector: str, text: str) -> None:
        """Check that the first element matching `selector` contains `text`."""
        text = normalize_text(text)
        actual = self.element_exists(selector).get_text()
        if text not in actual:
            raise ExpectationFailedError(
                f"The text {text!r} was not found in the text of the element "
                f"matching css {selector!r} ({actual!r})."
            )
