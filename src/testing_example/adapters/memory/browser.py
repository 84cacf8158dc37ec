"""In-memory simulated browser.

Routes requests straight to the in-memory collaborators instead of going over
HTTP. Access checks mirror the framework's node, term, user and admin routes
closely enough for functional tests: a denied request yields a 403 page, an
unknown path a 404 page, and every page is titled "<heading> | <site name>".
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from html import escape
from urllib.parse import urlsplit

from testing_example.interfaces.browser import Browser, Response
from testing_example.interfaces.content import ContentAuthoring, FieldType, Node
from testing_example.interfaces.errors import LoginError
from testing_example.interfaces.taxonomy import Taxonomy
from testing_example.interfaces.users import User, UserDirectory

from .rendering import render_page, render_teaser

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _Page:
    """Outcome of a route handler before it is wrapped in a document."""

    status_code: int
    heading: str
    content: str
    show_heading: bool = True


_FORBIDDEN = _Page(403, "Access denied", "<p>You are not authorized to access this page.</p>")
_NOT_FOUND = _Page(404, "Page not found", "<p>The requested page could not be found.</p>")


class InMemoryBrowser(Browser):  # pylint: disable=too-many-instance-attributes
    """Browser session over the in-memory site collaborators."""

    def __init__(
        self,
        users: UserDirectory,
        content: ContentAuthoring,
        taxonomy: Taxonomy,
        *,
        site_name: str = "Drupal",
        base_url: str = "http://localhost",
    ) -> None:
        self._users = users
        self._content = content
        self._taxonomy = taxonomy
        self._site_name = site_name
        self._base = urlsplit(base_url.rstrip("/"))
        self._uid: int | None = None
        self._last_response: Response | None = None
        self._routes: list[tuple[re.Pattern[str], Callable[..., _Page]]] = [
            (re.compile(r"/(node)?"), self._front_page),
            (re.compile(r"/node/(\d+)"), self._node_view),
            (re.compile(r"/node/(\d+)/edit"), self._node_edit),
            (re.compile(r"/node/add/([a-z0-9_]+)"), self._node_add),
            (re.compile(r"/taxonomy/term/(\d+)"), self._term_view),
            (re.compile(r"/user/(\d+)"), self._user_view),
            (re.compile(r"/admin"), self._admin),
        ]

    # --- Session ---

    @property
    def current_user(self) -> User:
        if self._uid is not None and (user := self._users.get_user(self._uid)):
            return user
        return self._users.anonymous()

    @property
    def last_response(self) -> Response | None:
        return self._last_response

    def log_in(self, user: User) -> None:
        stored = self._users.get_user(user.uid)
        if stored is None or stored.is_anonymous:
            raise LoginError(user.name, "unknown account")
        if not stored.active:
            raise LoginError(user.name, "the account is blocked")
        if stored.pass_raw != user.pass_raw:
            raise LoginError(user.name, "unrecognized password")
        self._uid = stored.uid
        logger.debug("Logged in as %s", stored.name)

    def log_out(self) -> None:
        if self._uid is not None:
            logger.debug("Logged out user %s", self._uid)
        self._uid = None

    # --- Navigation ---

    def navigate(self, url: str) -> Response:
        path = self._site_path(url)
        if path is None:
            logger.info("Refusing to navigate off-site to %s", url)
            page = _NOT_FOUND
            response_url = url
        else:
            page = self._dispatch(path)
            response_url = f"{self._base.scheme}://{self._base.netloc}{self._base.path}{path}"

        user = self.current_user
        html = render_page(
            page.heading,
            page.content,
            site_name=self._site_name,
            account_name=None if user.is_anonymous else user.name,
            show_heading=page.show_heading,
        )
        response = Response(
            status_code=page.status_code, url=response_url, html=html, path=path
        )
        if page.status_code == 403:  # pylint: disable=magic-value-comparison
            logger.info("Access denied to %s for %s", path, user.name or "anonymous")
        self._last_response = response
        return response

    def _site_path(self, url: str) -> str | None:
        """Return the site-relative path of `url`, or None if it is not on this site.

        Bare paths are already site-relative. Absolute URLs must match the base
        scheme and host and sit under the base path, which is stripped.
        """
        parts = urlsplit(url)
        path = parts.path
        if parts.scheme or parts.netloc:
            if (parts.scheme, parts.netloc) != (self._base.scheme, self._base.netloc):
                return None
            base_path = self._base.path
            if base_path and path != base_path and not path.startswith(f"{base_path}/"):
                return None
            path = path[len(base_path):]
        return path.rstrip("/") or "/"

    def _dispatch(self, path: str) -> _Page:
        for pattern, handler in self._routes:
            if match := pattern.fullmatch(path):
                return handler(*match.groups())
        return _NOT_FOUND

    # --- Access checks ---

    def _allowed(self, *permissions: str) -> bool:
        """True if the current user holds any of `permissions`."""
        granted = self._users.permissions_for(self.current_user)
        return any(permission in granted for permission in permissions)

    def _can_view(self, node: Node) -> bool:
        if self._allowed("bypass node access"):
            return True
        if not self._allowed("access content"):
            return False
        if node.status:
            return True
        user = self.current_user
        return (
            not user.is_anonymous
            and node.uid == user.uid
            and self._allowed("view own unpublished content")
        )

    def _can_edit(self, node: Node) -> bool:
        if self._allowed("bypass node access", f"edit any {node.type} content"):
            return True
        user = self.current_user
        return (
            not user.is_anonymous
            and node.uid == user.uid
            and self._allowed(f"edit own {node.type} content")
        )

    # --- Routes ---

    def _front_page(self, _segment: str | None = None) -> _Page:
        if not self._allowed("access content", "bypass node access"):
            return _FORBIDDEN
        teasers = [
            render_teaser(node)
            for node in self._content.list_nodes(published_only=True)
            if node.promote
        ]
        content = "".join(teasers) or "<p>No front page content has been created yet.</p>"
        return _Page(200, "Home", content)

    def _node_view(self, nid: str) -> _Page:
        if (node := self._content.get_node(int(nid))) is None:
            return _NOT_FOUND
        if not self._can_view(node):
            return _FORBIDDEN
        rendered = self._content.render_node(node.nid)
        return _Page(200, rendered.title, rendered.html, show_heading=False)

    def _node_edit(self, nid: str) -> _Page:
        if (node := self._content.get_node(int(nid))) is None:
            return _NOT_FOUND
        if not self._can_edit(node):
            return _FORBIDDEN
        content_type = self._content.get_content_type(node.type)
        type_name = content_type.name if content_type else node.type
        form = (
            f'<form id="node-{node.type}-edit-form" method="post">'
            f'<input type="text" name="title[0][value]" value="{escape(node.title)}">'
            '<input type="submit" value="Save">'
            "</form>"
        )
        return _Page(200, f"Edit {type_name} {node.title}", form)

    def _node_add(self, type_id: str) -> _Page:
        if (content_type := self._content.get_content_type(type_id)) is None:
            return _NOT_FOUND
        if not self._allowed("bypass node access", f"create {type_id} content"):
            return _FORBIDDEN
        form = (
            f'<form id="node-{type_id}-form" method="post">'
            '<input type="text" name="title[0][value]" value="">'
            '<input type="submit" value="Save">'
            "</form>"
        )
        return _Page(200, f"Create {content_type.name}", form)

    def _term_view(self, tid: str) -> _Page:
        if (term := self._taxonomy.get_term(int(tid))) is None:
            return _NOT_FOUND
        if not self._allowed("access content"):
            return _FORBIDDEN
        tagged = [
            render_teaser(node)
            for node in self._content.list_nodes(published_only=True)
            if self._references_term(node, term.tid)
        ]
        return _Page(200, term.name, "".join(tagged))

    def _references_term(self, node: Node, tid: int) -> bool:
        for name in self._content.fields_for(node.type):
            storage = self._content.get_field_storage(name)
            # Image items also carry a target_id; only term references count.
            if storage is None or storage.field_type is not FieldType.ENTITY_REFERENCE:
                continue
            if any(item.get("target_id") == tid for item in node.get(name)):
                return True
        return False

    def _user_view(self, uid: str) -> _Page:
        user = self._users.get_user(int(uid))
        if user is None or user.is_anonymous:
            return _NOT_FOUND
        if user.uid != self.current_user.uid and not self._allowed("access user profiles"):
            return _FORBIDDEN
        return _Page(200, user.name, f'<div class="profile">Member for {escape(user.name)}</div>')

    def _admin(self) -> _Page:
        if not self._allowed("access administration pages"):
            return _FORBIDDEN
        return _Page(200, "Administration", '<ul class="admin-list"><li><a href="/node">Content</a></li></ul>')
