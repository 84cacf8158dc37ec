"""Interface for the user and role collaborator."""

from __future__ import annotations

import abc
from collections.abc import Iterable
from dataclasses import dataclass

ANONYMOUS_RID = "anonymous"
AUTHENTICATED_RID = "authenticated"
BUILTIN_ROLES = (ANONYMOUS_RID, AUTHENTICATED_RID)
ANONYMOUS_UID = 0

# Permissions every site knows about, before content types and vocabularies
# add their own.
BASE_PERMISSIONS = (
    "access content",
    "access administration pages",
    "view the administration theme",
    "administer permissions",
    "administer nodes",
    "administer content types",
    "bypass node access",
    "administer taxonomy",
    "access user profiles",
    "view own unpublished content",
)


@dataclass(frozen=True, slots=True)
class Role:
    """Immutable snapshot of a role and the permissions it grants."""

    role_id: str
    label: str
    permissions: frozenset[str] = frozenset()

    @property
    def is_builtin(self) -> bool:
        """True for the implicit anonymous/authenticated roles."""
        return self.role_id in BUILTIN_ROLES


@dataclass(frozen=True, slots=True)
class User:
    """Immutable snapshot of a user account.

    `roles` lists the explicitly assigned roles only. The implicit built-in
    role (anonymous for uid 0, authenticated otherwise) is not stored.
    `pass_raw` is the plain password kept so tests can log the user in.
    """

    uid: int
    name: str
    uuid: str
    mail: str = ""
    roles: tuple[str, ...] = ()
    active: bool = True
    pass_raw: str = ""

    @property
    def is_anonymous(self) -> bool:
        """True for the anonymous user (uid 0)."""
        return self.uid == ANONYMOUS_UID

    @property
    def implicit_role(self) -> str:
        """The built-in role this account carries without assignment."""
        return ANONYMOUS_RID if self.is_anonymous else AUTHENTICATED_RID

    @property
    def url(self) -> str:
        """Canonical path of the user page."""
        return f"/user/{self.uid}"


class UserDirectory(abc.ABC):
    """Contract for user accounts, roles and permission checks."""

    @abc.abstractmethod
    def create_user(
        self, permissions: Iterable[str] = (), name: str | None = None
    ) -> User:
        """Create an active user.

        When `permissions` is non-empty, a dedicated role holding exactly those
        permissions is created and assigned to the new user.

        Args:
            permissions: Permission names to grant through a dedicated role.
            name: Account name; a random lowercase name when None.

        Returns:
            User: The stored snapshot, including its raw password.

        Raises:
            UnknownPermissionError: If any permission is not registered.
            DuplicateEntityError: If `name` is already taken.
        """

    @abc.abstractmethod
    def create_role(
        self, role_id: str, label: str, permissions: Iterable[str] = ()
    ) -> Role:
        """Create a role.

        Raises:
            DuplicateEntityError: If `role_id` already exists.
            UnknownPermissionError: If any permission is not registered.
        """

    @abc.abstractmethod
    def grant_permissions(self, role_id: str, permissions: Iterable[str]) -> Role:
        """Add permissions to an existing role (built-in roles included).

        Raises:
            RoleNotFoundError: If `role_id` does not exist.
            UnknownPermissionError: If any permission is not registered.
        """

    @abc.abstractmethod
    def assign_role(self, uid: int, role_id: str) -> User:
        """Assign a role to a user. Idempotent.

        Raises:
            UserNotFoundError: If `uid` does not exist.
            RoleNotFoundError: If `role_id` does not exist.
            InvalidEntityError: If `role_id` is a built-in role.
        """

    @abc.abstractmethod
    def block_user(self, uid: int) -> User:
        """Deactivate an account so it can no longer log in.

        Raises:
            UserNotFoundError: If `uid` does not exist.
        """

    @abc.abstractmethod
    def get_user(self, uid: int) -> User | None:
        """Return the user with id `uid`, or None."""

    @abc.abstractmethod
    def get_role(self, role_id: str) -> Role | None:
        """Return the role `role_id`, or None."""

    @abc.abstractmethod
    def anonymous(self) -> User:
        """Return the anonymous user."""

    @abc.abstractmethod
    def permissions_for(self, user: User) -> frozenset[str]:
        """Return every permission `user` holds, implicit role included."""

    def has_permission(self, user: User, permission: str) -> bool:
        """Return True if `user` holds `permission`."""
        return permission in self.permissions_for(user)
