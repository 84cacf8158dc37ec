"""In-memory UserDirectory implementation."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable

from testing_example.interfaces.errors import (
    DuplicateEntityError,
    InvalidEntityError,
    RoleNotFoundError,
    UserNotFoundError,
)
from testing_example.interfaces.id_generator import IdGenerator
from testing_example.interfaces.users import (
    ANONYMOUS_RID,
    ANONYMOUS_UID,
    AUTHENTICATED_RID,
    Role,
    User,
    UserDirectory,
)

from .store import InMemorySiteData

logger = logging.getLogger(__name__)

PASSWORD_LENGTH = 12


class InMemoryUserDirectory(UserDirectory):
    """Users and roles kept in `InMemorySiteData`.

    The built-in anonymous and authenticated roles are created on
    construction if the store does not hold them yet.
    """

    def __init__(self, data: InMemorySiteData, id_generator: IdGenerator) -> None:
        self._data = data
        self._ids = id_generator
        self._data.roles.setdefault(ANONYMOUS_RID, Role(ANONYMOUS_RID, "Anonymous user"))
        self._data.roles.setdefault(
            AUTHENTICATED_RID, Role(AUTHENTICATED_RID, "Authenticated user")
        )
        self._anonymous = User(uid=ANONYMOUS_UID, name="", uuid=self._ids.new_id())

    # --- Users ---

    def create_user(
        self, permissions: Iterable[str] = (), name: str | None = None
    ) -> User:
        granted = self._data.check_permissions(permissions)
        if name is None:
            name = self._unused_name()
        elif any(user.name == name for user in self._data.users.values()):
            raise DuplicateEntityError("user", name)

        roles: tuple[str, ...] = ()
        if granted:
            role_id = self._unused_role_id()
            self.create_role(role_id, role_id, granted)
            roles = (role_id,)

        user = User(
            uid=next(self._data.uid_seq),
            name=name,
            uuid=self._ids.new_id(),
            mail=f"{name}@example.com",
            roles=roles,
            pass_raw=self._ids.new_name(PASSWORD_LENGTH),
        )
        self._data.users[user.uid] = user
        logger.debug("Created user %s (%s) with roles %s", user.uid, name, roles)
        return user

    def block_user(self, uid: int) -> User:
        user = self._require_user(uid)
        if user.active:
            user = dataclasses.replace(user, active=False)
            self._data.users[uid] = user
            logger.debug("Blocked user %s", uid)
        return user

    def get_user(self, uid: int) -> User | None:
        if uid == ANONYMOUS_UID:
            return self._anonymous
        return self._data.users.get(uid)

    def anonymous(self) -> User:
        return self._anonymous

    # --- Roles ---

    def create_role(
        self, role_id: str, label: str, permissions: Iterable[str] = ()
    ) -> Role:
        granted = self._data.check_permissions(permissions)
        if not role_id.strip():
            raise InvalidEntityError("role", role_id, "blank id")
        if role_id in self._data.roles:
            raise DuplicateEntityError("role", role_id)

        role = Role(role_id=role_id, label=label, permissions=granted)
        self._data.roles[role_id] = role
        logger.debug("Created role %s with %d permission(s)", role_id, len(granted))
        return role

    def grant_permissions(self, role_id: str, permissions: Iterable[str]) -> Role:
        granted = self._data.check_permissions(permissions)
        role = self._require_role(role_id)
        role = dataclasses.replace(role, permissions=role.permissions | granted)
        self._data.roles[role_id] = role
        return role

    def assign_role(self, uid: int, role_id: str) -> User:
        user = self._require_user(uid)
        role = self._require_role(role_id)
        if role.is_builtin:
            raise InvalidEntityError(
                "role", role_id, "built-in roles cannot be assigned"
            )
        if role_id in user.roles:
            return user
        user = dataclasses.replace(user, roles=(*user.roles, role_id))
        self._data.users[uid] = user
        logger.debug("Assigned role %s to user %s", role_id, uid)
        return user

    def get_role(self, role_id: str) -> Role | None:
        return self._data.roles.get(role_id)

    # --- Access checks ---

    def permissions_for(self, user: User) -> frozenset[str]:
        # Re-read the stored account so stale snapshots see current roles.
        current = self.get_user(user.uid) or user
        role_ids = (current.implicit_role, *current.roles)
        permissions: set[str] = set()
        for role_id in role_ids:
            if (role := self._data.roles.get(role_id)) is not None:
                permissions |= role.permissions
        return frozenset(permissions)

    # --- Helpers ---

    def _require_user(self, uid: int) -> User:
        if (user := self._data.users.get(uid)) is None:
            raise UserNotFoundError(uid)
        return user

    def _require_role(self, role_id: str) -> Role:
        if (role := self._data.roles.get(role_id)) is None:
            raise RoleNotFoundError(role_id)
        return role

    def _unused_name(self) -> str:
        taken = {user.name for user in self._data.users.values()}
        while (name := self._ids.new_name()) in taken:
            continue
        return name

    def _unused_role_id(self) -> str:
        while (role_id := self._ids.new_name()) in self._data.roles:
            continue
        return role_id
