"""In-memory shared data store for the site adapters."""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from testing_example.interfaces.content import (
    ContentType,
    FieldDefinition,
    FieldStorageDefinition,
    Node,
)
from testing_example.interfaces.errors import UnknownPermissionError
from testing_example.interfaces.files import File
from testing_example.interfaces.taxonomy import Term, Vocabulary
from testing_example.interfaces.users import Role, User

# pylint: disable=too-many-instance-attributes


def _serial() -> Iterator[int]:
    return itertools.count(1)


@dataclass(slots=True)
class InMemorySiteData:
    """Shared in-memory backing store for the in-memory site adapters.

    Entity ids are allocated from per-type counters starting at 1. The
    anonymous user (uid 0) is not stored here; the user directory synthesizes
    it.
    """

    files: dict[int, File] = field(default_factory=dict)
    vocabularies: dict[str, Vocabulary] = field(default_factory=dict)
    terms: dict[int, Term] = field(default_factory=dict)
    roles: dict[str, Role] = field(default_factory=dict)
    users: dict[int, User] = field(default_factory=dict)
    content_types: dict[str, ContentType] = field(default_factory=dict)
    field_storages: dict[str, FieldStorageDefinition] = field(default_factory=dict)
    fields: dict[str, dict[str, FieldDefinition]] = field(default_factory=dict)
    nodes: dict[int, Node] = field(default_factory=dict)
    permissions: set[str] = field(default_factory=set)
    fid_seq: Iterator[int] = field(default_factory=_serial)
    tid_seq: Iterator[int] = field(default_factory=_serial)
    uid_seq: Iterator[int] = field(default_factory=_serial)
    nid_seq: Iterator[int] = field(default_factory=_serial)

    def register_permissions(self, permissions: Iterable[str]) -> None:
        """Add permission names to the site's registry."""
        self.permissions.update(permissions)

    def check_permissions(self, permissions: Iterable[str]) -> frozenset[str]:
        """Return `permissions` as a frozenset if every name is registered.

        Raises:
            UnknownPermissionError: Listing the unregistered names.
        """
        requested = frozenset(permissions)
        if unknown := requested - self.permissions:
            raise UnknownPermissionError(tuple(sorted(unknown)))
        return requested
