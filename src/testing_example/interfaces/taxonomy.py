"""Interface for the taxonomy collaborator."""

from __future__ import annotations

import abc
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vocabulary:
    """A named group of terms (e.g. "tags")."""

    vid: str
    name: str
    uuid: str


@dataclass(frozen=True, slots=True)
class Term:
    """Immutable snapshot of a taxonomy term."""

    tid: int
    vid: str
    name: str
    uuid: str
    weight: int = 0

    @property
    def url(self) -> str:
        """Canonical path of the term page."""
        return f"/taxonomy/term/{self.tid}"


def vocabulary_permissions(vid: str) -> tuple[str, ...]:
    """Return the permissions a vocabulary contributes to the site."""
    return (
        f"create terms in {vid}",
        f"edit terms in {vid}",
        f"delete terms in {vid}",
    )


class Taxonomy(abc.ABC):
    """Contract for vocabularies and their terms."""

    @abc.abstractmethod
    def create_vocabulary(self, vid: str, name: str) -> Vocabulary:
        """Create a vocabulary and register its term permissions.

        Raises:
            DuplicateEntityError: If `vid` already exists.
            InvalidEntityError: If `vid` is blank.
        """

    @abc.abstractmethod
    def get_vocabulary(self, vid: str) -> Vocabulary | None:
        """Return the vocabulary `vid`, or None."""

    @abc.abstractmethod
    def create_term(self, vid: str, name: str, *, weight: int = 0) -> Term:
        """Create a term in vocabulary `vid`.

        Raises:
            VocabularyNotFoundError: If `vid` does not exist.
            InvalidEntityError: If `name` is blank.
        """

    @abc.abstractmethod
    def get_term(self, tid: int) -> Term | None:
        """Return the term with id `tid`, or None."""

    @abc.abstractmethod
    def load_terms_by_name(self, vid: str, name: str) -> list[Term]:
        """Return the terms of `vid` whose name matches `name` case-insensitively."""

    @abc.abstractmethod
    def list_terms(self, vid: str) -> list[Term]:
        """Return the terms of `vid` ordered by weight, then name.

        Raises:
            VocabularyNotFoundError: If `vid` does not exist.
        """
