"""In-memory Taxonomy implementation."""

import logging

from testing_example.interfaces.errors import (
    DuplicateEntityError,
    InvalidEntityError,
    VocabularyNotFoundError,
)
from testing_example.interfaces.id_generator import IdGenerator
from testing_example.interfaces.taxonomy import (
    Taxonomy,
    Term,
    Vocabulary,
    vocabulary_permissions,
)

from .store import InMemorySiteData

logger = logging.getLogger(__name__)


class InMemoryTaxonomy(Taxonomy):
    """Vocabularies and terms kept in `InMemorySiteData`."""

    def __init__(self, data: InMemorySiteData, id_generator: IdGenerator) -> None:
        self._data = data
        self._ids = id_generator

    def create_vocabulary(self, vid: str, name: str) -> Vocabulary:
        if not vid.strip():
            raise InvalidEntityError("vocabulary", vid, "blank id")
        if vid in self._data.vocabularies:
            raise DuplicateEntityError("vocabulary", vid)

        vocabulary = Vocabulary(vid=vid, name=name, uuid=self._ids.new_id())
        self._data.vocabularies[vid] = vocabulary
        self._data.register_permissions(vocabulary_permissions(vid))
        logger.debug("Created vocabulary %s", vid)
        return vocabulary

    def get_vocabulary(self, vid: str) -> Vocabulary | None:
        return self._data.vocabularies.get(vid)

    def create_term(self, vid: str, name: str, *, weight: int = 0) -> Term:
        if vid not in self._data.vocabularies:
            raise VocabularyNotFoundError(vid)
        if not name.strip():
            raise InvalidEntityError("term", name, "blank name")

        term = Term(
            tid=next(self._data.tid_seq),
            vid=vid,
            name=name,
            uuid=self._ids.new_id(),
            weight=weight,
        )
        self._data.terms[term.tid] = term
        logger.debug("Created term %s (%s) in %s", term.tid, name, vid)
        return term

    def get_term(self, tid: int) -> Term | None:
        return self._data.terms.get(tid)

    def load_terms_by_name(self, vid: str, name: str) -> list[Term]:
        wanted = name.casefold()
        return [
            term
            for term in self._data.terms.values()
            if term.vid == vid and term.name.casefold() == wanted
        ]

    def list_terms(self, vid: str) -> list[Term]:
        if vid not in self._data.vocabularies:
            raise VocabularyNotFoundError(vid)
        terms = [term for term in self._data.terms.values() if term.vid == vid]
        return sorted(terms, key=lambda term: (term.weight, term.name))
