"""Fixtures for id_generator contract tests."""

from collections.abc import Iterable

import pytest

from testing_example.adapters.id_generators import (
    SimpleIdGenerator,
    ULIDGenerator,
    UUIDv4Generator,
)
from testing_example.interfaces.id_generator import IdGenerator


def _build(kind: str) -> IdGenerator:
    match kind:
        case "ulid":
            return ULIDGenerator()
        case "uuid4":
            return UUIDv4Generator()
        case "simple":
            return SimpleIdGenerator()
        case _:
            raise ValueError(f"unknown id generator type: {kind}")


@pytest.fixture(params=["ulid", "uuid4", "simple"])
def id_generator(request: pytest.FixtureRequest) -> Iterable[IdGenerator]:
    """Yield a fresh IdGenerator for each backend (ulid, uuid4, simple)."""
    yield _build(request.param)


@pytest.fixture(params=["ulid", "simple"])
def monotonic_id_generator(request: pytest.FixtureRequest) -> Iterable[IdGenerator]:
    """Yield generators whose ids sort in generation order."""
    yield _build(request.param)
