"""Default marks and collaborator fixtures for tests under `tests/contract/`."""

from pathlib import Path

import pytest

from testing_example.adapters.id_generators import SimpleIdGenerator
from testing_example.bootstrap import SiteContainer, bootstrap
from testing_example.config import SiteSettings
from testing_example.interfaces.content import ContentAuthoring
from testing_example.interfaces.files import FileRepository
from testing_example.interfaces.taxonomy import Taxonomy
from testing_example.interfaces.users import UserDirectory

# pylint: disable=unused-argument,redefined-outer-name

CONTRACT_ROOT = Path(__file__).parent.resolve()
MARKER_NAME = "contract"


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add default `contract` marks to items in `tests/contract/`."""
    for item in items:
        path = item.path.resolve()  # pytest>=8: pathlib.Path
        if CONTRACT_ROOT in path.parents:
            if not any(marker.name == MARKER_NAME for marker in item.iter_markers()):
                item.add_marker(pytest.mark.contract)


@pytest.fixture(params=["memory"])
def collaborators(request: pytest.FixtureRequest) -> SiteContainer:
    """Return a fresh set of collaborators for the requested backend.

    Current params:
      - `"memory"` → the in-memory site built by `bootstrap()`

    Extend by adding new identifiers to `params` and branching below.
    """
    match request.param:
        case "memory":
            return bootstrap(SiteSettings(), SimpleIdGenerator())
        case _:
            raise ValueError(f"unknown collaborator backend: {request.param}")


@pytest.fixture
def files(collaborators: SiteContainer) -> FileRepository:
    """The managed file collaborator under test."""
    return collaborators.files


@pytest.fixture
def taxonomy(collaborators: SiteContainer) -> Taxonomy:
    """The taxonomy collaborator under test."""
    return collaborators.taxonomy


@pytest.fixture
def users(collaborators: SiteContainer) -> UserDirectory:
    """The user directory under test."""
    return collaborators.users


@pytest.fixture
def content(collaborators: SiteContainer) -> ContentAuthoring:
    """The content authoring collaborator under test."""
    return collaborators.content
