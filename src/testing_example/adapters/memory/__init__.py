"""In-memory site collaborators.

All adapters read and write one shared `InMemorySiteData`, so a node created
through `InMemoryContentAuthoring` is immediately visible to
`InMemoryBrowser`. Nothing is persisted.
"""

from .browser import InMemoryBrowser
from .content import InMemoryContentAuthoring
from .files import InMemoryFileRepository
from .store import InMemorySiteData
from .taxonomy import InMemoryTaxonomy
from .users import InMemoryUserDirectory

__all__ = [
    "InMemoryBrowser",
    "InMemoryContentAuthoring",
    "InMemoryFileRepository",
    "InMemorySiteData",
    "InMemoryTaxonomy",
    "InMemoryUserDirectory",
]
