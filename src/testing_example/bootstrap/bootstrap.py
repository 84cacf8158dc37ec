"""Bootstrap an in-memory site with all of its collaborators wired together."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from testing_example import config
from testing_example.adapters.id_generators import UUIDv4Generator
from testing_example.adapters.memory import (
    InMemoryBrowser,
    InMemoryContentAuthoring,
    InMemoryFileRepository,
    InMemorySiteData,
    InMemoryTaxonomy,
    InMemoryUserDirectory,
)
from testing_example.interfaces.browser import Browser
from testing_example.interfaces.content import ContentAuthoring
from testing_example.interfaces.files import FileRepository
from testing_example.interfaces.id_generator import IdGenerator
from testing_example.interfaces.taxonomy import Taxonomy
from testing_example.interfaces.users import (
    ANONYMOUS_RID,
    AUTHENTICATED_RID,
    BASE_PERMISSIONS,
    UserDirectory,
)

logger = logging.getLogger(__name__)

# Granted to both built-in roles on install, as the node module does.
DEFAULT_VISITOR_PERMISSIONS = ("access content",)


@dataclass(frozen=True)
class SiteContainer:
    """The collaborators of one site, sharing a single backing store."""

    settings: config.SiteSettings
    ids: IdGenerator
    files: FileRepository
    taxonomy: Taxonomy
    users: UserDirectory
    content: ContentAuthoring
    browser: Browser


def build_site_data() -> InMemorySiteData:
    """Build an empty store holding the base permission registry."""
    data = InMemorySiteData()
    data.register_permissions(BASE_PERMISSIONS)
    return data


def bootstrap(
    settings: config.SiteSettings | None = None,
    id_generator: IdGenerator | None = None,
) -> SiteContainer:
    """Build a fresh in-memory site.

    Args:
        settings: Site settings; read from the environment when None.
        id_generator: Source of entity uuids and random names; UUIDv4 when None.

    Returns:
        SiteContainer: Collaborators over a new, isolated store.
    """
    settings = settings or config.load_settings()
    ids = id_generator or UUIDv4Generator()
    data = build_site_data()

    files = InMemoryFileRepository(data, ids)
    taxonomy = InMemoryTaxonomy(data, ids)
    users = InMemoryUserDirectory(data, ids)
    content = InMemoryContentAuthoring(data, ids, taxonomy, files)
    browser = InMemoryBrowser(
        users,
        content,
        taxonomy,
        site_name=settings.site_name,
        base_url=settings.base_url,
    )

    for role_id in (ANONYMOUS_RID, AUTHENTICATED_RID):
        users.grant_permissions(role_id, DEFAULT_VISITOR_PERMISSIONS)

    logger.debug("Bootstrapped site %r at %s", settings.site_name, settings.base_url)
    return SiteContainer(
        settings=settings,
        ids=ids,
        files=files,
        taxonomy=taxonomy,
        users=users,
        content=content,
        browser=browser,
    )
