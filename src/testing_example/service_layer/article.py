"""The article site scenario.

Sets up what a typical content site needs before articles can be authored:
an administrator, a plain authenticated user, the "article" content type
with tags, image and link fields, and a "content_editor" role for the plain
user. `create_article` then authors a fully populated article.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from testing_example.bootstrap import SiteContainer
from testing_example.interfaces.content import CARDINALITY_UNLIMITED, ContentType, Node
from testing_example.interfaces.taxonomy import Vocabulary
from testing_example.interfaces.users import Role, User

from .fields import create_entity_reference_field, create_image_field, create_link_field

logger = logging.getLogger(__name__)

ARTICLE = "article"
TAGS = "tags"
CONTENT_EDITOR = "content_editor"

ADMIN_PERMISSIONS = (
    "access administration pages",
    "view the administration theme",
    "administer permissions",
    "administer nodes",
    "administer content types",
)
CONTENT_EDITOR_PERMISSIONS = (
    f"create {ARTICLE} content",
    f"edit any {ARTICLE} content",
    f"delete any {ARTICLE} content",
    "access content",
)


@dataclass(frozen=True)
class ArticleFixture:
    """Entities created by `install_article_site`.

    `auth_user` is the snapshot taken after the content editor role was
    assigned.
    """

    admin_user: User
    auth_user: User
    content_type: ContentType
    vocabulary: Vocabulary
    editor_role: Role


def install_article_site(site: SiteContainer) -> ArticleFixture:
    """Create the users, content type, vocabulary, fields and role of the scenario."""
    admin_user = site.users.create_user(ADMIN_PERMISSIONS)
    auth_user = site.users.create_user([], name="authuser")

    content_type = site.content.create_content_type(ARTICLE, "Article")
    vocabulary = site.taxonomy.create_vocabulary(TAGS, "Tags")

    create_entity_reference_field(
        site.content,
        ARTICLE,
        "field_tags",
        "Tags",
        target_bundles=[TAGS],
        auto_create=True,
        cardinality=CARDINALITY_UNLIMITED,
    )
    create_image_field(site.content, ARTICLE, "field_image", label="Image")
    create_link_field(site.content, ARTICLE, "field_link", "Link")

    editor_role = site.users.create_role(
        CONTENT_EDITOR, "Content Editor", CONTENT_EDITOR_PERMISSIONS
    )
    auth_user = site.users.assign_role(auth_user.uid, editor_role.role_id)

    logger.info("Installed the %s scenario on %r", ARTICLE, site.settings.site_name)
    return ArticleFixture(
        admin_user=admin_user,
        auth_user=auth_user,
        content_type=content_type,
        vocabulary=vocabulary,
        editor_role=editor_role,
    )


def create_article(  # pylint: disable=too-many-arguments
    site: SiteContainer,
    fixture: ArticleFixture,
    title: str,
    *,
    body: str = "Body of test node",
    tag_name: str = "Tag1 Random",
    link_title: str = "Drupal",
    link_uri: str = "https://drupal.org",
) -> Node:
    """Author an article owned by the admin user with every field populated.

    A tag term and a permanent image file with a random name are created
    along the way.
    """
    term = site.taxonomy.create_term(fixture.vocabulary.vid, tag_name)
    image = site.files.create_file(f"vfs://{site.ids.new_name()}.png")
    image = site.files.set_permanent(image.fid)

    node = site.content.create_node(
        {
            "type": fixture.content_type.type_id,
            "uid": {"target_id": fixture.admin_user.uid},
            "title": title,
            "body": [{"format": "basic_html", "value": body}],
            "field_tags": [{"target_id": term.tid}],
            "field_image": {"target_id": image.fid, "alt": "alt text"},
            "field_link": {"title": link_title, "uri": link_uri},
        }
    )
    logger.info("Created article %s at %s", node.nid, node.url)
    return node
