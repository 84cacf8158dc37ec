"""Interface for the content authoring collaborator.

Covers content types (node bundles), field storages and field instances,
node creation and node rendering.
"""

from __future__ import annotations

import abc
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, TypeAlias

from .errors import InvalidEntityError

# pylint: disable=too-many-instance-attributes

CARDINALITY_UNLIMITED = -1
NODE_ENTITY_TYPE = "node"

FieldItems: TypeAlias = tuple[dict[str, Any], ...]


class FieldType(Enum):
    """Field types the content collaborator understands."""

    ENTITY_REFERENCE = "entity_reference"
    IMAGE = "image"
    LINK = "link"
    TEXT_WITH_SUMMARY = "text_with_summary"
    STRING = "string"


def content_type_permissions(type_id: str) -> tuple[str, ...]:
    """Return the permissions a content type contributes to the site."""
    return (
        f"create {type_id} content",
        f"edit own {type_id} content",
        f"edit any {type_id} content",
        f"delete own {type_id} content",
        f"delete any {type_id} content",
    )


@dataclass(frozen=True, slots=True)
class ContentType:
    """A node bundle such as "article"."""

    type_id: str
    name: str
    uuid: str


@dataclass(frozen=True, slots=True)
class FieldStorageDefinition:
    """Storage-level field definition, shared by every bundle using the field.

    Conventions:
      - `field_type` accepts a `FieldType` or its string value.
      - `cardinality` is >= 1, or `CARDINALITY_UNLIMITED`.
      - for entity references `settings["target_type"]` names the target
        entity type (only "taxonomy_term" is supported).
    """

    field_name: str
    field_type: FieldType
    entity_type: str = NODE_ENTITY_TYPE
    cardinality: int = 1
    settings: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.field_type, FieldType):
            try:
                object.__setattr__(self, "field_type", FieldType(self.field_type))
            except ValueError as e:
                raise InvalidEntityError(
                    "field storage",
                    self.field_name,
                    f"unsupported field type {self.field_type!r}",
                ) from e
        if not self.field_name:
            raise InvalidEntityError("field storage", self.field_name, "blank name")
        if self.entity_type != NODE_ENTITY_TYPE:
            raise InvalidEntityError(
                "field storage",
                self.field_name,
                f"entity type {self.entity_type!r} is not supported",
            )
        if self.cardinality != CARDINALITY_UNLIMITED and self.cardinality < 1:
            raise InvalidEntityError(
                "field storage",
                self.field_name,
                "cardinality must be >= 1 or CARDINALITY_UNLIMITED",
            )

    @property
    def is_unlimited(self) -> bool:
        """True when the field accepts any number of items."""
        return self.cardinality == CARDINALITY_UNLIMITED


@dataclass(frozen=True, slots=True)
class FieldDefinition:
    """A field storage attached to one bundle.

    For entity references, `settings["handler_settings"]` may hold
    `target_bundles` (a mapping of allowed vocabulary ids) and `auto_create`.
    """

    field_name: str
    bundle: str
    label: str
    entity_type: str = NODE_ENTITY_TYPE
    required: bool = False
    description: str = ""
    settings: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class Node:
    """Immutable snapshot of a node.

    `fields` maps field names to their normalised items (a tuple of dicts).
    """

    nid: int
    uuid: str
    type: str
    title: str
    uid: int = 0
    status: bool = True
    promote: bool = True
    fields: Mapping[str, FieldItems] = field(default_factory=dict)

    @property
    def url(self) -> str:
        """Canonical path of the node page."""
        return f"/node/{self.nid}"

    @property
    def edit_url(self) -> str:
        """Path of the node edit form."""
        return f"/node/{self.nid}/edit"

    def get(self, field_name: str) -> FieldItems:
        """Return the items of `field_name` (empty when unset)."""
        return self.fields.get(field_name, ())


@dataclass(frozen=True, slots=True)
class RenderedNode:
    """A node rendered to an HTML fragment, plus its plain-text title."""

    title: str
    html: str


class ContentAuthoring(abc.ABC):
    """Contract for content types, fields and nodes."""

    @abc.abstractmethod
    def create_content_type(
        self, type_id: str, name: str, *, create_body: bool = True
    ) -> ContentType:
        """Create a content type and register its permissions.

        Args:
            type_id: Machine name (e.g. "article").
            name: Human-readable name.
            create_body: Attach a single-valued `body` text field.

        Raises:
            DuplicateEntityError: If `type_id` already exists.
        """

    @abc.abstractmethod
    def get_content_type(self, type_id: str) -> ContentType | None:
        """Return the content type `type_id`, or None."""

    @abc.abstractmethod
    def create_field_storage(
        self, definition: FieldStorageDefinition
    ) -> FieldStorageDefinition:
        """Store a field storage definition.

        Raises:
            DuplicateEntityError: If a storage with the same name exists.
        """

    @abc.abstractmethod
    def get_field_storage(self, field_name: str) -> FieldStorageDefinition | None:
        """Return the field storage `field_name`, or None."""

    @abc.abstractmethod
    def create_field(self, definition: FieldDefinition) -> FieldDefinition:
        """Attach a stored field to a bundle.

        Raises:
            FieldNotFoundError: If the field storage does not exist.
            ContentTypeNotFoundError: If the bundle does not exist.
            DuplicateEntityError: If the field is already on the bundle.
        """

    @abc.abstractmethod
    def fields_for(self, bundle: str) -> dict[str, FieldDefinition]:
        """Return the fields attached to `bundle`, keyed by field name."""

    @abc.abstractmethod
    def create_node(self, values: Mapping[str, Any]) -> Node:
        """Validate `values` and create a node.

        Args:
            values: `type` and `title` are required; `uid`, `status` and
                `promote` are optional; every other key is a field name.

        Returns:
            Node: The stored snapshot with normalised field items.

        Raises:
            ContentTypeNotFoundError: If `type` is unknown.
            FieldValueError: If any value violates its field definition.
        """

    @abc.abstractmethod
    def get_node(self, nid: int) -> Node | None:
        """Return the node with id `nid`, or None."""

    @abc.abstractmethod
    def list_nodes(self, *, published_only: bool = False) -> list[Node]:
        """Return nodes ordered by id."""

    @abc.abstractmethod
    def render_node(self, nid: int) -> RenderedNode:
        """Render the node `nid` to its full view markup.

        Raises:
            NodeNotFoundError: If `nid` is unknown.
        """
