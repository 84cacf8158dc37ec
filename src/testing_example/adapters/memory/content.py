"""In-memory ContentAuthoring implementation."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlsplit

from testing_example.interfaces.content import (
    ContentAuthoring,
    ContentType,
    FieldDefinition,
    FieldItems,
    FieldStorageDefinition,
    FieldType,
    Node,
    RenderedNode,
    content_type_permissions,
)
from testing_example.interfaces.errors import (
    ContentTypeNotFoundError,
    DuplicateEntityError,
    FieldNotFoundError,
    FieldValueError,
    InvalidEntityError,
    NodeNotFoundError,
)
from testing_example.interfaces.files import FileRepository
from testing_example.interfaces.id_generator import IdGenerator
from testing_example.interfaces.taxonomy import Taxonomy, Term

from .rendering import render_node_html
from .store import InMemorySiteData

# pylint: disable=too-many-arguments

logger = logging.getLogger(__name__)

BODY_FIELD = "body"
TERM_TARGET_TYPE = "taxonomy_term"
DEFAULT_TEXT_FORMAT = "plain_text"
BASE_KEYS = frozenset({"type", "title", "uid", "status", "promote"})

# Property a bare scalar value is assigned to, per field type.
MAIN_PROPERTY = {
    FieldType.ENTITY_REFERENCE: "target_id",
    FieldType.IMAGE: "target_id",
    FieldType.LINK: "uri",
    FieldType.TEXT_WITH_SUMMARY: "value",
    FieldType.STRING: "value",
}


def _normalize_items(field_type: FieldType, value: Any) -> list[dict[str, Any]]:
    """Normalise a field value into a list of item dicts.

    Accepts None, a scalar, a single dict, or a list/tuple of either.
    """
    if value is None:
        return []
    raw = value if isinstance(value, (list, tuple)) else [value]
    items = []
    for entry in raw:
        if isinstance(entry, Mapping):
            items.append(dict(entry))
        else:
            items.append({MAIN_PROPERTY[field_type]: entry})
    return items


def _is_id(value: Any) -> bool:
    """True for integer ids; bools are ints in Python but never ids."""
    return isinstance(value, int) and not isinstance(value, bool)


def _scalar(value: Any) -> Any:
    """Unwrap `x`, `{"value": x}` or `[{"value": x}]` forms of a base field."""
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
    if isinstance(value, Mapping):
        value = value.get("value", value.get("target_id"))
    return value


class InMemoryContentAuthoring(ContentAuthoring):
    """Content types, fields and nodes kept in `InMemorySiteData`.

    Entity references resolve against the injected `Taxonomy`; image items
    resolve against the injected `FileRepository`.
    """

    def __init__(
        self,
        data: InMemorySiteData,
        id_generator: IdGenerator,
        taxonomy: Taxonomy,
        files: FileRepository,
    ) -> None:
        self._data = data
        self._ids = id_generator
        self._taxonomy = taxonomy
        self._files = files

    # --- Content types and fields ---

    def create_content_type(
        self, type_id: str, name: str, *, create_body: bool = True
    ) -> ContentType:
        if not type_id.strip():
            raise InvalidEntityError("content type", type_id, "blank id")
        if type_id in self._data.content_types:
            raise DuplicateEntityError("content type", type_id)

        content_type = ContentType(type_id=type_id, name=name, uuid=self._ids.new_id())
        self._data.content_types[type_id] = content_type
        self._data.fields[type_id] = {}
        self._data.register_permissions(content_type_permissions(type_id))
        logger.debug("Created content type %s", type_id)

        if create_body:
            if BODY_FIELD not in self._data.field_storages:
                self.create_field_storage(
                    FieldStorageDefinition(BODY_FIELD, FieldType.TEXT_WITH_SUMMARY)
                )
            self.create_field(FieldDefinition(BODY_FIELD, type_id, "Body"))
        return content_type

    def get_content_type(self, type_id: str) -> ContentType | None:
        return self._data.content_types.get(type_id)

    def create_field_storage(
        self, definition: FieldStorageDefinition
    ) -> FieldStorageDefinition:
        if definition.field_name in self._data.field_storages:
            raise DuplicateEntityError("field storage", definition.field_name)
        if definition.field_type is FieldType.ENTITY_REFERENCE:
            target_type = definition.settings.get("target_type", TERM_TARGET_TYPE)
            if target_type != TERM_TARGET_TYPE:
                raise InvalidEntityError(
                    "field storage",
                    definition.field_name,
                    f"target type {target_type!r} is not supported",
                )
        self._data.field_storages[definition.field_name] = definition
        logger.debug(
            "Created field storage %s (%s)",
            definition.field_name,
            definition.field_type.value,
        )
        return definition

    def get_field_storage(self, field_name: str) -> FieldStorageDefinition | None:
        return self._data.field_storages.get(field_name)

    def create_field(self, definition: FieldDefinition) -> FieldDefinition:
        storage = self._data.field_storages.get(definition.field_name)
        if storage is None:
            raise FieldNotFoundError(definition.field_name)
        if definition.entity_type != storage.entity_type:
            raise InvalidEntityError(
                "field",
                definition.field_name,
                f"entity type {definition.entity_type!r} does not match its storage",
            )
        if definition.bundle not in self._data.content_types:
            raise ContentTypeNotFoundError(definition.bundle)
        bundle_fields = self._data.fields[definition.bundle]
        if definition.field_name in bundle_fields:
            raise DuplicateEntityError(
                "field", f"{definition.bundle}.{definition.field_name}"
            )
        bundle_fields[definition.field_name] = definition
        logger.debug("Attached field %s to %s", definition.field_name, definition.bundle)
        return definition

    def fields_for(self, bundle: str) -> dict[str, FieldDefinition]:
        return dict(self._data.fields.get(bundle, {}))

    # --- Nodes ---

    def create_node(self, values: Mapping[str, Any]) -> Node:
        type_id = _scalar(values.get("type"))
        if type_id is None:
            raise FieldValueError("type", "a content type is required")
        if type_id not in self._data.content_types:
            raise ContentTypeNotFoundError(type_id)

        title = _scalar(values.get("title"))
        if not isinstance(title, str) or not title.strip():
            raise FieldValueError("title", "a non-blank title is required")

        uid = _scalar(values.get("uid", 0))
        if not _is_id(uid) or (uid != 0 and uid not in self._data.users):
            raise FieldValueError("uid", f"unknown author {uid!r}")

        definitions = self._data.fields[type_id]
        if unknown := sorted(set(values) - BASE_KEYS - set(definitions)):
            raise FieldValueError(unknown[0], f"no such field on {type_id}")

        # Validate every field before auto-creating any term.
        staged: dict[str, list[dict[str, Any]]] = {}
        for name, definition in definitions.items():
            storage = self._data.field_storages[name]
            items = _normalize_items(storage.field_type, values.get(name))
            if definition.required and not items:
                raise FieldValueError(name, "a value is required")
            if not storage.is_unlimited and len(items) > storage.cardinality:
                raise FieldValueError(
                    name,
                    f"{len(items)} values given, cardinality is {storage.cardinality}",
                )
            staged[name] = [
                self._validate_item(storage, definition, item) for item in items
            ]

        fields: dict[str, FieldItems] = {}
        for name, items in staged.items():
            if items:
                definition = definitions[name]
                fields[name] = tuple(self._resolve_item(definition, i) for i in items)

        node = Node(
            nid=next(self._data.nid_seq),
            uuid=self._ids.new_id(),
            type=type_id,
            title=title,
            uid=uid,
            status=bool(_scalar(values.get("status", True))),
            promote=bool(_scalar(values.get("promote", True))),
            fields=fields,
        )
        self._data.nodes[node.nid] = node
        logger.debug("Created %s node %s (%s)", type_id, node.nid, title)
        return node

    def get_node(self, nid: int) -> Node | None:
        return self._data.nodes.get(nid)

    def list_nodes(self, *, published_only: bool = False) -> list[Node]:
        nodes = sorted(self._data.nodes.values(), key=lambda node: node.nid)
        if published_only:
            return [node for node in nodes if node.status]
        return nodes

    def render_node(self, nid: int) -> RenderedNode:
        if (node := self._data.nodes.get(nid)) is None:
            raise NodeNotFoundError(nid)
        html = render_node_html(
            node,
            self._data.fields[node.type],
            self._data.field_storages,
            self._taxonomy.get_term,
            self._files.get_file,
        )
        return RenderedNode(title=node.title, html=html)

    # --- Field item validation ---

    def _validate_item(
        self,
        storage: FieldStorageDefinition,
        definition: FieldDefinition,
        item: dict[str, Any],
    ) -> dict[str, Any]:
        name = storage.field_name
        match storage.field_type:
            case FieldType.ENTITY_REFERENCE:
                self._validate_term_reference(definition, item)
            case FieldType.IMAGE:
                target_id = item.get("target_id")
                if not _is_id(target_id) or self._files.get_file(target_id) is None:
                    raise FieldValueError(name, f"file {target_id!r} does not exist")
                if not isinstance(item.get("alt", ""), str):
                    raise FieldValueError(name, "alt text must be a string")
            case FieldType.LINK:
                uri = item.get("uri")
                if not isinstance(uri, str) or not urlsplit(uri).scheme:
                    raise FieldValueError(name, f"link URI {uri!r} must have a scheme")
            case FieldType.TEXT_WITH_SUMMARY:
                if not isinstance(item.get("value"), str):
                    raise FieldValueError(name, "text value must be a string")
                item.setdefault("format", DEFAULT_TEXT_FORMAT)
            case FieldType.STRING:
                if not isinstance(item.get("value"), str):
                    raise FieldValueError(name, "value must be a string")
        return item

    def _validate_term_reference(
        self, definition: FieldDefinition, item: dict[str, Any]
    ) -> None:
        name = definition.field_name
        handler = definition.settings.get("handler_settings", {})
        target_bundles = handler.get("target_bundles") or {}

        if "target_id" in item:
            target_id = item["target_id"]
            term = self._taxonomy.get_term(target_id) if _is_id(target_id) else None
            if term is None:
                raise FieldValueError(name, f"term {target_id!r} does not exist")
            if target_bundles and term.vid not in target_bundles:
                raise FieldValueError(
                    name, f"term {target_id} is not in {sorted(target_bundles)}"
                )
            return

        if not handler.get("auto_create"):
            raise FieldValueError(name, "a target_id is required")
        if not isinstance(item.get("name"), str) or not item["name"].strip():
            raise FieldValueError(name, "auto-created terms need a name")
        bundle = self._auto_create_bundle(definition)
        if bundle is None:
            raise FieldValueError(name, "no vocabulary to auto-create terms in")
        if self._taxonomy.get_vocabulary(bundle) is None:
            raise FieldValueError(name, f"vocabulary {bundle!r} does not exist")

    def _auto_create_bundle(self, definition: FieldDefinition) -> str | None:
        handler = definition.settings.get("handler_settings", {})
        if bundle := handler.get("auto_create_bundle"):
            return bundle
        return next(iter(handler.get("target_bundles") or {}), None)

    def _resolve_item(
        self, definition: FieldDefinition, item: dict[str, Any]
    ) -> dict[str, Any]:
        """Turn an auto-create `{"name": ...}` reference into a `target_id`."""
        if "target_id" in item or "name" not in item:
            return item
        vid = self._auto_create_bundle(definition)
        assert vid is not None  # checked during validation
        term = self._existing_or_new_term(vid, item.pop("name"))
        item["target_id"] = term.tid
        return item

    def _existing_or_new_term(self, vid: str, name: str) -> Term:
        if existing := self._taxonomy.load_terms_by_name(vid, name):
            return existing[0]
        return self._taxonomy.create_term(vid, name)
