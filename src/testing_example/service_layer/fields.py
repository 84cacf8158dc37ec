"""Helpers that create a field storage and attach it to a bundle in one call."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from testing_example.interfaces.content import (
    ContentAuthoring,
    FieldDefinition,
    FieldStorageDefinition,
    FieldType,
)

# pylint: disable=too-many-arguments


def _attach(
    content: ContentAuthoring,
    storage: FieldStorageDefinition,
    bundle: str,
    label: str,
    *,
    required: bool = False,
    settings: dict[str, Any] | None = None,
) -> FieldDefinition:
    """Create `storage` if it is new, then attach it to `bundle`."""
    if content.get_field_storage(storage.field_name) is None:
        content.create_field_storage(storage)
    return content.create_field(
        FieldDefinition(
            field_name=storage.field_name,
            bundle=bundle,
            label=label,
            required=required,
            settings=settings or {},
        )
    )


def create_entity_reference_field(
    content: ContentAuthoring,
    bundle: str,
    field_name: str,
    label: str,
    *,
    target_bundles: Iterable[str] = (),
    auto_create: bool = False,
    cardinality: int = 1,
) -> FieldDefinition:
    """Add a taxonomy term reference field to `bundle`.

    Args:
        content: The content collaborator.
        bundle: Content type the field is attached to.
        field_name: Machine name, e.g. "field_tags".
        label: Human-readable label.
        target_bundles: Vocabularies terms may come from (any when empty).
        auto_create: Let `{"name": ...}` items create missing terms.
        cardinality: Maximum number of items, or `CARDINALITY_UNLIMITED`.

    Returns:
        FieldDefinition: The attached field.
    """
    storage = FieldStorageDefinition(
        field_name=field_name,
        field_type=FieldType.ENTITY_REFERENCE,
        cardinality=cardinality,
        settings={"target_type": "taxonomy_term"},
    )
    handler_settings: dict[str, Any] = {
        "target_bundles": {vid: vid for vid in target_bundles},
        "auto_create": auto_create,
    }
    return _attach(
        content,
        storage,
        bundle,
        label,
        settings={"handler": "default", "handler_settings": handler_settings},
    )


def create_image_field(
    content: ContentAuthoring,
    bundle: str,
    field_name: str,
    *,
    label: str | None = None,
    cardinality: int = 1,
) -> FieldDefinition:
    """Add an image field to `bundle`, labelled after its name by default."""
    storage = FieldStorageDefinition(
        field_name=field_name,
        field_type=FieldType.IMAGE,
        cardinality=cardinality,
        settings={"uri_scheme": "public"},
    )
    return _attach(content, storage, bundle, label or field_name)


def create_link_field(
    content: ContentAuthoring,
    bundle: str,
    field_name: str,
    label: str,
    *,
    required: bool = False,
    cardinality: int = 1,
) -> FieldDefinition:
    """Add a link field to `bundle`."""
    storage = FieldStorageDefinition(
        field_name=field_name,
        field_type=FieldType.LINK,
        cardinality=cardinality,
    )
    return _attach(content, storage, bundle, label, required=required)
