"""HTML rendering for the in-memory site.

Node markup follows the framework's default theme closely enough for the
selectors tests rely on: the node title sits in
`h1 span.field--name-title`, and every field is wrapped in a
`div.field--name-<field-name>` element.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from html import escape
from typing import Any

from testing_example.interfaces.content import (
    FieldDefinition,
    FieldStorageDefinition,
    FieldType,
    Node,
)
from testing_example.interfaces.files import File
from testing_example.interfaces.taxonomy import Term

TermLookup = Callable[[int], Term | None]
FileLookup = Callable[[int], File | None]


def css_name(name: str) -> str:
    """Turn a machine name into a CSS class fragment ("field_tags" -> "field-tags")."""
    return name.replace("_", "-").lower()


def _text_html(item: Mapping[str, Any]) -> str:
    paragraphs = [p for p in str(item.get("value", "")).split("\n\n") if p.strip()]
    return "".join(
        f"<p>{escape(p.strip()).replace(chr(10), '<br>')}</p>" for p in paragraphs
    )


def _item_html(
    storage: FieldStorageDefinition,
    item: Mapping[str, Any],
    terms: TermLookup,
    files: FileLookup,
) -> str:
    match storage.field_type:
        case FieldType.ENTITY_REFERENCE:
            if (term := terms(item["target_id"])) is None:
                return ""
            return f'<a href="{escape(term.url)}" hreflang="en">{escape(term.name)}</a>'
        case FieldType.IMAGE:
            if (file := files(item["target_id"])) is None:
                return ""
            alt = escape(str(item.get("alt", "")))
            return f'<img src="{escape(file.url)}" alt="{alt}" loading="lazy">'
        case FieldType.LINK:
            uri = str(item["uri"])
            text = item.get("title") or uri
            return f'<a href="{escape(uri)}">{escape(str(text))}</a>'
        case FieldType.TEXT_WITH_SUMMARY:
            return _text_html(item)
        case FieldType.STRING:
            return escape(str(item.get("value", "")))
    raise ValueError(f"no renderer for {storage.field_type}")  # pragma: no cover


def render_field(
    definition: FieldDefinition,
    storage: FieldStorageDefinition,
    items: Iterable[Mapping[str, Any]],
    terms: TermLookup,
    files: FileLookup,
) -> str:
    """Render one field of a node, label included."""
    rendered = [_item_html(storage, item, terms, files) for item in items]
    inner = "".join(f'<div class="field__item">{html}</div>' for html in rendered if html)
    classes = (
        f"field field--name-{css_name(definition.field_name)} "
        f"field--type-{css_name(storage.field_type.value)}"
    )
    return (
        f'<div class="{classes}">'
        f'<div class="field__label">{escape(definition.label)}</div>'
        f'<div class="field__items">{inner}</div>'
        "</div>"
    )


def render_node_html(
    node: Node,
    definitions: Mapping[str, FieldDefinition],
    storages: Mapping[str, FieldStorageDefinition],
    terms: TermLookup,
    files: FileLookup,
) -> str:
    """Render the full view of `node` as an `<article>` fragment."""
    parts = [
        f'<article class="node node--type-{css_name(node.type)}'
        f'{"" if node.status else " node--unpublished"}">',
        f'<h1><span class="field field--name-title">{escape(node.title)}</span></h1>',
    ]
    for name, definition in definitions.items():
        if items := node.get(name):
            parts.append(render_field(definition, storages[name], items, terms, files))
    parts.append("</article>")
    return "".join(parts)


def render_teaser(node: Node) -> str:
    """Render a one-line teaser linking to `node`."""
    return (
        f'<article class="node node--view-mode-teaser">'
        f'<h2><a href="{escape(node.url)}">{escape(node.title)}</a></h2>'
        "</article>"
    )


def render_page(
    heading: str,
    content: str,
    *,
    site_name: str,
    account_name: str | None = None,
    show_heading: bool = True,
) -> str:
    """Wrap `content` in a full HTML document titled "<heading> | <site_name>".

    Args:
        heading: The page heading (plain text; escaped here).
        content: Pre-rendered HTML for the main region.
        site_name: Site name used in the title and header.
        account_name: Logged-in account name, None for anonymous visitors.
        show_heading: Emit `<h1 class="page-title">`; node pages carry their
            own heading and pass False.
    """
    account = (
        f'<span class="account">{escape(account_name)}</span> <a href="/user/logout">Log out</a>'
        if account_name
        else '<a href="/user/login">Log in</a>'
    )
    title_html = f'<h1 class="page-title">{escape(heading)}</h1>' if show_heading else ""
    return (
        "<!DOCTYPE html>"
        '<html lang="en">'
        f"<head><title>{escape(heading)} | {escape(site_name)}</title></head>"
        "<body>"
        f'<header><a href="/" rel="home">{escape(site_name)}</a> {account}</header>'
        f'<main role="main">{title_html}{content}</main>'
        "</body>"
        "</html>"
    )
