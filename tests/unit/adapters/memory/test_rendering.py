"""Unit tests for the in-memory HTML renderers."""

from testing_example.adapters.memory.rendering import (
    css_name,
    render_field,
    render_page,
    render_teaser,
)
from testing_example.interfaces.content import (
    FieldDefinition,
    FieldStorageDefinition,
    FieldType,
    Node,
)
from testing_example.interfaces.files import File, FileStatus
from testing_example.interfaces.taxonomy import Term

# pylint: disable=magic-value-comparison

TERM = Term(tid=3, vid="tags", name="Fish & Chips", uuid="t")
FILE = File(fid=5, uuid="f", uri="public://cat.png", filename="cat.png", status=FileStatus.PERMANENT)


def lookup_term(tid: int) -> Term | None:
    """Resolve tid 3 only."""
    return TERM if tid == TERM.tid else None


def lookup_file(fid: int) -> File | None:
    """Resolve fid 5 only."""
    return FILE if fid == FILE.fid else None


def render(field_type: FieldType, items, name: str = "field_x") -> str:
    """Render `items` as a field of `field_type`."""
    return render_field(
        FieldDefinition(name, "article", "Label <b>"),
        FieldStorageDefinition(name, field_type),
        items,
        lookup_term,
        lookup_file,
    )


def test_css_name() -> None:
    """Underscores become dashes."""
    assert css_name("field_tags") == "field-tags"
    assert css_name("text_with_summary") == "text-with-summary"


def test_field_wrapper_classes_and_label() -> None:
    """Fields carry name and type classes; the label is escaped."""
    html = render(FieldType.STRING, [{"value": "x"}], name="field_subtitle")
    assert html.startswith(
        '<div class="field field--name-field-subtitle field--type-string">'
    )
    assert '<div class="field__label">Label &lt;b&gt;</div>' in html


def test_term_reference() -> None:
    """Term items link to the term page; missing terms are skipped."""
    html = render(FieldType.ENTITY_REFERENCE, [{"target_id": 3}, {"target_id": 4}])
    assert '<a href="/taxonomy/term/3" hreflang="en">Fish &amp; Chips</a>' in html
    assert html.count("field__item") == 1


def test_image() -> None:
    """Image items point at the public file URL."""
    html = render(FieldType.IMAGE, [{"target_id": 5, "alt": 'a "cat"'}])
    assert '<img src="/sites/default/files/cat.png" alt="a &quot;cat&quot;" loading="lazy">' in html


def test_link_uses_title_or_uri() -> None:
    """Links show their title, falling back to the URI."""
    titled = render(FieldType.LINK, [{"uri": "https://drupal.org", "title": "Drupal"}])
    bare = render(FieldType.LINK, [{"uri": "https://drupal.org"}])
    assert '<a href="https://drupal.org">Drupal</a>' in titled
    assert '<a href="https://drupal.org">https://drupal.org</a>' in bare


def test_text_paragraphs() -> None:
    """Blank lines split paragraphs; single newlines become <br>."""
    html = render(FieldType.TEXT_WITH_SUMMARY, [{"value": "one\ntwo\n\n<three>"}])
    assert "<p>one<br>two</p><p>&lt;three&gt;</p>" in html


def test_teaser() -> None:
    """Teasers link the escaped title to the node."""
    node = Node(nid=7, uuid="n", type="page", title="A < B")
    assert '<h2><a href="/node/7">A &lt; B</a></h2>' in render_teaser(node)


def test_page_anonymous() -> None:
    """Anonymous pages offer a login link and the page heading."""
    html = render_page("Home", "<p>x</p>", site_name="Drupal")
    assert "<title>Home | Drupal</title>" in html
    assert '<a href="/user/login">Log in</a>' in html
    assert '<h1 class="page-title">Home</h1>' in html


def test_page_logged_in_without_heading() -> None:
    """Logged-in pages name the account; node pages omit the page heading."""
    html = render_page("T", "", site_name="S & Co", account_name="bob", show_heading=False)
    assert "<title>T | S &amp; Co</title>" in html
    assert '<span class="account">bob</span>' in html
    assert "page-title" not in html
