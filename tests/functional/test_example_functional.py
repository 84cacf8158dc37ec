"""Functional test of the article scenario through the simulated browser.

Story: an administrator authors a fully populated article. The content
editor can open it, and so can the administrator, who sees the article
title both in the page title and in the node heading.
"""

from __future__ import annotations

import pytest

from testing_example.bootstrap import SiteContainer
from testing_example.service_layer.article import ArticleFixture, create_article
from testing_example.service_layer.assert_session import (
    AssertSession,
    ExpectationFailedError,
)

# pylint: disable=redefined-outer-name

TITLE = "Test node for testNewPageApiCreate"


@pytest.fixture
def assert_session(site: SiteContainer) -> AssertSession:
    """Assertions over the site's browser."""
    return AssertSession(site.browser)


class TestArticleScenario:
    """A content editor and an administrator visit a new article."""

    @staticmethod
    def test_new_page_api_create(
        site: SiteContainer,
        article_fixture: ArticleFixture,
        assert_session: AssertSession,
    ) -> None:
        """Both users get the article; the administrator sees its title."""
        # The administrator authors an article with every field filled in.
        node = create_article(site, article_fixture, TITLE)

        # The content editor logs in and opens it.
        site.browser.log_in(article_fixture.auth_user)
        site.browser.navigate(node.url)
        assert_session.status_code_equals(200)

        # The administrator logs in and opens it too.
        site.browser.log_in(article_fixture.admin_user)
        site.browser.navigate(node.url)
        assert_session.status_code_equals(200)
        assert_session.title_equals(f"{TITLE} | Drupal")
        assert_session.element_text_contains("h1 span.field--name-title", TITLE)

    @staticmethod
    def test_article_fields_are_displayed(
        site: SiteContainer,
        article_fixture: ArticleFixture,
        assert_session: AssertSession,
    ) -> None:
        """The rendered article shows body, tag, image and link."""
        node = create_article(site, article_fixture, TITLE)

        site.browser.navigate(node.url)
        assert_session.status_code_equals(200)
        assert_session.address_equals(node.url)
        assert_session.page_text_contains("Body of test node")
        assert_session.element_text_contains(".field--name-field-tags a", "Tag1 Random")
        image = assert_session.element_exists(".field--name-field-image img")
        assert image.get_attribute("alt") == "alt text"
        link = assert_session.element_exists(".field--name-field-link a")
        assert link.get_attribute("href") == "https://drupal.org"
        assert link.get_text() == "Drupal"

    @staticmethod
    def test_tag_page_links_back_to_the_article(
        site: SiteContainer,
        article_fixture: ArticleFixture,
        assert_session: AssertSession,
    ) -> None:
        """Following the tag leads to a page listing the article."""
        node = create_article(site, article_fixture, TITLE)
        site.browser.navigate(node.url)
        tag_url = assert_session.element_exists(".field--name-field-tags a").get_attribute("href")
        assert tag_url is not None

        site.browser.navigate(tag_url)
        assert_session.status_code_equals(200)
        assert_session.title_equals("Tag1 Random | Drupal")
        assert_session.element_text_contains("main h2 a", TITLE)

    @staticmethod
    def test_content_editor_can_edit_but_not_administer(
        site: SiteContainer,
        article_fixture: ArticleFixture,
        assert_session: AssertSession,
    ) -> None:
        """The editor role covers article edits, not the admin pages."""
        node = create_article(site, article_fixture, TITLE)
        site.browser.log_in(article_fixture.auth_user)

        site.browser.navigate(node.edit_url)
        assert_session.status_code_equals(200)
        assert_session.element_exists("form#node-article-edit-form")

        site.browser.navigate("/admin")
        assert_session.status_code_equals(403)
        with pytest.raises(ExpectationFailedError):
            assert_session.status_code_equals(200)

        site.browser.log_in(article_fixture.admin_user)
        site.browser.navigate("/admin")
        assert_session.status_code_equals(200)

    @staticmethod
    def test_unpublished_article_is_hidden_from_visitors(
        site: SiteContainer,
        article_fixture: ArticleFixture,
        assert_session: AssertSession,
    ) -> None:
        """Anonymous visitors are denied an unpublished article."""
        draft = site.content.create_node(
            {
                "type": "article",
                "title": "Draft",
                "status": False,
                "uid": article_fixture.admin_user.uid,
            }
        )
        site.browser.navigate(draft.url)
        assert_session.status_code_equals(403)
        assert_session.page_text_contains("Access denied")
        assert_session.page_text_not_contains("Draft")
