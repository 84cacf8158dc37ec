"""The ``testing-example demo`` command.

Bootstraps an in-memory site, installs the article scenario, authors one
article and walks through it with the simulated browser: first as the
content editor, then as the administrator. Progress lines go to stderr; the
article URL is printed to stdout.
"""

import logging

import click

from testing_example.bootstrap import bootstrap
from testing_example.config import (
    BASE_URL_ENV,
    DEFAULT_BASE_URL,
    DEFAULT_SITE_NAME,
    SITE_NAME_ENV,
    InvalidBaseUrlError,
    SiteSettings,
)
from testing_example.interfaces.errors import FieldValueError
from testing_example.service_layer.article import create_article, install_article_site
from testing_example.service_layer.assert_session import (
    AssertSession,
    ExpectationFailedError,
)

from .helpers import error, success

logger = logging.getLogger(__name__)

TITLE_SELECTOR = "h1 span.field--name-title"


@click.command()
@click.option(
    "--title",
    default="Test node for the demo",
    show_default=True,
    help="Title of the article to create.",
)
@click.option(
    "--site-name",
    envvar=SITE_NAME_ENV,
    default=DEFAULT_SITE_NAME,
    show_default=True,
    show_envvar=True,
    help="Site name used in page titles.",
)
@click.option(
    "--base-url",
    envvar=BASE_URL_ENV,
    default=DEFAULT_BASE_URL,
    show_default=True,
    show_envvar=True,
    help="Base URL the simulated site answers for.",
)
@click.pass_context
def demo(ctx: click.Context, title: str, site_name: str, base_url: str) -> None:
    """Create an article on an in-memory site and browse to it."""
    try:
        settings = SiteSettings(site_name=site_name, base_url=base_url)
    except InvalidBaseUrlError as e:
        raise click.BadParameter(str(e), param_hint="--base-url") from e

    logger.debug("Site: name=%r, base_url=%s", settings.site_name, settings.base_url)
    site = bootstrap(settings)
    fixture = install_article_site(site)
    try:
        node = create_article(site, fixture, title)
    except FieldValueError as e:
        raise click.BadParameter(str(e), param_hint="--title") from e
    browser = site.browser
    assert_session = AssertSession(browser)

    try:
        browser.log_in(fixture.auth_user)
        browser.navigate(node.url)
        assert_session.status_code_equals(200)
        success(f"{node.url} answered 200 for {fixture.auth_user.name}.")

        browser.log_in(fixture.admin_user)
        response = browser.navigate(node.url)
        assert_session.status_code_equals(200)
        assert_session.title_equals(f"{title} | {settings.site_name}")
        assert_session.element_text_contains(TITLE_SELECTOR, title)
        success(f"Administrator sees {response.page.title!r}.")
    except ExpectationFailedError as e:
        logger.debug("Demo expectation failed", exc_info=True)
        error(str(e))
        ctx.exit(1)

    click.echo(response.url)
