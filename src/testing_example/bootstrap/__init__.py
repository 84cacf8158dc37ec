"""Wiring of the site collaborators."""

from .bootstrap import SiteContainer, bootstrap, build_site_data

__all__ = ["SiteContainer", "bootstrap", "build_site_data"]
