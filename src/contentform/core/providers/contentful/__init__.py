"""Contentful Content Management API provider."""

from contentform.core.providers.contentful.client import DEFAULT_BASE_URL, HttpContentfulClient

__all__ = ["DEFAULT_BASE_URL", "HttpContentfulClient"]
