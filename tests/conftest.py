"""Pytest configuration and fixtures."""

import pytest
from crumbjar.models import Cookie
from crumbjar.utils import parse_url


@pytest.fixture
def uri_for():
    """Return a helper that parses a URL into a RequestURI."""
    return parse_url


@pytest.fixture
def make_cookie():
    """Create a Cookie with sensible defaults for validation tests."""

    def _make(**overrides):
        attrs = {
            "name": "id",
            "value": "123",
            "domain": "foo.com",
            "path": "/",
            "version": 0,
        }
        attrs.update(overrides)
        return Cookie(**attrs)

    return _make
