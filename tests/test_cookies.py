"""Tests for crumbjar.cookies module."""

import logging

import pytest
from crumbjar import cookies as cookies_module
from crumbjar.cookies import CookieJar
from crumbjar.errors import InvalidCookieError, MalformedCookieError


class TestCookieJar:
    """Tests for CookieJar class."""

    def test_empty_jar(self):
        """Test empty cookie jar returns None for header."""
        jar = CookieJar()
        assert jar.cookie_header("http://example.com/") is None
        assert len(jar) == 0

    def test_set_single_cookie(self):
        """Test setting a single cookie."""
        jar = CookieJar()
        jar.set_from_headers([("Set-Cookie", "session=abc123")], "http://example.com/")

        assert jar.cookie_header("http://example.com/") == "session=abc123"

    def test_set_multiple_cookies(self):
        """Test multiple cookies are joined in insertion order."""
        jar = CookieJar()
        headers = [
            ("Set-Cookie", "session=abc123"),
            ("Set-Cookie", "user=john"),
        ]
        jar.set_from_headers(headers, "http://example.com/")

        assert jar.cookie_header("http://example.com/") == "session=abc123; user=john"

    def test_host_only_cookies(self):
        """Test cookies without Domain stay on their host."""
        jar = CookieJar()
        jar.set_from_headers([("Set-Cookie", "a=1")], "http://example.com/")
        jar.set_from_headers([("Set-Cookie", "b=2")], "http://other.com/")

        assert jar.cookie_header("http://example.com/") == "a=1"
        assert jar.cookie_header("http://other.com/") == "b=2"
        assert jar.cookie_header("http://www.example.com/") is None

    def test_domain_cookie_shared_with_subdomains(self):
        """Test a Domain cookie is sent to sibling subdomains."""
        jar = CookieJar()
        jar.set_from_headers(
            [("Set-Cookie", "token=xyz; Domain=example.com")], "http://api.example.com/"
        )

        assert jar.cookie_header("http://www.example.com/") == "token=xyz"
        assert jar.cookie_header("http://example.com/") == "token=xyz"

    def test_cookie_overwrite(self):
        """Test setting same cookie name overwrites."""
        jar = CookieJar()
        jar.set_from_headers([("Set-Cookie", "session=old")], "http://example.com/")
        jar.set_from_headers([("Set-Cookie", "session=new")], "http://example.com/")

        assert jar.cookie_header("http://example.com/") == "session=new"
        assert len(jar) == 1

    def test_expired_cookie_removes_stored(self):
        """Test a past expiry deletes the stored cookie."""
        jar = CookieJar()
        jar.set_from_headers([("Set-Cookie", "session=abc")], "http://example.com/")
        jar.set_from_headers(
            [("Set-Cookie", "session=; Expires=Thu, 01 Jan 1970 00:00:00 GMT")],
            "http://example.com/",
        )

        assert len(jar) == 0
        assert jar.cookie_header("http://example.com/") is None

    def test_ignores_non_set_cookie_headers(self):
        """Test non Set-Cookie headers are ignored."""
        jar = CookieJar()
        headers = [
            ("Content-Type", "text/html"),
            ("set-cookie", "session=abc"),
            ("X-Custom", "value"),
        ]
        jar.set_from_headers(headers, "http://example.com/")

        assert jar.cookie_header("http://example.com/") == "session=abc"

    def test_secure_cookie_only_over_https(self):
        """Test secure cookies are only sent over https."""
        jar = CookieJar()
        headers = [("Set-Cookie", "session=abc; Path=/; HttpOnly; Secure")]
        jar.set_from_headers(headers, "https://example.com/")

        assert jar.cookie_header("https://example.com/") == "session=abc"
        assert jar.cookie_header("http://example.com/") is None

    def test_cookies_for_script(self):
        """Test HttpOnly cookies are hidden from script access."""
        jar = CookieJar()
        jar.set_from_headers(
            [("Set-Cookie", "a=1; HttpOnly"), ("Set-Cookie", "b=2")],
            "http://example.com/",
        )

        names = [c.name for c in jar.cookies_for("http://example.com/", script=True)]
        assert names == ["b"]

    def test_rejected_cookie_skipped(self, mocker):
        """Test invalid cookies are logged and skipped."""
        debug = mocker.patch.object(cookies_module.logger, "debug")
        jar = CookieJar()
        jar.set_from_headers(
            [("Set-Cookie", "a=1; Domain=evil.com"), ("Set-Cookie", "b=2")],
            "http://www.example.com/",
        )

        assert [c.name for c in jar] == ["b"]
        debug.assert_called_once()

    def test_malformed_cookie_skipped(self, caplog):
        """Test malformed headers are logged at debug level."""
        jar = CookieJar()
        with caplog.at_level(logging.DEBUG, logger="crumbjar.cookies"):
            jar.set_from_headers([("Set-Cookie", "bad name=1")], "http://example.com/")

        assert len(jar) == 0
        assert "Rejected cookie" in caplog.text

    def test_strict_raises_invalid(self):
        """Test strict jars raise for invalid cookies."""
        jar = CookieJar(strict=True)
        with pytest.raises(InvalidCookieError):
            jar.set_from_headers(
                [("Set-Cookie", "a=1; Domain=evil.com")], "http://www.example.com/"
            )

    def test_strict_raises_malformed(self):
        """Test strict jars raise for malformed headers."""
        jar = CookieJar(strict=True)
        with pytest.raises(MalformedCookieError):
            jar.set_from_headers([("Set-Cookie", "bad name=1")], "http://example.com/")

    def test_set_cookie_returns_cookie(self):
        """Test set_cookie returns the stored cookie."""
        jar = CookieJar()
        cookie = jar.set_cookie("http://example.com/a/b", "id=7")
        assert cookie.path == "/a/"
        assert list(jar) == [cookie]

    def test_clear(self):
        """Test clear empties the jar."""
        jar = CookieJar()
        jar.set_cookie("http://example.com/", "a=1")
        jar.clear()
        assert len(jar) == 0

    def test_repr(self):
        """Test CookieJar repr."""
        jar = CookieJar()
        jar.set_cookie("http://example.com/", "a=1")

        repr_str = repr(jar)
        assert "Cookies" in repr_str
        assert "example.com" in repr_str

    def test_empty_headers_list(self):
        """Test empty headers list doesn't raise."""
        jar = CookieJar()
        jar.set_from_headers([], "http://example.com/")
        assert jar.cookie_header("http://example.com/") is None
