from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from .errors import CookieError
from .models import Cookie
from .utils import RequestURI

logger = logging.getLogger("crumbjar.cookies")


class CookieJar:
    """
    Minimal cookie jar that only keeps cookies passing the storage rules.
    Cookies are keyed by domain, path and name; a later cookie with the same
    key replaces the earlier one.

    Args:
        strict: Raise CookieError for rejected cookies instead of logging and
            skipping them (default: False)
    """

    def __init__(self, strict: bool = False) -> None:
        self.strict = strict
        self.store: dict[tuple[str, str, str], Cookie] = {}

    def set_cookie(self, request_url: RequestURI | str, set_cookie_value: str) -> Cookie:
        """Parse, validate and store one Set-Cookie header. Raises on rejection."""
        cookie = Cookie.from_set_cookie(request_url, set_cookie_value)
        key = (cookie.domain, cookie.path, cookie.name)
        if cookie.expired():
            # An expiry in the past is how servers delete a cookie.
            self.store.pop(key, None)
        else:
            self.store[key] = cookie
        return cookie

    def set_from_headers(
        self, headers: Iterable[tuple[str, str]], request_url: RequestURI | str
    ) -> None:
        uri = RequestURI.parse(request_url)
        for name, value in headers:
            if name.lower() != "set-cookie":
                continue
            try:
                self.set_cookie(uri, value)
            except CookieError as exc:
                if self.strict:
                    raise
                logger.debug("Rejected cookie %r from %s: %s", value, uri.host, exc)

    def cookies_for(self, request_url: RequestURI | str, script: bool = False) -> list[Cookie]:
        uri = RequestURI.parse(request_url)
        return [c for c in self.store.values() if c.should_send(uri, script=script)]

    def cookie_header(self, request_url: RequestURI | str) -> str | None:
        cookies = self.cookies_for(request_url)
        if not cookies:
            return None
        return "; ".join(str(c) for c in cookies)

    def clear(self) -> None:
        self.store.clear()

    def __len__(self) -> int:
        return len(self.store)

    def __iter__(self) -> Iterator[Cookie]:
        return iter(list(self.store.values()))

    def __repr__(self) -> str:
        return f"<Cookies {list(self.store.values())}>"
