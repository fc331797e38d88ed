from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Any

from .domains import domains_match
from .utils import RequestURI
from .validation import (
    determine_cookie_domain,
    determine_cookie_path,
    parse_set_cookie,
    validate_cookie,
)


class Cookie:
    """
    A single cookie as received from a server, with its domain and path
    already resolved against the originating request.
    """

    def __init__(
        self,
        name: str,
        value: str,
        domain: str,
        path: str,
        expires_at: datetime | None = None,
        secure: bool = False,
        http_only: bool = False,
        version: int | None = 0,
        ports: Iterable[int] | None = None,
    ) -> None:
        self.name = name
        self.value = value
        self.domain = domain
        self.path = path
        if expires_at is not None and expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        self.expires_at = expires_at
        self.secure = secure
        self.http_only = http_only
        self.version = version
        self.ports: list[int] | None = list(ports) if ports is not None else None

    @classmethod
    def from_set_cookie(cls, request_uri: RequestURI | str, set_cookie_value: str) -> Cookie:
        """
        Build a cookie from a ``Set-Cookie`` header received for
        ``request_uri``.

        Raises:
            MalformedCookieError: the header could not be parsed.
            InvalidCookieError: the cookie may not be stored for this request.
        """
        uri = RequestURI.parse(request_uri)
        args = parse_set_cookie(set_cookie_value)
        args["domain"] = determine_cookie_domain(uri, args.get("domain"))
        args["path"] = determine_cookie_path(uri, args.get("path"))
        cookie = cls(
            name=args.get("name", ""),
            value=args.get("value", ""),
            domain=args["domain"],
            path=args["path"],
            expires_at=args.get("expires_at"),
            secure=args.get("secure", False),
            http_only=args.get("http_only", False),
            version=args["version"],
        )
        validate_cookie(uri, cookie)
        return cookie

    def expired(self, now: datetime | None = None) -> bool:
        if self.expires_at is None:
            return False
        now = now or datetime.now(timezone.utc)
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        return self.expires_at <= now

    def should_send(self, request_uri: RequestURI | str, script: bool = False) -> bool:
        """
        Whether this stored cookie applies to ``request_uri``.

        Args:
            request_uri: The outgoing request.
            script: True when the cookie would be exposed to script rather
                than sent over HTTP; HttpOnly cookies are withheld then.
        """
        uri = RequestURI.parse(request_uri)
        if domains_match(self.domain, uri.host) is None:
            return False
        if not uri.path.startswith(self.path):
            return False
        if self.secure and not uri.secure:
            return False
        if self.http_only and script:
            return False
        if self.ports and uri.port not in self.ports:
            return False
        return not self.expired()

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "value": self.value,
            "domain": self.domain,
            "path": self.path,
            "expires_at": self.expires_at,
            "secure": self.secure,
            "http_only": self.http_only,
            "version": self.version,
            "ports": self.ports,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cookie):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        return f"{self.name}={self.value}"

    def __repr__(self) -> str:
        return f"<Cookie {self.name}={self.value} for {self.domain}{self.path}>"
