from __future__ import annotations


class CrumbjarError(Exception):
    """Base error for Crumbjar."""


class CookieError(CrumbjarError):
    """Raised when a cookie is rejected."""


class MalformedCookieError(CookieError):
    """Raised when a Set-Cookie header does not follow the attribute grammar."""

    def __init__(self, message: str, header: str, segment: str | None = None) -> None:
        super().__init__(message)
        self.header = header
        self.segment = segment


class InvalidCookieError(CookieError):
    """
    Raised when a cookie breaks one or more storage rules for the request it
    arrived on. Every violated rule is kept in ``messages``.
    """

    def __init__(self, messages: str | list[str]) -> None:
        if isinstance(messages, str):
            messages = [messages]
        self.messages: list[str] = list(messages)
        super().__init__(", ".join(self.messages))
