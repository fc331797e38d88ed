from __future__ import annotations

from urllib.parse import urlparse


class RequestURI:
    """
    The parts of a request URL that cookie rules look at. Immutable; build
    one with ``RequestURI.parse``.
    """

    __slots__ = ("scheme", "host", "port", "path")

    def __init__(self, scheme: str, host: str, port: int, path: str) -> None:
        object.__setattr__(self, "scheme", scheme)
        object.__setattr__(self, "host", host)
        object.__setattr__(self, "port", port)
        object.__setattr__(self, "path", path)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"RequestURI is immutable, cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"RequestURI is immutable, cannot delete {name!r}")

    @classmethod
    def parse(cls, url: str | RequestURI) -> RequestURI:
        if isinstance(url, RequestURI):
            return url
        return parse_url(url)

    @property
    def secure(self) -> bool:
        return self.scheme == "https"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RequestURI):
            return NotImplemented
        return (self.scheme, self.host, self.port, self.path) == (
            other.scheme,
            other.host,
            other.port,
            other.path,
        )

    def __hash__(self) -> int:
        return hash((self.scheme, self.host, self.port, self.path))

    def __repr__(self) -> str:
        return f"<RequestURI {self.scheme}://{self.host}:{self.port}{self.path}>"


def parse_url(url: str) -> RequestURI:
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https"):
        raise ValueError("Only http and https schemes are supported")
    # hostname is already lower-cased and stripped of IPv6 brackets
    host = parsed.hostname or ""
    port = parsed.port or (443 if parsed.scheme == "https" else 80)
    path = parsed.path or "/"
    return RequestURI(parsed.scheme, host, port, path)
