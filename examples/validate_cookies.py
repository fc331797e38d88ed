"""
Example: Validate Set-Cookie headers against the request they arrived on

Shows what a client keeps and what it rejects:
- Cookies without Domain stay on the exact host
- Domain=example.com widens to .example.com (direct subdomains only)
- Cookies for other sites are rejected with every reason listed
"""

import logging

from crumbjar import (
    Cookie,
    CookieJar,
    InvalidCookieError,
    compute_search_domains_for_host,
    parse_set_cookie,
)


def inspect_example():
    """Parse and validate single headers."""
    print(parse_set_cookie("id=123; Domain=example.com; Secure"))
    print(compute_search_domains_for_host("www.example.com"))

    cookie = Cookie.from_set_cookie(
        "https://www.example.com/account/login", "sid=abc; Domain=example.com"
    )
    print(f"Stored: {cookie!r}")

    try:
        Cookie.from_set_cookie(
            "http://www.example.com/public", "sid=abc; Domain=evil.com; Path=/admin"
        )
    except InvalidCookieError as exc:
        for message in exc.messages:
            print(f"Rejected: {message}")


def jar_example():
    """Feed response headers into a jar and build Cookie headers."""
    jar = CookieJar()
    jar.set_from_headers(
        [
            ("Content-Type", "text/html"),
            ("Set-Cookie", "theme=dark; Path=/"),
            ("Set-Cookie", "token=xyz; Domain=example.com; Secure"),
            ("Set-Cookie", "tracker=1; Domain=ads.net"),
        ],
        "https://www.example.com/",
    )
    print(f"www over https: {jar.cookie_header('https://www.example.com/')}")
    print(f"api over https: {jar.cookie_header('https://api.example.com/')}")
    print(f"www over http:  {jar.cookie_header('http://www.example.com/')}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    print("=== Single cookies ===")
    inspect_example()

    print("\n=== Cookie jar ===")
    jar_example()
