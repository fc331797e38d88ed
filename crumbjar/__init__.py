from crumbjar.cookies import CookieJar
from crumbjar.models import Cookie
from crumbjar.utils import RequestURI, parse_url
from crumbjar.errors import (
    CrumbjarError,
    CookieError,
    MalformedCookieError,
    InvalidCookieError,
)
from crumbjar.domains import (
    effective_host,
    hostname_reach,
    compute_search_domains,
    compute_search_domains_for_host,
    domains_match,
    cookie_base_path,
)
from crumbjar.validation import (
    determine_cookie_domain,
    determine_cookie_path,
    parse_set_cookie,
    cookie_errors,
    validate_cookie,
)

__all__ = [
    "CookieJar",
    "Cookie",
    "RequestURI",
    "parse_url",
    "CrumbjarError",
    "CookieError",
    "MalformedCookieError",
    "InvalidCookieError",
    "effective_host",
    "hostname_reach",
    "compute_search_domains",
    "compute_search_domains_for_host",
    "domains_match",
    "cookie_base_path",
    "determine_cookie_domain",
    "determine_cookie_path",
    "parse_set_cookie",
    "cookie_errors",
    "validate_cookie",
]
