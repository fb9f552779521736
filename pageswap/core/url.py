"""URL helpers: anchors, request URLs, extensions and visitability."""

from __future__ import annotations

from typing import Any
from urllib.parse import urljoin, urlsplit

from pageswap.core.types import Element

# Anything with an `href` attribute, or whose str() is a URL
Locatable = Any

_DEFAULT_PORTS = {"http": 80, "https": 443, "ws": 80, "wss": 443, "ftp": 21}


def _href(locatable: Locatable) -> str:
    if locatable is None:
        return ""
    href = getattr(locatable, "href", None)
    if isinstance(href, str):
        return href
    return str(locatable)


def expand_url(locatable: Locatable, base_url: str = "about:blank") -> str:
    """Resolve `locatable` against `base_url` into an absolute URL string."""
    return urljoin(base_url, _href(locatable))


def get_anchor(url: Locatable) -> str | None:
    """
    Fragment identifier without the leading '#'.

    Returns "" for a bare trailing '#', None when the URL has no fragment.
    """
    hash_ = getattr(url, "hash", None)
    if isinstance(hash_, str) and len(hash_) > 1:
        return hash_[1:]

    href = _href(url)
    if "#" not in href:
        return None
    return href.split("#", 1)[1]


def get_request_url(url: Locatable) -> str:
    """The href with its fragment (and the '#') removed."""
    href = _href(url)
    anchor = get_anchor(url)
    if anchor is not None and href.endswith("#" + anchor):
        return href[: -(len(anchor) + 1)]
    return href


def to_cache_key(url: Locatable) -> str:
    return get_request_url(url)


def get_action(
    form: Element,
    submitter: Element | None = None,
    base_url: str = "about:blank",
) -> str:
    """
    Resolve a form submission URL.

    Order: the submitter's `formaction`, then the form's `action`
    attribute, then the document base URL.
    """
    chosen = submitter.get_attribute("formaction") if submitter is not None else None
    if chosen is None:
        chosen = form.get_attribute("action")
    if chosen is None:
        return expand_url("", base_url)
    return expand_url(chosen, base_url)


def get_path_components(url: Locatable) -> list[str]:
    return urlsplit(_href(url)).path.split("/")[1:]


def get_last_path_component(url: Locatable) -> str:
    components = get_path_components(url)
    return components[-1] if components else ""


def get_extension(url: Locatable) -> str:
    """Last extension of the final path component including the dot, or ''."""
    last = get_last_path_component(url)
    dot = last.rfind(".")
    return last[dot:] if dot != -1 else ""


def add_trailing_slash(value: str) -> str:
    return value if value.endswith("/") else value + "/"


def _origin(url: str) -> str:
    """scheme://host[:port] with userinfo dropped, host lowercased, default port omitted."""
    parsed = urlsplit(url)
    scheme = parsed.scheme.lower()
    host = parsed.hostname or ""
    if ":" in host:
        host = f"[{host}]"
    port = parsed.port
    if port is None or _DEFAULT_PORTS.get(scheme) == port:
        return f"{scheme}://{host}"
    return f"{scheme}://{host}:{port}"


def is_prefixed_by(base_url: Locatable, url: Locatable) -> bool:
    """Same origin, and `url`'s path lies within `base_url`'s directory."""
    base, target = _href(base_url), _href(url)
    if _origin(base) != _origin(target):
        return False
    base_path = add_trailing_slash(urlsplit(base).path or "/")
    url_path = add_trailing_slash(urlsplit(target).path or "/")
    return url_path.startswith(base_path)


def location_is_visitable(
    location: Locatable,
    root_location: Locatable,
    unvisitable_extensions: frozenset[str],
) -> bool:
    return (
        is_prefixed_by(root_location, location)
        and get_extension(location) not in unvisitable_extensions
    )


def urls_are_equal(left: Locatable, right: Locatable, base_url: str = "about:blank") -> bool:
    return expand_url(left, base_url) == expand_url(right, base_url)
