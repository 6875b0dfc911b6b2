"""URL validation and normalization for analysis requests."""

from urllib.parse import urlsplit, urlunsplit

from errors import InvalidURLError

ALLOWED_SCHEMES = {"http", "https"}
DEFAULT_PORTS = {"http": 80, "https": 443}


def normalize_url(raw_url: object) -> str:
    """
    Validate `raw_url` and return its normalized form.

    The normalized URL is what gets analysed and is also the cache key:
    lowercase scheme and host, no default port, "/" for an empty path,
    query kept, fragment dropped.
    """
    text = str(raw_url or "").strip()
    if not text:
        raise InvalidURLError('The "url" parameter is required.')

    try:
        parts = urlsplit(text)
        port = parts.port
    except ValueError as exc:
        raise InvalidURLError("The provided URL is not valid.") from exc

    scheme = parts.scheme.lower()
    host = (parts.hostname or "").lower()
    if scheme not in ALLOWED_SCHEMES or not host or " " in text:
        raise InvalidURLError("The provided URL is not valid.")

    if ":" in host:
        host = f"[{host}]"
    netloc = host
    if port is not None and port != DEFAULT_PORTS[scheme]:
        netloc = f"{host}:{port}"
    if parts.username or parts.password:
        credentials = parts.username or ""
        if parts.password:
            credentials = f"{credentials}:{parts.password}"
        netloc = f"{credentials}@{netloc}"

    return urlunsplit((scheme, netloc, parts.path or "/", parts.query, ""))


def hostname_of(url: str) -> str:
    """Return the lowercase hostname of `url`, or an empty string."""
    try:
        return (urlsplit(url).hostname or "").lower()
    except ValueError:
        return ""
