# scanconsole/core/input_validation.py
"""
Input validation helpers shared by request schemas and services
"""

from urllib.parse import urlparse, ParseResult


def parse_absolute_url(value: str) -> ParseResult:
    """Parse ``value`` as an absolute URL; scheme and host are both required"""
    if not isinstance(value, str):
        raise ValueError("string required")

    parsed = urlparse(value.strip())
    if not parsed.scheme or not parsed.netloc:
        raise ValueError("must be url")

    return parsed


def url_origin(value: str) -> str:
    """
    Reduce a URL to ``scheme://host[:port]``, dropping userinfo, path, query
    and fragment. IPv6 hosts are bracketed.
    """
    parsed = parse_absolute_url(value)
    host = parsed.hostname
    if not host:
        raise ValueError("must be url")
    if ":" in host:
        host = f"[{host}]"

    # port raises ValueError when out of range or not numeric
    port = parsed.port
    if port is not None:
        host = f"{host}:{port}"
    return f"{parsed.scheme}://{host}"
