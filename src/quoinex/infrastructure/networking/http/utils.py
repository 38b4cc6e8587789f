"""
HTTP Networking Utilities

URL and query construction shared by request builders, and the text dumps
written to the diagnostic logger.
"""

from typing import Any, Mapping, Optional
from urllib.parse import urlencode

from yarl import URL

from .structs import OutboundRequest, RawResponse

# Auth headers are shortened in dumps
MASKED_HEADERS = frozenset({"x-quoine-auth"})


def encode_query(params: Optional[Mapping[str, Any]]) -> str:
    """
    Encode query parameters with keys in sorted order.

    Empty string and None values are dropped. The result is part of the
    signed path, so the same mapping must always produce the same string.
    """
    if not params:
        return ""
    items = sorted((key, str(value)) for key, value in params.items() if value is not None and value != "")
    return urlencode(items)


def build_url(base_url: URL, path: str, query: str = "") -> str:
    """
    Append path verbatim to the base URL path.

    No separator collapsing or percent-decoding, so ``/orders/`` keeps its
    trailing slash and ``//`` stays ``//``.
    """
    base_path = "" if base_url.raw_path == "/" else base_url.raw_path
    full_path = base_path + path
    if not full_path.startswith("/"):
        full_path = "/" + full_path

    url = str(base_url.with_path(full_path, encoded=True).with_query(None).with_fragment(None))
    return f"{url}?{query}" if query else url


def _render_headers(headers: Mapping[str, str]) -> str:
    lines = []
    for name, value in headers.items():
        if name.lower() in MASKED_HEADERS and len(value) > 16:
            value = f"{value[:16]}..."
        lines.append(f"{name}: {value}")
    return "\r\n".join(lines)


def format_request(request: OutboundRequest) -> str:
    """Render a request as HTTP/1.1 text for diagnostics."""
    url = URL(request.url, encoded=True)
    head = f"{request.method.value} {url.raw_path_qs} HTTP/1.1\r\nHost: {url.raw_host}"
    if not url.is_default_port():
        head += f":{url.port}"
    dump = f"{head}\r\n{_render_headers(request.headers)}\r\n\r\n"
    if request.body:
        dump += request.body.decode("utf-8", errors="replace")
    return dump


def format_response(response: RawResponse) -> str:
    """Render a response as HTTP/1.1 text for diagnostics."""
    status_line = f"HTTP/1.1 {response.status} {response.reason or ''}".rstrip()
    return f"{status_line}\r\n{_render_headers(response.headers)}\r\n\r\n{response.text}"
