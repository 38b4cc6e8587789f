from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Optional


class HTTPMethod(Enum):
    """HTTP methods used by the REST clients."""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


@dataclass(frozen=True)
class OutboundRequest:
    """
    Fully built, signed request ready for dispatch.

    Attributes:
        method: HTTP method
        url: Absolute URL with the encoded query string, sent as-is
        path: Canonical path + query that was signed
        headers: Content type, version, identification and auth headers (read-only)
        body: Encoded JSON body, None when the request has no body
    """
    method: HTTPMethod
    url: str
    path: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None

    def __post_init__(self):
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))


@dataclass(frozen=True)
class RawResponse:
    """Response with the body fully read and the connection released."""
    status: int
    reason: Optional[str]
    headers: Dict[str, str]
    body: bytes

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")
