from .structs import HTTPMethod, OutboundRequest, RawResponse
from .rest_client_interface import BaseRestClientInterface
from .utils import encode_query, build_url, format_request, format_response

__all__ = [
    "HTTPMethod",
    "OutboundRequest",
    "RawResponse",
    "BaseRestClientInterface",
    "encode_query",
    "build_url",
    "format_request",
    "format_response",
]
