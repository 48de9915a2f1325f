"""REST client module."""

from .client import RestClient
from .content_type import match_content_type, parse_content_type
from .exceptions import (
    HTTPRequestError,
    NoContentTypeError,
    RequestEncodeError,
    RequestPathError,
    ResponseDecodeError,
    RestClientError,
    StreamRecordTooLongError,
)
from .models import Body, HttpMethod, Request, Response, Streamable
from .modifiers import bearer_auth_modifier, chain_modifiers, headers_modifier, timeout_modifier
from .pool import PoolLimits, ProxyConfig, build_async_client
from .stream import MAX_STREAM_BUFFER_SIZE, stream
from .types import Headers, RequestModifier, StreamCallback

__all__ = [
    "RestClient",
    "Request",
    "Response",
    "Streamable",
    "Body",
    "HttpMethod",
    "Headers",
    "RequestModifier",
    "StreamCallback",
    "PoolLimits",
    "ProxyConfig",
    "build_async_client",
    "match_content_type",
    "parse_content_type",
    "stream",
    "MAX_STREAM_BUFFER_SIZE",
    "headers_modifier",
    "bearer_auth_modifier",
    "timeout_modifier",
    "chain_modifiers",
    "RestClientError",
    "RequestPathError",
    "RequestEncodeError",
    "HTTPRequestError",
    "NoContentTypeError",
    "ResponseDecodeError",
    "StreamRecordTooLongError",
]
