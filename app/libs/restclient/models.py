import json
from collections.abc import AsyncIterable, AsyncIterator
from enum import StrEnum
from typing import Any, Protocol, runtime_checkable

import httpx

from .types import Headers, StreamCallback


class HttpMethod(StrEnum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class Body:
    """Read-once view over the body of an in-flight response.

    The underlying stream belongs to the client and is closed by it once the
    call returns, so adapters must finish reading inside ``decode``/``set_body``.
    """

    def __init__(self, response: httpx.Response):
        self._response = response

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self._response.headers

    @property
    def is_consumed(self) -> bool:
        return self._response.is_stream_consumed

    async def read(self) -> bytes:
        return await self._response.aread()

    async def iter_bytes(self) -> AsyncIterator[bytes]:
        async for chunk in self._response.aiter_bytes():
            yield chunk

    async def iter_lines(self) -> AsyncIterator[str]:
        async for line in self._response.aiter_lines():
            yield line

    async def text(self) -> str:
        await self._response.aread()
        return self._response.text

    async def json(self) -> Any:
        return json.loads(await self.read())


@runtime_checkable
class Request(Protocol):
    def path(self) -> str:
        """Return the request path, query string included."""
        ...

    def encode(self) -> bytes | str | AsyncIterable[bytes] | None:
        """Return the encoded body, or None when the request has none."""
        ...

    def content_type(self) -> str: ...


@runtime_checkable
class Response(Protocol):
    async def decode(self, body: Body) -> None:
        """Decode a body whose content type matched ``accept_content_type``."""
        ...

    async def set_body(self, body: Body) -> None:
        """Receive the raw body when it is not decoded."""
        ...

    def accept_content_type(self) -> str:
        """Content type to decode; empty to always receive the raw body."""
        ...

    def set_status_code(self, code: int) -> None: ...

    def set_headers(self, headers: Headers) -> None: ...


@runtime_checkable
class Streamable(Protocol):
    def stream_callback(self) -> StreamCallback | None: ...
