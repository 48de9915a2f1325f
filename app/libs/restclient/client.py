import logging
import time
from typing import Any

import httpx

from configs import restclient_config
from extensions.ext_logging import trace_id_generator, trace_id_var

from .content_type import match_content_type
from .exceptions import (
    HTTPRequestError,
    RequestEncodeError,
    RequestPathError,
    ResponseDecodeError,
)
from .models import Body, HttpMethod, Request, Response, Streamable
from .pool import PoolLimits, ProxyConfig, build_async_client
from .stream import stream
from .types import Headers, RequestModifier

logger = logging.getLogger(__name__)

Timeout = float | httpx.Timeout | None


class RestClient:
    """Drives one HTTP exchange per call for user-defined request/response adapters.

    The client holds configuration only; every call keeps its state in the
    adapters it is given, so one instance can serve concurrent tasks as long as
    the transport and the request modifier allow it.
    """

    def __init__(
        self,
        endpoint: str,
        http_client: httpx.AsyncClient | None = None,
        request_modifier: RequestModifier | None = None,
        force_decode_on_error: bool | None = None,
        max_stream_buffer_size: int | None = None,
        pool_limits: PoolLimits | None = None,
        proxy: str | ProxyConfig | None = None,
        default_timeout: float | None = None,
    ):
        self._endpoint = endpoint
        self._client = http_client
        self._owns_client = http_client is None
        self._request_modifier = request_modifier
        if force_decode_on_error is None:
            force_decode_on_error = restclient_config.HTTP_FORCE_DECODE_ON_ERROR
        self._force_decode_on_error = force_decode_on_error
        self._max_stream_buffer_size = (
            max_stream_buffer_size or restclient_config.STREAM_MAX_BUFFER_SIZE
        )
        self._pool_limits = pool_limits
        self._proxy = proxy
        self._default_timeout = default_timeout

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @endpoint.setter
    def endpoint(self, endpoint: str) -> None:
        self._endpoint = endpoint

    def set_endpoint(self, endpoint: str) -> None:
        self._endpoint = endpoint

    @property
    def force_decode_on_error(self) -> bool:
        return self._force_decode_on_error

    @property
    def request_modifier(self) -> RequestModifier | None:
        return self._request_modifier

    def set_http_client(self, client: httpx.AsyncClient) -> None:
        """Replace the transport. A client supplied here is never closed by RestClient."""
        self._client = client
        self._owns_client = False

    def with_http_client(self, client: httpx.AsyncClient) -> "RestClient":
        self.set_http_client(client)
        return self

    def set_request_modifier(self, request_modifier: RequestModifier | None) -> None:
        self._request_modifier = request_modifier

    def with_request_modifier(self, request_modifier: RequestModifier | None) -> "RestClient":
        self._request_modifier = request_modifier
        return self

    def with_decode_on_error(self, decode_on_error: bool) -> "RestClient":
        self._force_decode_on_error = decode_on_error
        return self

    def with_max_stream_buffer_size(self, size: int) -> "RestClient":
        self._max_stream_buffer_size = size
        return self

    async def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = build_async_client(
                pool_limits=self._pool_limits,
                proxy=self._proxy,
                timeout=self._default_timeout,
            )
            self._owns_client = True
        return self._client

    async def close(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "RestClient":
        await self._ensure_client()
        return self

    async def __aexit__(self, *_args: Any) -> None:
        await self.close()

    async def get(self, request: Request, response: Response, *, timeout: Timeout = None) -> None:
        await self.do(HttpMethod.GET, request, response, timeout=timeout)

    async def post(self, request: Request, response: Response, *, timeout: Timeout = None) -> None:
        await self.do(HttpMethod.POST, request, response, timeout=timeout)

    async def put(self, request: Request, response: Response, *, timeout: Timeout = None) -> None:
        await self.do(HttpMethod.PUT, request, response, timeout=timeout)

    async def patch(self, request: Request, response: Response, *, timeout: Timeout = None) -> None:
        await self.do(HttpMethod.PATCH, request, response, timeout=timeout)

    async def delete(self, request: Request, response: Response, *, timeout: Timeout = None) -> None:
        await self.do(HttpMethod.DELETE, request, response, timeout=timeout)

    async def do(
        self,
        method: HttpMethod | str,
        request: Request,
        response: Response,
        *,
        timeout: Timeout = None,
    ) -> None:
        """Run one request/response cycle, filling ``response`` in place.

        A status code of 400 or above is not an error here: unless decoding on
        error is enabled the raw body goes to ``response.set_body`` and the
        caller inspects the status code it received.

        Raises:
            RequestPathError: ``request.path()`` failed, nothing was sent.
            RequestEncodeError: ``request.encode()`` failed, nothing was sent.
            HTTPRequestError: the request could not be built or sent, or timed out,
                or ``method`` is not one of the supported verbs.
            NoContentTypeError: the response content type does not match
                ``response.accept_content_type()``.
            ResponseDecodeError: decoding or streaming the body failed.
        """
        try:
            method = HttpMethod(method.upper())
        except ValueError as e:
            raise HTTPRequestError(e) from e

        token = trace_id_var.set(trace_id_generator()) if trace_id_var.get() is None else None
        try:
            await self._do(method, request, response, timeout)
        finally:
            if token is not None:
                trace_id_var.reset(token)

    async def _do(
        self,
        method: HttpMethod,
        request: Request,
        response: Response,
        timeout: Timeout,
    ) -> None:
        try:
            path = request.path()
        except Exception as e:
            logger.debug(f"request path failed: {e}")
            raise RequestPathError(e) from e

        try:
            content = request.encode()
        except Exception as e:
            logger.debug(f"request encode failed: {e}")
            raise RequestEncodeError(e) from e

        # no body is sent as None so the transport omits Content-Length framing
        if isinstance(content, (bytes, str)) and not content:
            content = None

        url = self._endpoint + path
        client = await self._ensure_client()

        headers = {}
        content_type = request.content_type()
        if content_type:
            headers["Content-Type"] = content_type

        build_kwargs: dict[str, Any] = {}
        if timeout is not None:
            build_kwargs["timeout"] = timeout

        try:
            http_request = client.build_request(
                method.value, url, content=content, headers=headers, **build_kwargs
            )
        except (httpx.InvalidURL, httpx.HTTPError, TypeError, ValueError) as e:
            logger.debug(f"building {method} {url} failed: {e}")
            raise HTTPRequestError(e) from e

        if self._request_modifier is not None:
            http_request = self._request_modifier(http_request)

        logger.debug(f"-> {http_request.method} {http_request.url}")
        start_time = time.time()

        try:
            http_response = await client.send(http_request, stream=True)
        except httpx.HTTPError as e:
            logger.debug(f"{http_request.method} {http_request.url} failed: {e}")
            raise HTTPRequestError(e) from e

        try:
            latency_ms = int((time.time() - start_time) * 1000)
            logger.debug(f"<- {http_response.status_code} ({latency_ms}ms)")
            await self._handle_response(http_response, response)
        finally:
            await http_response.aclose()

    async def _handle_response(self, http_response: httpx.Response, response: Response) -> None:
        response.set_headers(_copy_headers(http_response.headers))
        response.set_status_code(http_response.status_code)

        body = Body(http_response)

        if http_response.status_code >= 400 and not self._force_decode_on_error:
            await response.set_body(body)
            return

        accept = response.accept_content_type()
        if not accept:
            await response.set_body(body)
            return

        content_types = http_response.headers.get_list("Content-Type")
        match_content_type(accept, content_types[0] if content_types else None)

        callback = response.stream_callback() if isinstance(response, Streamable) else None
        try:
            if callback is not None:
                await stream(callback, body, self._max_stream_buffer_size)
            else:
                await response.decode(body)
        except Exception as e:
            logger.debug(f"response decode failed: {e}")
            raise ResponseDecodeError(e) from e


def _copy_headers(headers: httpx.Headers) -> Headers:
    copied: Headers = {}
    for raw_name, raw_value in headers.raw:
        name = raw_name.decode(headers.encoding)
        copied.setdefault(name, []).append(raw_value.decode(headers.encoding))
    return copied
