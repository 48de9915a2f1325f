from collections.abc import Mapping

import httpx

from .types import RequestModifier


def headers_modifier(headers: Mapping[str, str] | None = None, **extra: str) -> RequestModifier:
    merged = {**(headers or {}), **extra}

    def modifier(request: httpx.Request) -> httpx.Request:
        for name, value in merged.items():
            request.headers[name] = value
        return request

    return modifier


def bearer_auth_modifier(token: str) -> RequestModifier:
    return headers_modifier({"Authorization": f"Bearer {token}"})


def timeout_modifier(timeout: float | httpx.Timeout) -> RequestModifier:
    if not isinstance(timeout, httpx.Timeout):
        timeout = httpx.Timeout(timeout)

    def modifier(request: httpx.Request) -> httpx.Request:
        request.extensions["timeout"] = timeout.as_dict()
        return request

    return modifier


def chain_modifiers(*modifiers: RequestModifier) -> RequestModifier:
    """Compose modifiers left to right so several fit in the client's single slot."""

    def modifier(request: httpx.Request) -> httpx.Request:
        for fn in modifiers:
            request = fn(request)
        return request

    return modifier
