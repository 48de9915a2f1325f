"""Pytest 配置文件"""

import logging
from collections.abc import Callable

import httpx
import pytest

ENDPOINT = "https://jsonplaceholder.typicode.com"

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def endpoint() -> str:
    return ENDPOINT


@pytest.fixture
def mock_http_client() -> Callable[[Handler], httpx.AsyncClient]:
    """Build an httpx.AsyncClient whose transport answers with ``handler``."""

    def factory(handler: Handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return factory


@pytest.fixture
def restore_root_logging():
    """Undo handler changes made by logging bootstrap code under test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
