from dataclasses import dataclass, field
from urllib.parse import urlparse, urlunparse

import httpx

from configs import restclient_config


@dataclass
class PoolLimits:
    max_connections: int = field(default_factory=lambda: restclient_config.HTTP_MAX_CONNECTIONS)
    max_keepalive: int = field(
        default_factory=lambda: restclient_config.HTTP_MAX_KEEPALIVE_CONNECTIONS
    )
    keepalive_expiry: float = field(default_factory=lambda: restclient_config.HTTP_KEEPALIVE_EXPIRY)

    def to_httpx_limits(self) -> httpx.Limits:
        return httpx.Limits(
            max_connections=self.max_connections,
            max_keepalive_connections=self.max_keepalive,
            keepalive_expiry=self.keepalive_expiry,
        )


@dataclass
class ProxyConfig:
    url: str
    auth: tuple[str, str] | None = None

    @classmethod
    def from_config(cls) -> "ProxyConfig | None":
        if not restclient_config.HTTP_PROXY_URL:
            return None
        return cls(url=restclient_config.HTTP_PROXY_URL)

    def to_httpx_proxy(self) -> str:
        if not self.auth:
            return self.url
        parsed = urlparse(self.url)
        netloc = f"{self.auth[0]}:{self.auth[1]}@{parsed.hostname}"
        if parsed.port:
            netloc += f":{parsed.port}"
        return urlunparse(parsed._replace(netloc=netloc))


def build_async_client(
    pool_limits: PoolLimits | None = None,
    proxy: str | ProxyConfig | None = None,
    timeout: float | httpx.Timeout | None = None,
) -> httpx.AsyncClient:
    """Create the transport used when the caller does not bring its own."""
    if proxy is None:
        proxy = ProxyConfig.from_config()
    if isinstance(proxy, ProxyConfig):
        proxy = proxy.to_httpx_proxy()
    return httpx.AsyncClient(
        limits=(pool_limits or PoolLimits()).to_httpx_limits(),
        proxy=proxy,
        timeout=timeout if timeout is not None else restclient_config.HTTP_DEFAULT_TIMEOUT,
    )
