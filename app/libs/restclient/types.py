from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

Headers = dict[str, list[str]]

StreamCallback = Callable[[bytes], Awaitable[None] | None]
RequestModifier = Callable[["httpx.Request"], "httpx.Request"]
