from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Protocol

import httpx

from .settings import Settings
from .utils.http import client

# raised by a transport when no response was received
TRANSPORT_ERRORS = (httpx.HTTPError, OSError)


@dataclass(frozen=True)
class TransportResponse:
    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    content: bytes = b""


class Transport(Protocol):
    async def send(
        self, method: str, path: str, headers: Dict[str, str], body: Optional[Any] = None
    ) -> TransportResponse:
        ...

    async def aclose(self) -> None:
        ...


class HttpxTransport:
    """Sends requests through one httpx.AsyncClient created up front and reused for every call."""

    def __init__(self, http_client: httpx.AsyncClient):
        self._client = http_client

    @classmethod
    def from_settings(
        cls, settings: Settings, transport: httpx.AsyncBaseTransport | None = None
    ) -> "HttpxTransport":
        return cls(client(settings, transport=transport))

    async def send(
        self, method: str, path: str, headers: Dict[str, str], body: Optional[Any] = None
    ) -> TransportResponse:
        resp = await self._client.request(method, path, headers=headers, json=body)
        return TransportResponse(status_code=resp.status_code, headers=resp.headers, content=resp.content)

    async def aclose(self) -> None:
        await self._client.aclose()
