import asyncio
import logging
import time
from typing import Callable, Optional, Protocol

import jwt

from .constants import REQUEST_ID, TOKEN_PATH
from .exceptions import BlinkInvalidValueError
from .responses import Failure, classify
from .schemas.token import AccessTokenRequest, AccessTokenResponse
from .transport import TRANSPORT_ERRORS, Transport

logger = logging.getLogger(__name__)


class TokenSupplier(Protocol):
    async def acquire_token(self, correlation_id: str) -> str:
        ...


class OAuthTokenSupplier:
    """
    Client-credentials token supplier.

    The token is cached and reused until it is within ``expiry_skew_sec`` of
    the ``exp`` claim of the JWT (or of ``expires_in`` when the token can't be
    decoded). Concurrent callers share a single refresh.
    """

    def __init__(
        self,
        transport: Transport,
        client_id: str,
        client_secret: str,
        expiry_skew_sec: int = 60,
        clock: Callable[[], float] = time.time,
    ):
        self._transport = transport
        self._client_id = client_id
        self._client_secret = client_secret
        self._expiry_skew_sec = expiry_skew_sec
        self._clock = clock
        self._lock = asyncio.Lock()
        self._token: Optional[str] = None
        self._expires_at: Optional[float] = None

    def _is_fresh(self) -> bool:
        if not self._token or self._expires_at is None:
            return False
        return self._clock() < self._expires_at - self._expiry_skew_sec

    def _expiry(self, token: str, expires_in: Optional[int]) -> Optional[float]:
        try:
            claims = jwt.decode(token, options={"verify_signature": False})
        except jwt.PyJWTError:
            claims = {}
        exp = claims.get("exp")
        if exp is not None:
            return float(exp)
        if expires_in is not None:
            return self._clock() + expires_in
        return None

    async def acquire_token(self, correlation_id: str) -> str:
        async with self._lock:
            if self._is_fresh():
                return self._token
            token = await self._fetch(correlation_id)
            logger.debug("%s | access token refreshed", correlation_id)
            return token

    async def _fetch(self, correlation_id: str) -> str:
        if not self._client_id or not self._client_secret:
            raise BlinkInvalidValueError("Client ID and client secret must not be blank")

        body = AccessTokenRequest(client_id=self._client_id, client_secret=self._client_secret)
        try:
            resp = await self._transport.send(
                "POST", TOKEN_PATH, {REQUEST_ID: correlation_id}, body=body.model_dump()
            )
        except TRANSPORT_ERRORS as e:
            outcome = classify(None, transport_error=e, correlation_id=correlation_id)
        else:
            outcome = classify(
                resp.status_code,
                resp.content,
                response_model=AccessTokenResponse,
                correlation_id=correlation_id,
            )

        if isinstance(outcome, Failure):
            logger.error("%s | access token request failed: %s", correlation_id, outcome.message)
            raise outcome.to_exception()

        self._token = outcome.value.access_token
        self._expires_at = self._expiry(self._token, outcome.value.expires_in)
        return self._token
