import asyncio
import logging
import uuid
from typing import Any, Dict, Iterator, Optional, Type, Union

from pydantic import BaseModel

from ..auth import TokenSupplier
from ..constants import (
    AUTHORIZATION,
    BEARER,
    CORRELATION_ID,
    CUSTOMER_IP,
    CUSTOMER_USER_AGENT,
    IDEMPOTENCY_KEY,
    REQUEST_ID,
)
from ..exceptions import BlinkServiceError
from ..responses import Failure, Outcome, classify, classify_stream
from ..schemas.common import RequestHeaders
from ..settings import Settings
from ..transport import TRANSPORT_ERRORS, Transport, TransportResponse
from ..utils.http import retry_policy

logger = logging.getLogger(__name__)

HeadersArg = Union[RequestHeaders, str, None]


def resolve_headers(request_headers: HeadersArg) -> RequestHeaders:
    """Accepts a bare request ID or a RequestHeaders; fills in a generated request ID."""
    if isinstance(request_headers, str):
        request_headers = RequestHeaders(request_id=request_headers)
    elif request_headers is None:
        request_headers = RequestHeaders()
    if not request_headers.request_id:
        request_headers = request_headers.model_copy(update={"request_id": str(uuid.uuid4())})
    return request_headers


def to_body(request: BaseModel) -> Dict[str, Any]:
    return request.model_dump(mode="json", exclude_none=True)


class BaseApiClient:
    """
    Common plumbing for the resource clients.

    Requests are validated by the caller before anything here runs. Each call
    acquires a bearer token, sends through the shared transport and hands the
    response to the classifier; failures are logged with the request ID and
    raised as their typed exception.
    """

    def __init__(self, transport: Transport, token_supplier: TokenSupplier, settings: Settings):
        self._transport = transport
        self._token_supplier = token_supplier
        self._settings = settings

        if settings.RETRY_ENABLED:
            self._call_with_retry = retry_policy(
                max_attempts=settings.RETRY_MAX_ATTEMPTS,
                min_wait=settings.RETRY_MIN_WAIT_SEC,
                max_wait=settings.RETRY_MAX_WAIT_SEC,
            )(self._call)
        else:
            self._call_with_retry = self._call

    # ---- headers ----
    def _outbound_headers(self, headers: RequestHeaders, idempotent: bool = False) -> Dict[str, str]:
        out = {REQUEST_ID: headers.request_id}
        if headers.customer_ip:
            out[CUSTOMER_IP] = headers.customer_ip
        if headers.customer_user_agent:
            out[CUSTOMER_USER_AGENT] = headers.customer_user_agent
        if idempotent:
            # one key per logical call, shared by its retries
            out[IDEMPOTENCY_KEY] = str(uuid.uuid4())
        return out

    async def _bearer(self, request_id: str) -> str:
        try:
            token = await self._token_supplier.acquire_token(request_id)
        except BlinkServiceError:
            raise
        except Exception as e:
            raise BlinkServiceError(f"Unable to acquire access token: {e}", correlation_id=request_id) from e
        return BEARER + token

    # ---- exchange ----
    async def _exchange(
        self, method: str, path: str, headers: Dict[str, str], body: Optional[Any] = None
    ) -> tuple[Optional[TransportResponse], Optional[BaseException]]:
        request_id = headers[REQUEST_ID]
        headers = {**headers, AUTHORIZATION: await self._bearer(request_id)}
        logger.debug("%s | %s %s", request_id, method, path)
        try:
            resp = await self._transport.send(method, path, headers, body)
        except TRANSPORT_ERRORS as e:
            return None, e
        except asyncio.CancelledError as e:
            outcome = classify(None, transport_error=e, correlation_id=request_id)
            self._log_failure(method, path, outcome, None)
            raise
        return resp, None

    def _log_failure(self, method: str, path: str, outcome: Failure, resp: Optional[TransportResponse]) -> None:
        server_correlation = resp.headers.get(CORRELATION_ID) if resp is not None else None
        log = logger.warning if outcome.retryable else logger.error
        log(
            "%s | %s %s failed: status=%s kind=%s retryable=%s correlation=%s message=%s",
            outcome.correlation_id,
            method,
            path,
            outcome.status_code,
            outcome.kind.value,
            outcome.retryable,
            server_correlation,
            outcome.message,
        )

    def _unwrap(self, method: str, path: str, outcome: Outcome, resp: Optional[TransportResponse]) -> Any:
        if isinstance(outcome, Failure):
            self._log_failure(method, path, outcome, resp)
            raise outcome.to_exception()
        return outcome.value

    async def _call(
        self,
        method: str,
        path: str,
        headers: Dict[str, str],
        body: Optional[Any] = None,
        response_model: Optional[Type[BaseModel]] = None,
    ) -> Any:
        resp, error = await self._exchange(method, path, headers, body)
        outcome = classify(
            resp.status_code if resp is not None else None,
            resp.content if resp is not None else None,
            error,
            response_model=response_model,
            correlation_id=headers[REQUEST_ID],
        )
        return self._unwrap(method, path, outcome, resp)

    async def _get(self, path: str, headers: RequestHeaders, response_model: Type[BaseModel]) -> Any:
        return await self._call("GET", path, self._outbound_headers(headers), response_model=response_model)

    async def _post(
        self, path: str, request: BaseModel, headers: RequestHeaders, response_model: Type[BaseModel]
    ) -> Any:
        return await self._call_with_retry(
            "POST",
            path,
            self._outbound_headers(headers, idempotent=True),
            to_body(request),
            response_model,
        )

    async def _delete(self, path: str, headers: RequestHeaders) -> None:
        await self._call_with_retry("DELETE", path, self._outbound_headers(headers))

    async def _get_stream(
        self, path: str, headers: RequestHeaders, item_model: Type[BaseModel]
    ) -> Iterator[Any]:
        """GET a JSON array; returns a lazy iterator that raises at the first failing element."""
        out = self._outbound_headers(headers)
        resp, error = await self._exchange("GET", path, out)
        outcomes = classify_stream(
            resp.status_code if resp is not None else None,
            resp.content if resp is not None else None,
            error,
            item_model=item_model,
            correlation_id=out[REQUEST_ID],
        )
        return (self._unwrap("GET", path, outcome, resp) for outcome in outcomes)
