"""
HTTP response classification.

``classify`` turns one completed exchange (status code, raw body, transport
exception) into an Outcome: Success with the decoded payload or Failure with
an ErrorKind and a retryable flag. It never looks at the request that was sent
and never raises, so every resource client shares it unchanged.
"""

import json
from dataclasses import dataclass
from typing import Any, Iterator, Mapping, Optional, Type, Union

from pydantic import BaseModel

from .exceptions import ERRORS_BY_KIND, RETRYABLE_KINDS, BlinkServiceError, ErrorKind
from .schemas.common import ErrorResponse

Body = Union[bytes, str, Mapping[str, Any], BaseModel, None]

_KIND_BY_STATUS = {
    401: ErrorKind.UNAUTHORISED,
    403: ErrorKind.FORBIDDEN,
    404: ErrorKind.RESOURCE_NOT_FOUND,
    408: ErrorKind.REQUEST_TIMEOUT,
    # 422 maps to the generic service error
    422: ErrorKind.SERVICE_ERROR,
    429: ErrorKind.RATE_LIMIT_EXCEEDED,
    501: ErrorKind.NOT_IMPLEMENTED,
}


@dataclass(frozen=True)
class Success:
    value: Any = None


@dataclass(frozen=True)
class Failure:
    kind: ErrorKind
    message: str
    retryable: bool
    status_code: Optional[int] = None
    code: Optional[str] = None
    correlation_id: Optional[str] = None

    def to_exception(self) -> BlinkServiceError:
        error_cls = ERRORS_BY_KIND[self.kind]
        return error_cls(
            self.message,
            status_code=self.status_code,
            code=self.code,
            correlation_id=self.correlation_id,
        )


Outcome = Union[Success, Failure]


def kind_for_status(status_code: int) -> Optional[ErrorKind]:
    """ErrorKind for an error status, None for 2xx."""
    if 200 <= status_code < 300:
        return None
    if status_code in _KIND_BY_STATUS:
        return _KIND_BY_STATUS[status_code]
    if 400 <= status_code < 500:
        return ErrorKind.CLIENT_ERROR
    if 500 <= status_code < 600:
        return ErrorKind.SERVER_ERROR
    return ErrorKind.SERVICE_ERROR


def _is_empty(body: Body) -> bool:
    if body is None:
        return True
    if isinstance(body, (bytes, str)):
        return not body.strip()
    return False


def _decode(body: Body, model: Type[BaseModel]) -> BaseModel:
    if isinstance(body, model):
        return body
    if isinstance(body, (bytes, str)):
        return model.model_validate_json(body)
    if isinstance(body, BaseModel):
        return model.model_validate(body.model_dump())
    return model.model_validate(body)


def decode_error_body(body: Body) -> Optional[ErrorResponse]:
    if _is_empty(body):
        return None
    try:
        return _decode(body, ErrorResponse)
    except ValueError:
        return None


def _failure(
    kind: ErrorKind,
    message: Optional[str],
    status_code: Optional[int] = None,
    code: Optional[str] = None,
    correlation_id: Optional[str] = None,
) -> Failure:
    return Failure(
        kind=kind,
        message=message or ERRORS_BY_KIND[kind].default_message,
        retryable=kind in RETRYABLE_KINDS,
        status_code=status_code,
        code=code,
        correlation_id=correlation_id,
    )


def _undecodable(status_code: int, reason: str, correlation_id: Optional[str]) -> Failure:
    return _failure(
        ErrorKind.SERVICE_ERROR,
        f"Service call to Blink Debit failed with error: {reason}, "
        f"please contact BlinkPay with the correlation ID: {correlation_id}",
        status_code=status_code,
        correlation_id=correlation_id,
    )


def classify(
    status_code: Optional[int],
    body: Body = None,
    transport_error: Optional[BaseException] = None,
    *,
    response_model: Optional[Type[BaseModel]] = None,
    correlation_id: Optional[str] = None,
) -> Outcome:
    """
    Classify one HTTP exchange.

    Args:
        status_code: HTTP status, or None when no response was received
        body: Raw or already-decoded response body
        transport_error: Exception raised before a response arrived
        response_model: Expected 2xx payload; None for operations without a body
        correlation_id: request-id of the call, copied onto failures

    Returns:
        Success(value) or Failure(kind, message, retryable, ...)
    """
    if transport_error is not None or status_code is None:
        return _failure(
            ErrorKind.TRANSPORT_FAILURE,
            str(transport_error) if transport_error is not None else None,
            correlation_id=correlation_id,
        )

    kind = kind_for_status(status_code)
    if kind is None:
        if response_model is None:
            return Success(None)
        if _is_empty(body):
            return _undecodable(status_code, "empty response body", correlation_id)
        try:
            return Success(_decode(body, response_model))
        except ValueError as e:
            return _undecodable(status_code, f"invalid {response_model.__name__} body ({e.__class__.__name__})", correlation_id)

    error = decode_error_body(body)
    message = error.message if error else None
    code = error.code if error else None

    if kind == ErrorKind.SERVICE_ERROR and status_code != 422 and not message:
        message = (
            f"Service call to Blink Debit failed with error: unexpected status {status_code}, "
            f"please contact BlinkPay with the correlation ID: {correlation_id}"
        )

    return _failure(kind, message, status_code=status_code, code=code, correlation_id=correlation_id)


def classify_stream(
    status_code: Optional[int],
    body: Body = None,
    transport_error: Optional[BaseException] = None,
    *,
    item_model: Type[BaseModel],
    correlation_id: Optional[str] = None,
) -> Iterator[Outcome]:
    """
    Classify a list response element by element.

    Yields a Success per decoded element. The first element that can't be
    decoded yields a Failure and ends the stream; elements already yielded
    stand. An error status yields a single Failure.
    """
    if transport_error is not None or status_code is None or kind_for_status(status_code) is not None:
        yield classify(status_code, body, transport_error, correlation_id=correlation_id)
        return

    if _is_empty(body):
        yield _undecodable(status_code, "empty response body", correlation_id)
        return

    try:
        items = json.loads(body) if isinstance(body, (bytes, str)) else body
    except ValueError:
        yield _undecodable(status_code, "response body is not JSON", correlation_id)
        return

    if not isinstance(items, list):
        yield _undecodable(status_code, "expected a JSON array", correlation_id)
        return

    for index, item in enumerate(items):
        try:
            yield Success(_decode(item, item_model))
        except ValueError:
            yield _undecodable(status_code, f"invalid {item_model.__name__} at index {index}", correlation_id)
            return
