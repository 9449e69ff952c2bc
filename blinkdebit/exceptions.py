"""
Blink Debit error hierarchy.

Two disjoint families:
    - BlinkInvalidValueError: raised locally before any network call, never retried.
    - BlinkServiceError subclasses: one per ErrorKind, built from a classified
      HTTP exchange. ``retryable`` tells an outer retry policy whether the whole
      call may be attempted again.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    UNAUTHORISED = "unauthorised"
    FORBIDDEN = "forbidden"
    RESOURCE_NOT_FOUND = "resource_not_found"
    REQUEST_TIMEOUT = "request_timeout"
    RATE_LIMIT_EXCEEDED = "rate_limit_exceeded"
    NOT_IMPLEMENTED = "not_implemented"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"
    TRANSPORT_FAILURE = "transport_failure"
    SERVICE_ERROR = "service_error"


RETRYABLE_KINDS = frozenset({ErrorKind.REQUEST_TIMEOUT, ErrorKind.SERVER_ERROR, ErrorKind.TRANSPORT_FAILURE})


class BlinkServiceError(Exception):
    """
    Base exception for Blink Debit service calls.

    Attributes:
        kind: ErrorKind of the failure
        retryable: Whether the same call may be re-attempted
        status_code: HTTP status, None when no response was received
        code: Machine-readable error code from the error body, if any
        correlation_id: request-id sent with the failed call
    """

    kind = ErrorKind.SERVICE_ERROR
    default_message = "Service call to Blink Debit failed, please contact BlinkPay with the correlation ID"

    def __init__(
        self,
        message: str | None = None,
        *,
        status_code: int | None = None,
        code: str | None = None,
        correlation_id: str | None = None,
    ):
        self.message = message or self.default_message
        self.status_code = status_code
        self.code = code
        self.correlation_id = correlation_id
        super().__init__(self.message)

    @property
    def retryable(self) -> bool:
        return self.kind in RETRYABLE_KINDS


class BlinkInvalidValueError(BlinkServiceError):
    """Request failed pre-flight validation."""

    default_message = "Invalid value"


class BlinkUnauthorisedError(BlinkServiceError):
    kind = ErrorKind.UNAUTHORISED
    default_message = (
        "Unauthorised access to resource, check the JWT in Authorization HTTP request header "
        "with Bearer authentication scheme"
    )


class BlinkForbiddenError(BlinkServiceError):
    kind = ErrorKind.FORBIDDEN
    default_message = "Insufficient access right to resource, please contact BlinkPay"


class BlinkResourceNotFoundError(BlinkServiceError):
    kind = ErrorKind.RESOURCE_NOT_FOUND
    default_message = "Resource not found"


class BlinkRequestTimeoutError(BlinkServiceError):
    kind = ErrorKind.REQUEST_TIMEOUT
    default_message = "Request timed out"


class BlinkRateLimitExceededError(BlinkServiceError):
    kind = ErrorKind.RATE_LIMIT_EXCEEDED
    default_message = "Rate limit exceeded, please contact BlinkPay"


class BlinkNotImplementedError(BlinkServiceError):
    kind = ErrorKind.NOT_IMPLEMENTED
    default_message = "Service not yet implemented"


class BlinkClientError(BlinkServiceError):
    kind = ErrorKind.CLIENT_ERROR
    default_message = "Client request is invalid"


class BlinkInternalServerError(BlinkServiceError):
    kind = ErrorKind.SERVER_ERROR
    default_message = (
        "Internal server error occurred in Blink Debit, please contact BlinkPay with the correlation ID"
    )


class BlinkTransportError(BlinkServiceError):
    """No response was received (connection failure, timeout, cancellation)."""

    kind = ErrorKind.TRANSPORT_FAILURE
    default_message = "Service call to Blink Debit could not be completed"


# ---- await helpers ----

class BlinkConsentRejectedError(BlinkServiceError):
    default_message = "Consent was rejected by the customer"


class BlinkConsentTimeoutError(BlinkServiceError):
    default_message = "Consent timed out"


class BlinkPaymentRejectedError(BlinkServiceError):
    default_message = "Payment was rejected"


class BlinkPaymentTimeoutError(BlinkServiceError):
    default_message = "Payment timed out"


ERRORS_BY_KIND: dict[ErrorKind, type[BlinkServiceError]] = {
    ErrorKind.UNAUTHORISED: BlinkUnauthorisedError,
    ErrorKind.FORBIDDEN: BlinkForbiddenError,
    ErrorKind.RESOURCE_NOT_FOUND: BlinkResourceNotFoundError,
    ErrorKind.REQUEST_TIMEOUT: BlinkRequestTimeoutError,
    ErrorKind.RATE_LIMIT_EXCEEDED: BlinkRateLimitExceededError,
    ErrorKind.NOT_IMPLEMENTED: BlinkNotImplementedError,
    ErrorKind.CLIENT_ERROR: BlinkClientError,
    ErrorKind.SERVER_ERROR: BlinkInternalServerError,
    ErrorKind.TRANSPORT_FAILURE: BlinkTransportError,
    ErrorKind.SERVICE_ERROR: BlinkServiceError,
}
