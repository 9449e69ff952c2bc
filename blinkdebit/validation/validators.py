"""
Pre-flight request validation.

Each ``validate_*`` routine walks its request in a fixed order and raises
BlinkInvalidValueError with the first rule that fails. ``validate`` wraps a
routine and returns a ValidationResult instead of raising.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Union

from ..exceptions import BlinkInvalidValueError
from ..schemas.consents import EnduringConsentRequest, SingleConsentRequest
from ..schemas.flows import (
    AuthFlow,
    DecoupledFlow,
    DecoupledFlowHint,
    GatewayFlow,
    RedirectFlow,
    RedirectFlowHint,
)
from ..schemas.payments import PaymentRequest
from ..schemas.quick_payments import QuickPaymentRequest
from ..schemas.refunds import AccountNumberRefundRequest, FullRefundRequest, PartialRefundRequest
from .rules import require_not_blank, require_not_null, validate_amount, validate_pcr


@dataclass(frozen=True)
class Valid:
    @property
    def is_valid(self) -> bool:
        return True


@dataclass(frozen=True)
class Invalid:
    message: str

    @property
    def is_valid(self) -> bool:
        return False


ValidationResult = Union[Valid, Invalid]


# ---- flows ----

def _validate_redirect_flow(detail: RedirectFlow) -> None:
    require_not_null(detail.bank, "Bank must not be null")
    require_not_blank(detail.redirect_uri, "Redirect URI must not be blank")


def _validate_decoupled_flow(detail: DecoupledFlow) -> None:
    require_not_null(detail.bank, "Bank must not be null")
    require_not_null(detail.identifier_type, "Identifier type must not be null")
    require_not_blank(detail.identifier_value, "Identifier value must not be blank")
    require_not_blank(detail.callback_url, "Callback/webhook URL must not be blank")


def _validate_gateway_flow(detail: GatewayFlow) -> None:
    require_not_blank(detail.redirect_uri, "Redirect URI must not be blank")

    hint = detail.flow_hint
    require_not_null(hint, "Flow hint must not be null")
    require_not_null(hint.bank, "Bank must not be null")
    require_not_null(getattr(hint, "type", None), "Flow hint type must not be null")

    if isinstance(hint, DecoupledFlowHint):
        require_not_null(hint.identifier_type, "Identifier type must not be null")
        require_not_blank(hint.identifier_value, "Identifier value must not be blank")
    elif not isinstance(hint, RedirectFlowHint):
        raise BlinkInvalidValueError(f"Unknown flow hint type: {type(hint).__name__}")


def validate_flow(flow: Optional[AuthFlow]) -> None:
    require_not_null(flow, "Authorisation flow must not be null")

    detail = flow.detail
    require_not_null(detail, "Authorisation flow detail must not be null")

    if isinstance(detail, RedirectFlow):
        _validate_redirect_flow(detail)
    elif isinstance(detail, DecoupledFlow):
        _validate_decoupled_flow(detail)
    elif isinstance(detail, GatewayFlow):
        _validate_gateway_flow(detail)
    else:
        raise BlinkInvalidValueError(f"Unknown authorisation flow detail: {type(detail).__name__}")


# ---- operation families ----

def validate_single_consent(request: Optional[SingleConsentRequest]) -> None:
    require_not_null(request, "Single consent request must not be null")
    validate_flow(request.flow)
    validate_pcr(request.pcr)
    validate_amount(request.amount)


def validate_enduring_consent(request: Optional[EnduringConsentRequest]) -> None:
    require_not_null(request, "Enduring consent request must not be null")
    validate_flow(request.flow)
    require_not_null(request.period, "Period must not be null")
    require_not_null(request.from_timestamp, "Start date must not be null")
    validate_amount(request.maximum_amount_period, "Maximum amount period must not be null")
    if request.maximum_amount_payment is not None:
        validate_amount(request.maximum_amount_payment)


def validate_quick_payment(request: Optional[QuickPaymentRequest]) -> None:
    require_not_null(request, "Quick payment request must not be null")
    validate_flow(request.flow)
    validate_pcr(request.pcr)
    validate_amount(request.amount)


def validate_payment(request: Optional[PaymentRequest]) -> None:
    require_not_null(request, "Payment request must not be null")
    require_not_null(request.consent_id, "Consent ID must not be null")

    enduring = request.enduring_payment
    if enduring is not None:
        validate_pcr(enduring.pcr)
        validate_amount(enduring.amount)
        return

    if request.pcr is not None:
        validate_pcr(request.pcr)
    if request.amount is not None:
        validate_amount(request.amount)


def validate_westpac_payment(request: Optional[PaymentRequest]) -> None:
    require_not_null(request, "Payment request must not be null")
    require_not_null(request.consent_id, "Consent ID must not be null")
    require_not_null(request.account_reference_id, "Account reference ID must not be null")


def validate_refund(request: Union[FullRefundRequest, PartialRefundRequest, AccountNumberRefundRequest, None]) -> None:
    require_not_null(request, "Refund request must not be null")
    require_not_null(request.payment_id, "Payment ID must not be null")

    if isinstance(request, PartialRefundRequest):
        validate_pcr(request.pcr)
        validate_amount(request.amount)
    elif isinstance(request, FullRefundRequest):
        validate_pcr(request.pcr)
    elif not isinstance(request, AccountNumberRefundRequest):
        raise BlinkInvalidValueError(f"Unknown refund request: {type(request).__name__}")


def validate_id(value: Any, name: str) -> None:
    require_not_null(value, f"{name} ID must not be null")


VALIDATORS: Dict[type, Callable[[Any], None]] = {
    SingleConsentRequest: validate_single_consent,
    EnduringConsentRequest: validate_enduring_consent,
    QuickPaymentRequest: validate_quick_payment,
    PaymentRequest: validate_payment,
    FullRefundRequest: validate_refund,
    PartialRefundRequest: validate_refund,
    AccountNumberRefundRequest: validate_refund,
}


def validate(request: Any, validator: Optional[Callable[[Any], None]] = None) -> ValidationResult:
    """
    Run a validation routine and report the first violation instead of raising.

    The routine is looked up from the request type unless given explicitly;
    a null request needs an explicit routine since its family can't be inferred.
    """
    if validator is None:
        validator = VALIDATORS.get(type(request))
        if validator is None:
            raise TypeError(f"No validator registered for {type(request).__name__}")
    try:
        validator(request)
    except BlinkInvalidValueError as e:
        return Invalid(e.message)
    return Valid()
