"""
Pre-flight validation of consent, quick payment, payment and refund requests.

Run:
    pytest tests/test_validators.py -q
"""

import uuid
from datetime import datetime, timezone

import pytest

from blinkdebit.exceptions import BlinkInvalidValueError
from blinkdebit.schemas.common import Amount, Bank, Currency, IdentifierType, Pcr, Period
from blinkdebit.schemas.consents import EnduringConsentRequest, SingleConsentRequest
from blinkdebit.schemas.flows import (
    AuthFlow,
    DecoupledFlow,
    DecoupledFlowHint,
    GatewayFlow,
    RedirectFlow,
    RedirectFlowHint,
)
from blinkdebit.schemas.payments import EnduringPaymentRequest, PaymentRequest
from blinkdebit.schemas.quick_payments import QuickPaymentRequest
from blinkdebit.schemas.refunds import AccountNumberRefundRequest, FullRefundRequest, PartialRefundRequest
from blinkdebit.validation.validators import (
    Invalid,
    Valid,
    validate,
    validate_enduring_consent,
    validate_flow,
    validate_payment,
    validate_quick_payment,
    validate_refund,
    validate_single_consent,
    validate_westpac_payment,
)

PCR = Pcr(particulars="particulars", code="code", reference="reference")
AMOUNT = Amount(currency=Currency.NZD, total="1.25")
REDIRECT = AuthFlow(detail=RedirectFlow(bank=Bank.PNZ, redirect_uri="https://merchant/return"))


def _message(fn, request) -> str:
    with pytest.raises(BlinkInvalidValueError) as exc:
        fn(request)
    return exc.value.message


# ---- flows ----

@pytest.mark.parametrize(
    "flow, message",
    [
        (None, "Authorisation flow must not be null"),
        (AuthFlow(), "Authorisation flow detail must not be null"),
        (AuthFlow(detail=RedirectFlow(redirect_uri="https://x")), "Bank must not be null"),
        (AuthFlow(detail=RedirectFlow(bank=Bank.PNZ, redirect_uri=" ")), "Redirect URI must not be blank"),
        (AuthFlow(detail=DecoupledFlow()), "Bank must not be null"),
        (AuthFlow(detail=DecoupledFlow(bank=Bank.PNZ)), "Identifier type must not be null"),
        (
            AuthFlow(detail=DecoupledFlow(bank=Bank.PNZ, identifier_type=IdentifierType.PHONE_NUMBER)),
            "Identifier value must not be blank",
        ),
        (
            AuthFlow(
                detail=DecoupledFlow(
                    bank=Bank.PNZ, identifier_type=IdentifierType.PHONE_NUMBER, identifier_value="+64-259531933"
                )
            ),
            "Callback/webhook URL must not be blank",
        ),
        (AuthFlow(detail=GatewayFlow(redirect_uri="")), "Redirect URI must not be blank"),
        (AuthFlow(detail=GatewayFlow(redirect_uri="https://x")), "Flow hint must not be null"),
        (
            AuthFlow(detail=GatewayFlow(redirect_uri="https://x", flow_hint=RedirectFlowHint())),
            "Bank must not be null",
        ),
        (
            AuthFlow(detail=GatewayFlow(redirect_uri="https://x", flow_hint=DecoupledFlowHint(bank=Bank.PNZ))),
            "Identifier type must not be null",
        ),
        (
            AuthFlow(
                detail=GatewayFlow(
                    redirect_uri="https://x",
                    flow_hint=DecoupledFlowHint(bank=Bank.PNZ, identifier_type=IdentifierType.MOBILE_NUMBER),
                )
            ),
            "Identifier value must not be blank",
        ),
    ],
)
def test_flow_violations(flow, message):
    assert _message(validate_flow, flow) == message


def test_flow_hint_without_type_rejected():
    hint = RedirectFlowHint.model_construct(type=None, bank=Bank.PNZ)
    flow = AuthFlow.model_construct(detail=GatewayFlow.model_construct(type="gateway", redirect_uri="https://x", flow_hint=hint))
    assert _message(validate_flow, flow) == "Flow hint type must not be null"


@pytest.mark.parametrize(
    "detail",
    [
        RedirectFlow(bank=Bank.ANZ, redirect_uri="https://x"),
        DecoupledFlow(
            bank=Bank.BNZ,
            identifier_type=IdentifierType.PHONE_NUMBER,
            identifier_value="+64-259531933",
            callback_url="https://merchant/callback",
        ),
        GatewayFlow(redirect_uri="https://x", flow_hint=RedirectFlowHint(bank=Bank.PNZ)),
        GatewayFlow(
            redirect_uri="https://x",
            flow_hint=DecoupledFlowHint(
                bank=Bank.PNZ, identifier_type=IdentifierType.PHONE_NUMBER, identifier_value="+64-259531933"
            ),
        ),
    ],
)
def test_valid_flows(detail):
    validate_flow(AuthFlow(detail=detail))


def test_flow_detail_parsed_from_wire_type():
    flow = AuthFlow.model_validate({"detail": {"type": "decoupled", "bank": "ASB", "identifier_type": "email"}})
    assert isinstance(flow.detail, DecoupledFlow)
    assert _message(validate_flow, flow) == "Identifier value must not be blank"


# ---- single consent / quick payment ----

def test_single_consent_valid():
    assert validate(SingleConsentRequest(flow=REDIRECT, pcr=PCR, amount=AMOUNT)) == Valid()


def test_single_consent_null_request():
    assert _message(validate_single_consent, None) == "Single consent request must not be null"
    assert validate(None, validate_single_consent) == Invalid("Single consent request must not be null")


def test_single_consent_reports_earliest_violation():
    # blank redirect URI, missing PCR and missing amount: the flow is checked first
    request = SingleConsentRequest(
        flow=AuthFlow(detail=RedirectFlow(bank=Bank.PNZ, redirect_uri="")), pcr=None, amount=None
    )
    assert validate(request) == Invalid("Redirect URI must not be blank")

    request = SingleConsentRequest(flow=REDIRECT, pcr=None, amount=None)
    assert validate(request) == Invalid("PCR must not be null")

    request = SingleConsentRequest(flow=REDIRECT, pcr=PCR, amount=None)
    assert validate(request) == Invalid("Amount must not be null")


def test_quick_payment_messages():
    assert _message(validate_quick_payment, None) == "Quick payment request must not be null"
    assert _message(validate_quick_payment, QuickPaymentRequest()) == "Authorisation flow must not be null"
    request = QuickPaymentRequest(flow=REDIRECT, pcr=PCR, amount=Amount(currency=Currency.NZD, total="abc.de"))
    assert _message(validate_quick_payment, request) == "Total is not a valid amount"
    assert validate(QuickPaymentRequest(flow=REDIRECT, pcr=PCR, amount=AMOUNT)).is_valid


def test_gateway_flow_without_hint_rejected():
    gateway = AuthFlow(detail=GatewayFlow(redirect_uri="https://merchant/return"))
    assert validate(QuickPaymentRequest(flow=gateway, pcr=PCR, amount=AMOUNT)) == Invalid("Flow hint must not be null")
    assert _message(validate_enduring_consent, _enduring(flow=gateway)) == "Flow hint must not be null"


# ---- enduring consent ----

def _enduring(**overrides) -> EnduringConsentRequest:
    fields = dict(
        flow=REDIRECT,
        period=Period.MONTHLY,
        from_timestamp=datetime(2026, 1, 1, tzinfo=timezone.utc),
        maximum_amount_period=AMOUNT,
    )
    fields.update(overrides)
    return EnduringConsentRequest(**fields)


def test_enduring_consent_valid():
    assert validate(_enduring()).is_valid


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"flow": None}, "Authorisation flow must not be null"),
        ({"period": None}, "Period must not be null"),
        ({"from_timestamp": None}, "Start date must not be null"),
        ({"maximum_amount_period": None}, "Maximum amount period must not be null"),
        ({"maximum_amount_period": Amount(currency=None, total="1.00")}, "Currency must not be null"),
        ({"maximum_amount_payment": Amount(currency=Currency.NZD, total="1.001")}, "Total is not a valid amount"),
        ({"period": None, "from_timestamp": None, "maximum_amount_period": None}, "Period must not be null"),
    ],
)
def test_enduring_consent_violations(overrides, message):
    assert _message(validate_enduring_consent, _enduring(**overrides)) == message


def test_enduring_consent_null_request():
    assert _message(validate_enduring_consent, None) == "Enduring consent request must not be null"


# ---- payments ----

def test_payment_messages():
    assert _message(validate_payment, None) == "Payment request must not be null"
    assert _message(validate_payment, PaymentRequest()) == "Consent ID must not be null"
    assert validate(PaymentRequest(consent_id=uuid.uuid4())).is_valid


def test_enduring_payment_checks_pcr_then_amount():
    consent_id = uuid.uuid4()
    request = PaymentRequest(consent_id=consent_id, enduring_payment=EnduringPaymentRequest())
    assert _message(validate_payment, request) == "PCR must not be null"

    request = PaymentRequest(consent_id=consent_id, enduring_payment=EnduringPaymentRequest(pcr=PCR))
    assert _message(validate_payment, request) == "Amount must not be null"

    request = PaymentRequest(consent_id=consent_id, enduring_payment=EnduringPaymentRequest(pcr=PCR, amount=AMOUNT))
    assert validate(request).is_valid


def test_single_payment_optional_pcr_checked_when_present():
    request = PaymentRequest(consent_id=uuid.uuid4(), pcr=Pcr(particulars=" "))
    assert _message(validate_payment, request) == "Particulars must have at least 1 character"


def test_westpac_payment_requires_account_reference():
    request = PaymentRequest(consent_id=uuid.uuid4())
    assert _message(validate_westpac_payment, request) == "Account reference ID must not be null"
    validate_westpac_payment(PaymentRequest(consent_id=uuid.uuid4(), account_reference_id=uuid.uuid4()))


# ---- refunds ----

def test_refund_payment_id_checked_before_pcr():
    assert _message(validate_refund, None) == "Refund request must not be null"
    assert _message(validate_refund, FullRefundRequest(pcr=None)) == "Payment ID must not be null"
    assert _message(validate_refund, PartialRefundRequest()) == "Payment ID must not be null"


def test_refund_variants():
    payment_id = uuid.uuid4()
    assert _message(validate_refund, FullRefundRequest(payment_id=payment_id)) == "PCR must not be null"
    assert _message(validate_refund, PartialRefundRequest(payment_id=payment_id, pcr=PCR)) == "Amount must not be null"
    assert validate(AccountNumberRefundRequest(payment_id=payment_id)).is_valid
    assert validate(FullRefundRequest(payment_id=payment_id, pcr=PCR)).is_valid
    assert validate(PartialRefundRequest(payment_id=payment_id, pcr=PCR, amount=AMOUNT)).is_valid


def test_validate_requires_known_request_type():
    with pytest.raises(TypeError):
        validate(object())
