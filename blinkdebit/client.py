"""
Blink Debit client facade.

Builds the transport, token supplier and every resource client once, and adds
the await_* helpers that poll a consent or payment until it settles.

Example:
    async with BlinkDebitClient() as blink:
        created = await blink.single_consents.create_single_consent(request)
        consent = await blink.await_authorised_single_consent(created.consent_id, 300)
"""

import logging
from typing import Any, Awaitable, Callable, Optional
from uuid import UUID

from tenacity import AsyncRetrying, retry_if_exception, retry_if_result, stop_after_delay, wait_fixed

from .auth import OAuthTokenSupplier, TokenSupplier
from .clients.consents import EnduringConsentsApiClient, SingleConsentsApiClient
from .clients.meta import MetaApiClient
from .clients.payments import PaymentsApiClient
from .clients.quick_payments import QuickPaymentsApiClient
from .clients.refunds import RefundsApiClient
from .exceptions import (
    BlinkConsentRejectedError,
    BlinkConsentTimeoutError,
    BlinkPaymentRejectedError,
    BlinkPaymentTimeoutError,
)
from .schemas.consents import Consent, ConsentStatus
from .schemas.payments import Payment, PaymentStatus
from .schemas.quick_payments import QuickPaymentResponse
from .settings import Settings
from .settings import settings as default_settings
from .transport import HttpxTransport, Transport
from .utils.http import is_retryable
from .utils.logs import configure_logging

logger = logging.getLogger(__name__)

_CONSENT_DONE = {ConsentStatus.AUTHORISED, ConsentStatus.CONSUMED}
_CONSENT_REJECTED = {ConsentStatus.REJECTED, ConsentStatus.REVOKED}


class BlinkDebitClient:

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[Transport] = None,
        token_supplier: Optional[TokenSupplier] = None,
    ):
        self.settings = settings or default_settings
        configure_logging(self.settings)

        self.transport = transport or HttpxTransport.from_settings(self.settings)
        self.token_supplier = token_supplier or OAuthTokenSupplier(
            self.transport,
            self.settings.CLIENT_ID,
            self.settings.CLIENT_SECRET,
            expiry_skew_sec=self.settings.TOKEN_EXPIRY_SKEW_SEC,
        )

        deps = (self.transport, self.token_supplier, self.settings)
        self.single_consents = SingleConsentsApiClient(*deps)
        self.enduring_consents = EnduringConsentsApiClient(*deps)
        self.quick_payments = QuickPaymentsApiClient(*deps)
        self.payments = PaymentsApiClient(*deps)
        self.refunds = RefundsApiClient(*deps)
        self.meta = MetaApiClient(*deps)

    async def __aenter__(self) -> "BlinkDebitClient":
        return self

    async def __aexit__(self, *args) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.transport.aclose()

    # ---- polling ----
    async def _poll(self, check: Callable[[], Awaitable[Any]], is_done: Callable[[Any], bool], max_wait_seconds: float):
        """Call ``check`` until ``is_done`` holds; None if it never did within ``max_wait_seconds``."""
        retrying = AsyncRetrying(
            stop=stop_after_delay(max_wait_seconds),
            wait=wait_fixed(self.settings.AWAIT_POLL_INTERVAL_SEC),
            retry=retry_if_result(lambda r: not is_done(r)) | retry_if_exception(is_retryable),
            retry_error_callback=lambda state: None,
        )
        return await retrying(check)

    async def _await_consent(
        self, fetch: Callable[[UUID], Awaitable[Consent]], consent_id: UUID, label: str, max_wait_seconds: float
    ) -> Consent:
        async def check() -> Consent:
            consent = await fetch(consent_id)
            logger.debug("The last status polled was: %s for %s ID: %s", consent.status.value, label, consent_id)
            if consent.status in _CONSENT_REJECTED:
                raise BlinkConsentRejectedError(f"{label} [{consent_id}] has been rejected or revoked")
            if consent.status == ConsentStatus.GATEWAY_TIMEOUT:
                raise BlinkConsentTimeoutError(f"Gateway timed out for {label.lower()} [{consent_id}]")
            return consent

        consent = await self._poll(check, lambda c: c.status in _CONSENT_DONE, max_wait_seconds)
        if consent is None:
            raise BlinkConsentTimeoutError()
        return consent

    async def await_authorised_single_consent(self, consent_id: UUID, max_wait_seconds: float) -> Consent:
        return await self._await_consent(
            self.single_consents.get_single_consent, consent_id, "Single consent", max_wait_seconds
        )

    async def await_authorised_enduring_consent(self, consent_id: UUID, max_wait_seconds: float) -> Consent:
        return await self._await_consent(
            self.enduring_consents.get_enduring_consent, consent_id, "Enduring consent", max_wait_seconds
        )

    async def await_successful_quick_payment(
        self, quick_payment_id: UUID, max_wait_seconds: float
    ) -> QuickPaymentResponse:
        async def check() -> QuickPaymentResponse:
            qp = await self.quick_payments.get_quick_payment(quick_payment_id)
            status = qp.consent.status
            logger.debug("The last status polled was: %s for Quick payment ID: %s", status.value, quick_payment_id)
            if status in _CONSENT_REJECTED:
                raise BlinkConsentRejectedError(f"Quick payment [{quick_payment_id}] has been rejected or revoked")
            if status == ConsentStatus.GATEWAY_TIMEOUT:
                raise BlinkConsentTimeoutError(f"Gateway timed out for quick payment [{quick_payment_id}]")
            return qp

        qp = await self._poll(check, lambda r: r.consent.status in _CONSENT_DONE, max_wait_seconds)
        if qp is None:
            raise BlinkConsentTimeoutError()
        return qp

    async def await_successful_payment(self, payment_id: UUID, max_wait_seconds: float) -> Payment:
        async def check() -> Payment:
            payment = await self.payments.get_payment(payment_id)
            logger.debug("The last status polled was: %s for Payment ID: %s", payment.status.value, payment_id)
            if payment.status == PaymentStatus.REJECTED:
                raise BlinkPaymentRejectedError(f"Payment [{payment_id}] has been rejected")
            return payment

        payment = await self._poll(
            check, lambda p: p.status == PaymentStatus.ACCEPTED_SETTLEMENT_COMPLETED, max_wait_seconds
        )
        if payment is None:
            raise BlinkPaymentTimeoutError()
        return payment
