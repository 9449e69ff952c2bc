from typing import Optional
from uuid import UUID

from ..constants import PAYMENTS_PATH
from ..schemas.payments import Payment, PaymentRequest, PaymentResponse
from ..validation.validators import validate_id, validate_payment, validate_westpac_payment
from .base import BaseApiClient, HeadersArg, resolve_headers


class PaymentsApiClient(BaseApiClient):
    """Payments against an authorised single or enduring consent."""

    async def create_payment(
        self, request: Optional[PaymentRequest], request_headers: HeadersArg = None
    ) -> PaymentResponse:
        validate_payment(request)
        return await self._post(PAYMENTS_PATH, request, resolve_headers(request_headers), PaymentResponse)

    async def create_westpac_payment(
        self, request: Optional[PaymentRequest], request_headers: HeadersArg = None
    ) -> PaymentResponse:
        # Westpac needs the account the payer picked when authorising the consent
        validate_westpac_payment(request)
        return await self._post(PAYMENTS_PATH, request, resolve_headers(request_headers), PaymentResponse)

    async def get_payment(self, payment_id: Optional[UUID], request_headers: HeadersArg = None) -> Payment:
        validate_id(payment_id, "Payment")
        return await self._get(f"{PAYMENTS_PATH}/{payment_id}", resolve_headers(request_headers), Payment)
