from typing import Optional
from uuid import UUID

from ..constants import QUICK_PAYMENTS_PATH
from ..schemas.quick_payments import CreateQuickPaymentResponse, QuickPaymentRequest, QuickPaymentResponse
from ..validation.validators import validate_id, validate_quick_payment
from .base import BaseApiClient, HeadersArg, resolve_headers


class QuickPaymentsApiClient(BaseApiClient):
    """Single consent and its payment in one call."""

    async def create_quick_payment(
        self, request: Optional[QuickPaymentRequest], request_headers: HeadersArg = None
    ) -> CreateQuickPaymentResponse:
        validate_quick_payment(request)
        return await self._post(
            QUICK_PAYMENTS_PATH, request, resolve_headers(request_headers), CreateQuickPaymentResponse
        )

    async def get_quick_payment(
        self, quick_payment_id: Optional[UUID], request_headers: HeadersArg = None
    ) -> QuickPaymentResponse:
        validate_id(quick_payment_id, "Quick payment")
        return await self._get(
            f"{QUICK_PAYMENTS_PATH}/{quick_payment_id}", resolve_headers(request_headers), QuickPaymentResponse
        )

    async def revoke_quick_payment(self, quick_payment_id: Optional[UUID], request_headers: HeadersArg = None) -> None:
        validate_id(quick_payment_id, "Quick payment")
        await self._delete(f"{QUICK_PAYMENTS_PATH}/{quick_payment_id}", resolve_headers(request_headers))
