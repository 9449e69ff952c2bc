from typing import Optional, Union
from uuid import UUID

from ..constants import REFUNDS_PATH
from ..schemas.refunds import (
    AccountNumberRefundRequest,
    FullRefundRequest,
    PartialRefundRequest,
    Refund,
    RefundResponse,
)
from ..validation.validators import validate_id, validate_refund
from .base import BaseApiClient, HeadersArg, resolve_headers

RefundRequest = Union[FullRefundRequest, PartialRefundRequest, AccountNumberRefundRequest]


class RefundsApiClient(BaseApiClient):

    async def create_refund(
        self, request: Optional[RefundRequest], request_headers: HeadersArg = None
    ) -> RefundResponse:
        validate_refund(request)
        return await self._post(REFUNDS_PATH, request, resolve_headers(request_headers), RefundResponse)

    async def get_refund(self, refund_id: Optional[UUID], request_headers: HeadersArg = None) -> Refund:
        validate_id(refund_id, "Refund")
        return await self._get(f"{REFUNDS_PATH}/{refund_id}", resolve_headers(request_headers), Refund)
