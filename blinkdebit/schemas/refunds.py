from datetime import datetime
from enum import Enum
from typing import Annotated, Literal, Optional, Union
from uuid import UUID

from pydantic import BaseModel, Field

from .common import Amount, Pcr


# ====== REQUESTS ======

class FullRefundRequest(BaseModel):
    type: Literal["full_refund"] = "full_refund"
    payment_id: Optional[UUID] = None
    pcr: Optional[Pcr] = None
    consent_redirect: Optional[str] = None
    model_config = {"frozen": True}


class PartialRefundRequest(BaseModel):
    type: Literal["partial_refund"] = "partial_refund"
    payment_id: Optional[UUID] = None
    pcr: Optional[Pcr] = None
    amount: Optional[Amount] = None
    consent_redirect: Optional[str] = None
    model_config = {"frozen": True}


class AccountNumberRefundRequest(BaseModel):
    type: Literal["account_number"] = "account_number"
    payment_id: Optional[UUID] = None
    model_config = {"frozen": True}


RefundDetail = Annotated[
    Union[FullRefundRequest, PartialRefundRequest, AccountNumberRefundRequest],
    Field(discriminator="type"),
]


# ====== RESPONSES ======

class RefundStatus(str, Enum):
    FAILED = "Failed"
    PROCESSING = "Processing"
    COMPLETED = "Completed"


class RefundResponse(BaseModel):
    refund_id: UUID
    model_config = {"extra": "allow"}


class Refund(BaseModel):
    refund_id: UUID
    status: RefundStatus
    creation_timestamp: Optional[datetime] = None
    status_updated_timestamp: Optional[datetime] = None
    account_number: Optional[str] = None
    detail: Optional[RefundDetail] = None
    model_config = {"extra": "allow"}
