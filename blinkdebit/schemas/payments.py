from datetime import datetime
from enum import Enum
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from .common import Amount, Pcr


# ====== REQUESTS ======

class EnduringPaymentRequest(BaseModel):
    pcr: Optional[Pcr] = None
    amount: Optional[Amount] = None
    model_config = {"frozen": True}


class PaymentRequest(BaseModel):
    consent_id: Optional[UUID] = None
    # single consent payments may restate the consented PCR/amount
    pcr: Optional[Pcr] = None
    amount: Optional[Amount] = None
    enduring_payment: Optional[EnduringPaymentRequest] = None
    # Westpac only
    account_reference_id: Optional[UUID] = None
    model_config = {"frozen": True}


# ====== RESPONSES ======

class PaymentStatus(str, Enum):
    PENDING = "Pending"
    ACCEPTED_SETTLEMENT_IN_PROCESS = "AcceptedSettlementInProcess"
    ACCEPTED_SETTLEMENT_COMPLETED = "AcceptedSettlementCompleted"
    REJECTED = "Rejected"


class PaymentResponse(BaseModel):
    payment_id: UUID
    model_config = {"extra": "allow"}


class Payment(BaseModel):
    payment_id: UUID
    type: Optional[str] = None
    status: PaymentStatus
    accepted_reason: Optional[str] = None
    creation_timestamp: Optional[datetime] = None
    status_updated_timestamp: Optional[datetime] = None
    detail: Optional[PaymentRequest] = None
    refunds: List[dict] = []
    model_config = {"extra": "allow"}
