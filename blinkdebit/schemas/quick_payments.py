from typing import Literal, Optional
from uuid import UUID

from pydantic import BaseModel

from .common import Amount, Pcr
from .consents import Consent
from .flows import AuthFlow


class QuickPaymentRequest(BaseModel):
    type: Literal["single"] = "single"
    flow: Optional[AuthFlow] = None
    pcr: Optional[Pcr] = None
    amount: Optional[Amount] = None
    hashed_customer_identifier: Optional[str] = None
    model_config = {"frozen": True}


class CreateQuickPaymentResponse(BaseModel):
    quick_payment_id: UUID
    redirect_uri: Optional[str] = None
    model_config = {"extra": "allow"}


class QuickPaymentResponse(BaseModel):
    quick_payment_id: UUID
    consent: Consent
    model_config = {"extra": "allow"}
