from datetime import datetime
from enum import Enum
from typing import Annotated, List, Literal, Optional, Union
from uuid import UUID

from pydantic import BaseModel, Field

from .common import Amount, Pcr, Period
from .flows import AuthFlow
from .payments import Payment


# ====== REQUESTS ======

class SingleConsentRequest(BaseModel):
    type: Literal["single"] = "single"
    flow: Optional[AuthFlow] = None
    pcr: Optional[Pcr] = None
    amount: Optional[Amount] = None
    hashed_customer_identifier: Optional[str] = None
    model_config = {"frozen": True}


class EnduringConsentRequest(BaseModel):
    type: Literal["enduring"] = "enduring"
    flow: Optional[AuthFlow] = None
    period: Optional[Period] = None
    from_timestamp: Optional[datetime] = None
    expiry_timestamp: Optional[datetime] = None
    maximum_amount_period: Optional[Amount] = None
    maximum_amount_payment: Optional[Amount] = None
    hashed_customer_identifier: Optional[str] = None
    model_config = {"frozen": True}


ConsentDetail = Annotated[Union[SingleConsentRequest, EnduringConsentRequest], Field(discriminator="type")]


# ====== RESPONSES ======

class ConsentStatus(str, Enum):
    GATEWAY_AWAITING_SUBMISSION = "GatewayAwaitingSubmission"
    GATEWAY_TIMEOUT = "GatewayTimeout"
    AWAITING_AUTHORISATION = "AwaitingAuthorisation"
    AUTHORISED = "Authorised"
    CONSUMED = "Consumed"
    REJECTED = "Rejected"
    REVOKED = "Revoked"


class CreateConsentResponse(BaseModel):
    consent_id: UUID
    redirect_uri: Optional[str] = None
    model_config = {"extra": "allow"}


class Consent(BaseModel):
    consent_id: UUID
    status: ConsentStatus
    creation_timestamp: Optional[datetime] = None
    status_updated_timestamp: Optional[datetime] = None
    detail: Optional[ConsentDetail] = None
    payments: List[Payment] = []
    refunds: List[dict] = []
    model_config = {"extra": "allow"}
