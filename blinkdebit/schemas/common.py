from enum import Enum
from typing import Optional

from pydantic import BaseModel


# ====== ENUMS ======

class Bank(str, Enum):
    ASB = "ASB"
    ANZ = "ANZ"
    BNZ = "BNZ"
    WESTPAC = "Westpac"
    KIWIBANK = "KiwiBank"
    PNZ = "PNZ"
    CYBERSOURCE = "Cybersource"


class IdentifierType(str, Enum):
    PHONE_NUMBER = "phone_number"
    MOBILE_NUMBER = "mobile_number"
    EMAIL = "email"
    BANKING_USERNAME = "banking_username"
    CONSENT_ID = "consent_id"


class Period(str, Enum):
    ANNUAL = "annual"
    DAILY = "daily"
    FORTNIGHTLY = "fortnightly"
    MONTHLY = "monthly"
    WEEKLY = "weekly"


class Currency(str, Enum):
    NZD = "NZD"


# ====== VALUE TYPES ======

class Amount(BaseModel):
    currency: Optional[Currency] = Currency.NZD
    total: Optional[str] = None
    model_config = {"frozen": True}


class Pcr(BaseModel):
    # Particulars/Code/Reference shown on the payer's and payee's statements
    particulars: Optional[str] = None
    code: Optional[str] = None
    reference: Optional[str] = None
    model_config = {"frozen": True}


# ====== ERROR BODY ======

class ErrorResponse(BaseModel):
    timestamp: Optional[str] = None
    status: Optional[int] = None
    error: Optional[str] = None
    message: Optional[str] = None
    path: Optional[str] = None
    code: Optional[str] = None
    model_config = {"extra": "allow"}


# ====== PER-CALL HEADERS ======

class RequestHeaders(BaseModel):
    request_id: Optional[str] = None
    customer_ip: Optional[str] = None
    customer_user_agent: Optional[str] = None
