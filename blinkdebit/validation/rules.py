"""Shared field rules for PCR and amounts. Each check raises BlinkInvalidValueError on failure."""

import re
from typing import Any, Optional

from ..exceptions import BlinkInvalidValueError
from ..schemas.common import Amount, Pcr

PCR_MAX_LENGTH = 12
PCR_CHARACTERS = "[a-zA-Z0-9- &#?:_/,.']"
_PCR_CHAR_RE = re.compile(r"[a-zA-Z0-9\- &#?:_/,.']*")

# up to 13 integer digits, at most 2 decimal places, no sign
_TOTAL_RE = re.compile(r"\d{1,13}(\.\d{1,2})?")


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def require_not_null(value: Any, message: str) -> None:
    if value is None:
        raise BlinkInvalidValueError(message)


def require_not_blank(value: Optional[str], message: str) -> None:
    if is_blank(value):
        raise BlinkInvalidValueError(message)


def pcr_field_is_valid(value: Optional[str], min_length: int = 0) -> bool:
    if value is None:
        return min_length == 0
    if not (min_length <= len(value) <= PCR_MAX_LENGTH):
        return False
    return _PCR_CHAR_RE.fullmatch(value) is not None


def is_valid_pcr(pcr: Pcr) -> bool:
    return (
        pcr_field_is_valid(pcr.particulars, min_length=1)
        and not is_blank(pcr.particulars)
        and pcr_field_is_valid(pcr.code)
        and pcr_field_is_valid(pcr.reference)
    )


def is_valid_total(total: Optional[str]) -> bool:
    if is_blank(total):
        return False
    return _TOTAL_RE.fullmatch(total) is not None


def validate_pcr(pcr: Optional[Pcr]) -> None:
    require_not_null(pcr, "PCR must not be null")

    if is_blank(pcr.particulars):
        raise BlinkInvalidValueError("Particulars must have at least 1 character")

    if any(len(v or "") > PCR_MAX_LENGTH for v in (pcr.particulars, pcr.code, pcr.reference)):
        raise BlinkInvalidValueError(f"PCR must not exceed {PCR_MAX_LENGTH} characters")

    if not pcr_field_is_valid(pcr.particulars, min_length=1):
        raise BlinkInvalidValueError(f"Particulars must match {PCR_CHARACTERS}{{1,{PCR_MAX_LENGTH}}}")
    if not pcr_field_is_valid(pcr.code):
        raise BlinkInvalidValueError(f"Code must match {PCR_CHARACTERS}{{0,{PCR_MAX_LENGTH}}}")
    if not pcr_field_is_valid(pcr.reference):
        raise BlinkInvalidValueError(f"Reference must match {PCR_CHARACTERS}{{0,{PCR_MAX_LENGTH}}}")


def validate_amount(amount: Optional[Amount], null_message: str = "Amount must not be null") -> None:
    require_not_null(amount, null_message)
    require_not_null(amount.currency, "Currency must not be null")
    require_not_null(amount.total, "Total must not be null")
    if not is_valid_total(amount.total):
        raise BlinkInvalidValueError("Total is not a valid amount")
