from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from .common import Amount, Bank, IdentifierType


class DecoupledFlowFeature(BaseModel):
    enabled: bool = False
    available_identifiers: List[Dict[str, Any]] = []
    request_timeout: Optional[str] = None
    model_config = {"extra": "allow"}


class BankMetadataFeatures(BaseModel):
    enduring_consent: Optional[Dict[str, Any]] = None
    decoupled_flow: Optional[DecoupledFlowFeature] = None
    card_payment: Optional[Dict[str, Any]] = None
    model_config = {"extra": "allow"}


class BankMetadata(BaseModel):
    name: Bank
    payment_limit: Optional[Amount] = None
    features: Optional[BankMetadataFeatures] = None
    redirect_flow: Optional[Dict[str, Any]] = None
    model_config = {"extra": "allow"}

    def supports_decoupled(self, identifier_type: IdentifierType) -> bool:
        decoupled = self.features.decoupled_flow if self.features else None
        if not decoupled or not decoupled.enabled:
            return False
        return any(i.get("type") == identifier_type.value for i in decoupled.available_identifiers)
