from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

from .common import Bank, IdentifierType


# ====== FLOW HINTS (gateway flow only) ======

class RedirectFlowHint(BaseModel):
    type: Literal["redirect"] = "redirect"
    bank: Optional[Bank] = None
    model_config = {"frozen": True}


class DecoupledFlowHint(BaseModel):
    type: Literal["decoupled"] = "decoupled"
    bank: Optional[Bank] = None
    identifier_type: Optional[IdentifierType] = None
    identifier_value: Optional[str] = None
    model_config = {"frozen": True}


FlowHint = Annotated[Union[RedirectFlowHint, DecoupledFlowHint], Field(discriminator="type")]


# ====== FLOW DETAILS ======

class RedirectFlow(BaseModel):
    """The payer is redirected to the bank's online banking to authorise."""

    type: Literal["redirect"] = "redirect"
    bank: Optional[Bank] = None
    redirect_uri: Optional[str] = None
    redirect_to_app: Optional[bool] = None
    model_config = {"frozen": True}


class DecoupledFlow(BaseModel):
    """The bank pushes the authorisation to the payer's app; the result arrives on the callback URL."""

    type: Literal["decoupled"] = "decoupled"
    bank: Optional[Bank] = None
    identifier_type: Optional[IdentifierType] = None
    identifier_value: Optional[str] = None
    callback_url: Optional[str] = None
    model_config = {"frozen": True}


class GatewayFlow(BaseModel):
    """The payer picks the bank and flow on Blink's hosted gateway page."""

    type: Literal["gateway"] = "gateway"
    redirect_uri: Optional[str] = None
    flow_hint: Optional[FlowHint] = None
    model_config = {"frozen": True}


AuthFlowDetail = Annotated[Union[RedirectFlow, DecoupledFlow, GatewayFlow], Field(discriminator="type")]


class AuthFlow(BaseModel):
    detail: Optional[AuthFlowDetail] = None
    model_config = {"frozen": True}
