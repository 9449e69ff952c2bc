from typing import Optional
from uuid import UUID

from ..constants import ENDURING_CONSENTS_PATH, SINGLE_CONSENTS_PATH
from ..schemas.consents import Consent, CreateConsentResponse, EnduringConsentRequest, SingleConsentRequest
from ..validation.validators import validate_enduring_consent, validate_id, validate_single_consent
from .base import BaseApiClient, HeadersArg, resolve_headers


class SingleConsentsApiClient(BaseApiClient):
    """
    Single consents: one payment of a fixed amount.
      - POST   /payments/v1/single-consents
      - GET    /payments/v1/single-consents/{consentId}
      - DELETE /payments/v1/single-consents/{consentId}
    """

    async def create_single_consent(
        self, request: Optional[SingleConsentRequest], request_headers: HeadersArg = None
    ) -> CreateConsentResponse:
        validate_single_consent(request)
        return await self._post(
            SINGLE_CONSENTS_PATH, request, resolve_headers(request_headers), CreateConsentResponse
        )

    async def get_single_consent(self, consent_id: Optional[UUID], request_headers: HeadersArg = None) -> Consent:
        validate_id(consent_id, "Consent")
        return await self._get(f"{SINGLE_CONSENTS_PATH}/{consent_id}", resolve_headers(request_headers), Consent)

    async def revoke_single_consent(self, consent_id: Optional[UUID], request_headers: HeadersArg = None) -> None:
        validate_id(consent_id, "Consent")
        await self._delete(f"{SINGLE_CONSENTS_PATH}/{consent_id}", resolve_headers(request_headers))


class EnduringConsentsApiClient(BaseApiClient):
    """
    Enduring consents: recurring payments up to a maximum amount per period.
      - POST   /payments/v1/enduring-consents
      - GET    /payments/v1/enduring-consents/{consentId}
      - DELETE /payments/v1/enduring-consents/{consentId}
    """

    async def create_enduring_consent(
        self, request: Optional[EnduringConsentRequest], request_headers: HeadersArg = None
    ) -> CreateConsentResponse:
        validate_enduring_consent(request)
        return await self._post(
            ENDURING_CONSENTS_PATH, request, resolve_headers(request_headers), CreateConsentResponse
        )

    async def get_enduring_consent(self, consent_id: Optional[UUID], request_headers: HeadersArg = None) -> Consent:
        validate_id(consent_id, "Consent")
        return await self._get(f"{ENDURING_CONSENTS_PATH}/{consent_id}", resolve_headers(request_headers), Consent)

    async def revoke_enduring_consent(self, consent_id: Optional[UUID], request_headers: HeadersArg = None) -> None:
        validate_id(consent_id, "Consent")
        await self._delete(f"{ENDURING_CONSENTS_PATH}/{consent_id}", resolve_headers(request_headers))
