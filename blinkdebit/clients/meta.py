from typing import AsyncIterator

from ..constants import METADATA_PATH
from ..schemas.meta import BankMetadata
from .base import BaseApiClient, HeadersArg, resolve_headers


class MetaApiClient(BaseApiClient):

    async def get_meta(self, request_headers: HeadersArg = None) -> AsyncIterator[BankMetadata]:
        """
        Bank metadata, one bank at a time.

        Banks decoded before a malformed entry are still yielded; the malformed
        entry raises and ends the iteration.
        """
        items = await self._get_stream(METADATA_PATH, resolve_headers(request_headers), BankMetadata)
        for item in items:
            yield item
