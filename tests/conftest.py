"""Shared fixtures: settings without waits, a fake token supplier and a stubbed Blink API."""

import json
from typing import Dict, List, Tuple

import httpx
import pytest

from blinkdebit.client import BlinkDebitClient
from blinkdebit.schemas.common import Amount, Bank, Currency, Pcr
from blinkdebit.schemas.consents import SingleConsentRequest
from blinkdebit.schemas.flows import AuthFlow, RedirectFlow
from blinkdebit.settings import Settings
from blinkdebit.transport import HttpxTransport


class FakeTokenSupplier:
    def __init__(self, token: str = "test-token"):
        self.token = token
        self.calls: List[str] = []

    async def acquire_token(self, correlation_id: str) -> str:
        self.calls.append(correlation_id)
        return self.token


class StubApi:
    """Canned responses keyed by (method, path); the last response for a key repeats."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self._responses: Dict[Tuple[str, str], list] = {}

    def add(self, method: str, path: str, *responses) -> None:
        self._responses.setdefault((method, path), []).extend(responses)

    def json(self, method: str, path: str, status: int, payload=None) -> None:
        content = b"" if payload is None else json.dumps(payload).encode("utf-8")
        self.add(method, path, httpx.Response(status, content=content, headers={"Content-Type": "application/json"}))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        queue = self._responses.get((request.method, request.url.path))
        if not queue:
            return httpx.Response(404, json={"status": 404, "message": f"no stub for {request.url.path}"})
        item = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(item, Exception):
            raise item
        return item


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        DEBIT_URL="https://debit.blink.test",
        CLIENT_ID="client-id",
        CLIENT_SECRET="client-secret",
        RETRY_MIN_WAIT_SEC=0,
        RETRY_MAX_WAIT_SEC=0,
        AWAIT_POLL_INTERVAL_SEC=0,
    )


@pytest.fixture
def stub():
    return StubApi()


@pytest.fixture
def token_supplier():
    return FakeTokenSupplier()


@pytest.fixture
def blink(settings, stub, token_supplier):
    transport = HttpxTransport.from_settings(settings, transport=httpx.MockTransport(stub.handler))
    return BlinkDebitClient(settings, transport=transport, token_supplier=token_supplier)


@pytest.fixture
def pcr():
    return Pcr(particulars="particulars", code="code", reference="reference")


@pytest.fixture
def amount():
    return Amount(currency=Currency.NZD, total="1.25")


@pytest.fixture
def single_consent_request(pcr, amount):
    return SingleConsentRequest(
        flow=AuthFlow(detail=RedirectFlow(bank=Bank.PNZ, redirect_uri="https://merchant/return")),
        pcr=pcr,
        amount=amount,
    )
