import json

import httpx
import pytest

from voxtral.mistral import ClientSettings, MistralClient, StaticSecretStore


class RecordingSleep:
    """Stands in for asyncio.sleep; records the requested delays."""

    def __init__(self):
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


@pytest.fixture
def fake_sleep():
    return RecordingSleep()


@pytest.fixture
def make_client(fake_sleep):
    """Fixture: factory returning (client, recorded_requests) over a mock transport."""

    def _factory(handler, *, api_key="test-key", settings=None):
        requests: list[httpx.Request] = []

        def _handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        http = httpx.AsyncClient(transport=httpx.MockTransport(_handler))
        client = MistralClient(
            settings or ClientSettings(),
            secret_store=StaticSecretStore(api_key),
            http_client=http,
            sleep=fake_sleep,
        )
        return client, requests

    return _factory


@pytest.fixture
def json_response():
    """Fixture: factory for a JSON httpx.Response."""

    def _factory(payload, status_code: int = 200) -> httpx.Response:
        if not isinstance(payload, str):
            payload = json.dumps(payload)
        return httpx.Response(
            status_code,
            content=payload.encode("utf-8"),
            headers={"Content-Type": "application/json"},
        )

    return _factory
