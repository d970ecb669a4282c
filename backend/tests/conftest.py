import json
import httpx
import pytest
from fastapi.testclient import TestClient
from app.api.deps import get_judge0
from app.core.config import Settings
from app.main import app
from app.services.judge0 import Judge0Client


class FakeJudge0:
    """Records outbound Judge0 calls and answers with a canned response."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: str = "{}"
        self.exc: Exception | None = None

    def reply(self, status_code: int = 200, body=None):
        self.status_code = status_code
        self.body = body if isinstance(body, str) else json.dumps(body or {})

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        return httpx.Response(self.status_code, text=self.body)

    def sent(self, i: int = -1) -> dict:
        return json.loads(self.requests[i].content)


@pytest.fixture
def fake_judge0():
    return FakeJudge0()


@pytest.fixture
def settings():
    return Settings(JUDGE0_URL="https://judge0.test/submissions/?wait=true")


@pytest.fixture
def client(fake_judge0, settings):
    async def override():
        transport = httpx.MockTransport(fake_judge0.handler)
        async with httpx.AsyncClient(transport=transport) as http:
            yield Judge0Client(http, settings)

    app.dependency_overrides[get_judge0] = override
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
