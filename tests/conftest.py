from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from main import create_app


class FakeGateway:
    """Records every call and answers with a canned reply (or raises)."""

    def __init__(self, reply: str = "", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: list[tuple] = []

    async def generate(self, prompt):
        self.calls.append(("generate", prompt))
        if self.error:
            raise self.error
        return self.reply

    async def converse(self, prior_turns, message):
        self.calls.append(("converse", list(prior_turns), message))
        if self.error:
            raise self.error
        return self.reply


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def client(gateway: FakeGateway) -> TestClient:
    return TestClient(create_app(gateway=gateway))
