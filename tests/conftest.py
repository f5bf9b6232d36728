from datetime import datetime

import pytest

from devai.errors import ModelRequestFailed

WEDNESDAY = datetime(2025, 12, 17, 9, 30)


class FakeClient:
    def __init__(self, reply: str = "", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: list[tuple[str, str]] = []

    def generate(self, prompt: str, system_instruction: str) -> str:
        self.calls.append((prompt, system_instruction))
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def wednesday():
    return WEDNESDAY


@pytest.fixture
def fake_client():
    return FakeClient


@pytest.fixture
def failing_client():
    return FakeClient(error=ModelRequestFailed("quota exceeded"))
