from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from alttext.main import app


def completion(content):
    """Minimal stand-in for an OpenAI ChatCompletion carrying one message."""
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def fake_openai(*contents, side_effect=None):
    """An AsyncOpenAI look-alike whose chat.completions.create yields the given contents in order."""
    client = MagicMock()
    if side_effect is not None:
        client.chat.completions.create = AsyncMock(side_effect=side_effect)
    else:
        client.chat.completions.create = AsyncMock(side_effect=[completion(c) for c in contents])
    return client


@pytest.fixture
def api():
    return TestClient(app)
