import json
import logging
from typing import Any

import pytest
import requests
import requests.adapters

from azure_chat.app.config import ChatSettings, config

CONFIG_ENV_VARS = [
    "ENDPOINT_URL",
    "API_KEY",
    "MODEL_NAME",
    "AZURE_OPENAI_ENDPOINT",
    "AZURE_OPENAI_API_KEY",
    "AZURE_OPENAI_MODEL",
    "API_VERSION",
    "REQUEST_TIMEOUT",
    "SYSTEM_PROMPT",
    "LOG_LEVEL",
    "LOG_DIR",
    "CHAT_PARAMETER_SOURCE",
    "CHAT_PARAMETER_PATH",
]


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    config.reset()
    yield
    config.reset()


@pytest.fixture
def settings() -> ChatSettings:
    return ChatSettings(
        endpoint_url="https://example.openai.azure.com",
        api_key="secret-key",
        model_name="gpt-4",
        request_timeout=5.0,
    )


@pytest.fixture
def logger() -> logging.Logger:
    return logging.getLogger("azure-chat-test")


def make_response(status_code: int, body: Any) -> requests.Response:
    """Build a real requests.Response carrying `body` (dicts are JSON-encoded)."""
    resp = requests.Response()
    resp.status_code = status_code
    if isinstance(body, (dict, list)):
        body = json.dumps(body)
    resp._content = body.encode("utf-8") if isinstance(body, str) else body
    resp.encoding = "utf-8"
    return resp


def reply_body(content: str, role: str = "assistant") -> dict[str, Any]:
    return {"choices": [{"message": {"role": role, "content": content}}]}


class FakeSession:
    """Stands in for requests.Session; replays queued responses or exceptions."""

    def __init__(self, *outcomes: requests.Response | Exception) -> None:
        self.outcomes = list(outcomes)
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    def post(self, url: str, **kwargs: Any) -> requests.Response:
        self.calls.append({"url": url, **kwargs})
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def close(self) -> None:
        self.closed = True

    def sent_bodies(self) -> list[dict[str, Any]]:
        return [json.loads(call["data"]) for call in self.calls]


class RecordingAdapter(requests.adapters.BaseAdapter):
    """Transport adapter that records prepared requests instead of sending them."""

    def __init__(self, *responses: requests.Response) -> None:
        super().__init__()
        self.responses = list(responses)
        self.requests: list[requests.PreparedRequest] = []

    def send(self, request, **kwargs):
        self.requests.append(request)
        resp = self.responses.pop(0)
        resp.request = request
        resp.url = request.url
        return resp

    def close(self) -> None:
        pass
