import json
from types import SimpleNamespace

import pytest

from logos.config import Settings

SAMPLE_TEXT = "The sky is blue. Therefore, the ocean is blue."
SAMPLE_RESULT = {
    "claim": "The ocean is blue",
    "premises": ["The sky is blue"],
    "emotions": {"Anger": 1, "Sadness": 1, "Joy": 2, "Fear": 1, "Surprise": 1},
}


class FakeResponse:
    def __init__(self, body=None, status_code=200, reason="OK", text=None):
        self._body = body
        self.status_code = status_code
        self.reason = reason
        self.text = text if text is not None else json.dumps(body)

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._body is None:
            raise ValueError("No JSON object could be decoded")
        return self._body


class FakeHTTP:
    """Stands in for the requests module; records every POST."""

    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls = []

    def post(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.exc is not None:
            raise self.exc
        return self.response


class FakeOpenAIClient:
    def __init__(self, create):
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=create))
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.closed = True
        return False


class FakeOpenAI:
    """Mimics `with OpenAI(api_key=...) as client: client.chat.completions.create(...)`."""

    def __init__(self, content=None, exc=None):
        self.content = content
        self.exc = exc
        self.clients = []
        self.instances = []
        self.calls = []

    def __call__(self, **options):
        self.clients.append(options)
        client = FakeOpenAIClient(self._create)
        self.instances.append(client)
        return client

    def _create(self, **kwargs):
        self.calls.append(kwargs)
        if self.exc is not None:
            raise self.exc
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def gemini_body(text):
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


def chat_body(text):
    return {"choices": [{"message": {"role": "assistant", "content": text}}]}


@pytest.fixture
def settings():
    return Settings(
        openai_api_key="sk-openai",
        gemini_api_key="gm-key",
        openrouter_api_key="or-key",
    )
