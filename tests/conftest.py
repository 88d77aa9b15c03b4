import json

import httpx
import pytest

from app.agents.schemas import Credential, Provider

SEARCH_HOST = "api.duckduckgo.com"
GEMINI_HOST = "generativelanguage.googleapis.com"
OPENAI_HOST = "api.openai.com"

DATA_SCIENTIST_TEXT = (
    "Here is your roadmap:\n"
    '{"goal":"Data Scientist","overview":"...","prerequisites":["Statistics"],'
    '"stages":[{"title":"Foundation","skills":["Python"],"resources":["Coursera"]}],'
    '"timeline":"12 months","tips":{"certifications":["AWS ML"],'
    '"communities":["Kaggle"],"trends":["GenAI"]}}\n'
    "Hope this helps!"
)


def gemini_body(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


def openai_body(text: str | None) -> dict:
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 0,
        "model": "gpt-3.5-turbo",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": text},
                "finish_reason": "stop",
            }
        ],
    }


def search_body(heading: str, text: str, url: str) -> dict:
    return {"Heading": heading, "AbstractText": text, "AbstractURL": url}


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it saw."""

    def __init__(self, handler):
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request):
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    def hosts(self) -> list[str]:
        return [r.url.host for r in self.requests]

    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def gemini_credential():
    return Credential(secret="g-key", provider=Provider.GEMINI)


@pytest.fixture
def openai_credential():
    return Credential(secret="sk-test", provider=Provider.OPENAI)
