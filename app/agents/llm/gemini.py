import logging

import httpx

from app.agents.errors import ProviderError
from app.agents.llm.base import GENERATION_TEMPERATURE, MAX_OUTPUT_TOKENS, LLMClient

logger = logging.getLogger(__name__)


class GeminiClient(LLMClient):
    name = "gemini"

    def __init__(self, *, api_key: str, base_url: str, model: str,
    timeout: float = 60.0, http_client: httpx.AsyncClient | None = None):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout = timeout
        self.http_client = http_client

    def build_payload(self, prompt: str) -> dict:
        return {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": GENERATION_TEMPERATURE,
                "topK": 40,
                "topP": 0.95,
                "maxOutputTokens": MAX_OUTPUT_TOKENS,
            },
        }

    @staticmethod
    def extract_text(data: dict) -> str | None:
        # candidates[0].content.parts[0].text, any level may be missing
        try:
            return data["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError):
            return None

    async def _post(self, client: httpx.AsyncClient, prompt: str) -> httpx.Response:
        url = f"{self.base_url}/models/{self.model}:generateContent"
        return await client.post(
            url,
            params={"key": self.api_key},
            json=self.build_payload(prompt),
            headers={"Content-Type": "application/json"},
        )

    async def generate_text(self, prompt: str) -> str:
        if self.http_client is not None:
            r = await self._post(self.http_client, prompt)
        else:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                r = await self._post(client, prompt)

        logger.info("GEMINI API response status: %s", r.status_code)
        if not r.is_success:
            raise ProviderError(r.status_code, r.text)

        try:
            data = r.json()
        except ValueError:
            data = None
        return self._require_text(self.extract_text(data))
