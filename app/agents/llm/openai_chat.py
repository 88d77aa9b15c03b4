import logging

import httpx
from openai import APIStatusError, AsyncOpenAI

from app.agents.errors import ProviderError
from app.agents.llm.base import GENERATION_TEMPERATURE, MAX_OUTPUT_TOKENS, LLMClient

logger = logging.getLogger(__name__)


class OpenAIChatClient(LLMClient):
    name = "openai"

    def __init__(self, *, api_key: str, base_url: str, model: str,
    timeout: float = 60.0, http_client: httpx.AsyncClient | None = None):
        # Single attempt per call
        self.client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=0,
            http_client=http_client,
        )
        self.model = model
        self._owns_http_client = http_client is None

    async def generate_text(self, prompt: str) -> str:
        try:
            resp = await self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=GENERATION_TEMPERATURE,
                max_tokens=MAX_OUTPUT_TOKENS,
            )
        except APIStatusError as e:
            logger.info("OPENAI API response status: %s", e.status_code)
            raise ProviderError(e.status_code, e.response.text) from e
        finally:
            if self._owns_http_client:
                await self.client.close()

        choices = getattr(resp, "choices", None) or []
        text = None
        if choices and choices[0].message is not None:
            text = choices[0].message.content
        return self._require_text(text)
