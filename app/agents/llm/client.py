import httpx

from app.settings import settings
from app.agents.schemas import Credential, Provider
from app.agents.llm.base import LLMClient
from app.agents.llm.gemini import GeminiClient
from app.agents.llm.openai_chat import OpenAIChatClient

def get_llm_client(credential: Credential, http_client: httpx.AsyncClient | None = None) -> LLMClient:
    if credential.provider == Provider.OPENAI:
        return OpenAIChatClient(
            api_key=credential.secret,
            base_url=settings.openai_base_url,
            model=settings.openai_model,
            timeout=settings.http_timeout_seconds,
            http_client=http_client,
        )

    return GeminiClient(
        api_key=credential.secret,
        base_url=settings.gemini_base_url,
        model=settings.gemini_model,
        timeout=settings.http_timeout_seconds,
        http_client=http_client,
    )


async def call_provider(prompt: str, credential: Credential,
http_client: httpx.AsyncClient | None = None) -> str:
    """One generation attempt against the provider the credential names."""
    llm = get_llm_client(credential, http_client=http_client)
    return await llm.generate_text(prompt)
