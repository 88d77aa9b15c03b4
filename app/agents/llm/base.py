## Base LLM Client Interface
from abc import ABC, abstractmethod

from app.agents.errors import EmptyGenerationError

GENERATION_TEMPERATURE = 0.3
MAX_OUTPUT_TOKENS = 2048


class LLMClient(ABC):
    name: str = "llm"

    @abstractmethod
    async def generate_text(self, prompt: str) -> str:
        raise NotImplementedError

    def _require_text(self, text: object) -> str:
        if not isinstance(text, str) or not text.strip():
            raise EmptyGenerationError(f"No content generated from {self.name.upper()} API")
        return text
