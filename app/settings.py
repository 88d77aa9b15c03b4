## Application settings configuration

from pydantic_settings import BaseSettings, SettingsConfigDict

from app.agents.schemas import Provider

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    env: str = "dev"
    log_level: str = "INFO"

    # DuckDuckGo instant answer API (no key needed)
    search_url: str = "https://api.duckduckgo.com/"

    # Gemini settings
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    gemini_model: str = "gemini-1.5-flash-latest"

    # OpenAI settings
    openai_base_url: str = "https://api.openai.com/v1"
    openai_model: str = "gpt-3.5-turbo"

    default_provider: Provider = Provider.GEMINI
    http_timeout_seconds: float = 60.0


settings = Settings()
