"""
Configuration module for the Chat Relay application.
Handles environment variables and application settings.
"""
import os
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

from utils.logger import app_logger

# Tokens shipped in demo setups that the search provider always rejects.
PLACEHOLDER_SEARCH_KEYS = {"demo-key"}


class Config(BaseModel):
    """Application configuration. Loaded once at startup and never mutated."""

    model_config = ConfigDict(frozen=True)

    # API Keys
    openai_api_key: str = ""
    brave_search_api_key: str = ""

    # API Configuration
    openai_url: str = "https://api.openai.com/v1/chat/completions"
    brave_search_url: str = "https://api.search.brave.com/res/v1/web/search"

    # Generation Settings
    openai_model: str = "gpt-4o-mini"
    max_tokens: int = 1000
    temperature: float = 0.7

    # Search Settings
    search_results_count: int = 5
    max_search_results: int = 3

    # Timeouts (in seconds)
    search_timeout: float = 10.0
    completion_timeout: float = 30.0

    # Application Settings
    app_title: str = "Chat Relay"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        """Build configuration from the process environment and .env file."""
        load_dotenv()
        defaults = cls()

        return cls(
            openai_api_key=os.getenv("OPENAI_API_KEY", "").strip(),
            brave_search_api_key=os.getenv("BRAVE_SEARCH_API_KEY", "").strip(),
            openai_url=os.getenv("OPENAI_URL", defaults.openai_url),
            brave_search_url=os.getenv("BRAVE_SEARCH_URL", defaults.brave_search_url),
            openai_model=os.getenv("OPENAI_MODEL", defaults.openai_model),
            max_tokens=int(os.getenv("MAX_TOKENS", defaults.max_tokens)),
            temperature=float(os.getenv("TEMPERATURE", defaults.temperature)),
            search_timeout=float(os.getenv("SEARCH_TIMEOUT", defaults.search_timeout)),
            completion_timeout=float(os.getenv("COMPLETION_TIMEOUT", defaults.completion_timeout)),
            log_level=os.getenv("LOG_LEVEL", defaults.log_level).upper(),
        )

    @property
    def search_enabled(self) -> bool:
        """Whether a usable search API key is configured."""
        key = self.brave_search_api_key
        return bool(key) and key not in PLACEHOLDER_SEARCH_KEYS

    def validate_keys(self) -> None:
        """Log warnings for missing or unusable API keys."""
        if not self.openai_api_key:
            app_logger.warning("OPENAI_API_KEY not found in environment or .env file")
            app_logger.warning("Every chat request will fail until it is configured.")

        if not self.brave_search_api_key:
            app_logger.warning("BRAVE_SEARCH_API_KEY not found in environment or .env file")
            app_logger.warning("Web search is disabled. Get your free API key from: https://brave.com/search/api/")
        elif not self.search_enabled:
            app_logger.warning("BRAVE_SEARCH_API_KEY is a placeholder value, web search is disabled")
