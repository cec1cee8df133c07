"""
Completion service for the OpenAI chat completions API.
"""
import httpx

from config import Config
from models.chat_models import CompletionRequest
from utils.exceptions import ConfigurationError, UpstreamError
from utils.logger import app_logger
from utils.http_client import HTTPClientManager

REDACTED = "[REDACTED]"


class CompletionService:
    """Service for generating replies. Failures are never retried."""

    def __init__(self, config: Config):
        self.config = config

    def ensure_configured(self) -> None:
        """Raise ConfigurationError when no completion API key is set."""
        if not self.config.openai_api_key:
            raise ConfigurationError("OpenAI API key not configured")

    async def complete(self, request: CompletionRequest) -> str:
        """
        Send a completion request and return the first choice's text.

        Args:
            request: Assembled completion payload

        Returns:
            Reply text

        Raises:
            ConfigurationError: if the API key is missing
            UpstreamError: on transport errors, timeouts, non-2xx status or malformed body
        """
        self.ensure_configured()
        client = HTTPClientManager.get_completion_client()

        try:
            response = await client.post(
                self.config.openai_url,
                headers={
                    "Authorization": f"Bearer {self.config.openai_api_key}",
                    "Content-Type": "application/json",
                },
                json=request.to_payload(),
                timeout=self.config.completion_timeout
            )
        except httpx.TimeoutException as e:
            app_logger.error("OpenAI API request timed out")
            raise UpstreamError(self._redact(f"OpenAI API request timed out: {e}")) from e
        except httpx.RequestError as e:
            app_logger.error(f"OpenAI API request failed: {type(e).__name__}")
            raise UpstreamError(self._redact(f"OpenAI API request failed: {e}")) from e

        if not response.is_success:
            upstream_message = self._extract_error_message(response)
            details = f"OpenAI API error: {response.status_code}"
            if upstream_message:
                details = f"{details} - {upstream_message}"
            details = self._redact(details)
            app_logger.error(details)
            raise UpstreamError(details)

        return self._extract_content(response)

    def _extract_content(self, response: httpx.Response) -> str:
        """Read choices[0].message.content from a successful response."""
        try:
            content = response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            app_logger.error("OpenAI API returned a malformed response body")
            raise UpstreamError("OpenAI API returned a malformed response") from e

        if not isinstance(content, str):
            raise UpstreamError("OpenAI API returned a malformed response")

        app_logger.info(f"AI response generated successfully: {len(content)} characters")
        return content

    @staticmethod
    def _extract_error_message(response: httpx.Response) -> str:
        """Best guess at a human readable upstream error message."""
        try:
            data = response.json()
        except ValueError:
            return response.text.strip()[:500]

        if isinstance(data, dict):
            error = data.get("error")
            if isinstance(error, dict) and error.get("message"):
                return str(error["message"])
            if isinstance(error, str):
                return error
        return ""

    def _redact(self, text: str) -> str:
        """Strip the completion API key from any text leaving the service."""
        key = self.config.openai_api_key
        return text.replace(key, REDACTED) if key else text
