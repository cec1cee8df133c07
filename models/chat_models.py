"""
Data models for chat processing.
Contains search results, prompt context and the completion payload.
"""
from dataclasses import dataclass, field
from typing import Optional

from utils.constants import PERSONA_SYSTEM_PROMPT, WEB_CONTEXT_HEADING, Role


@dataclass(frozen=True)
class SearchResult:
    """Single web search hit."""
    title: str
    description: str
    url: str

    @classmethod
    def from_api(cls, item: dict) -> "SearchResult":
        """Build from a search API result item, tolerating missing fields."""
        return cls(
            title=str(item.get("title") or ""),
            description=str(item.get("description") or ""),
            url=str(item.get("url") or ""),
        )


@dataclass
class SearchOutcome:
    """
    Result of a best-effort search.
    Either carries results or the reason the search failed, never both.
    """
    results: list[SearchResult] = field(default_factory=list)
    error: Optional[str] = None

    @classmethod
    def failure(cls, reason: str) -> "SearchOutcome":
        return cls(results=[], error=reason)

    @property
    def ok(self) -> bool:
        return self.error is None

    def or_empty(self) -> list[SearchResult]:
        """Results on success, an empty list on failure."""
        return self.results if self.ok else []


@dataclass
class PromptContext:
    """System prompt pieces assembled for a single request."""
    system_prompt: str = PERSONA_SYSTEM_PROMPT
    web_search_block: str = ""

    def render(self) -> str:
        """Persona text, plus the web research section when there is any."""
        if not self.web_search_block:
            return self.system_prompt
        return f"{self.system_prompt}{WEB_CONTEXT_HEADING}{self.web_search_block}"


@dataclass
class CompletionRequest:
    """Payload sent to the completion API."""
    model: str
    messages: list[dict]
    max_tokens: int
    temperature: float

    @classmethod
    def build(cls, prompt: PromptContext, message: str, model: str,
              max_tokens: int, temperature: float) -> "CompletionRequest":
        """Exactly two turns: system prompt, then the raw user message."""
        return cls(
            model=model,
            messages=[
                {"role": Role.SYSTEM, "content": prompt.render()},
                {"role": Role.USER, "content": message},
            ],
            max_tokens=max_tokens,
            temperature=temperature,
        )

    def to_payload(self) -> dict:
        return {
            "model": self.model,
            "messages": self.messages,
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
        }
