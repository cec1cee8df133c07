"""
Chat service containing the relay flow.
Validates configuration, gathers optional web context, builds the prompt and
calls the completion provider.
"""
from config import Config
from models.api_models import ChatRequest, ChatResponse
from models.chat_models import PromptContext, CompletionRequest
from services.search import SearchService
from services.completion import CompletionService
from utils.logger import app_logger


class ChatService:
    """Service for handling a single chat turn."""

    def __init__(self, config: Config):
        self.config = config
        self.search_service = SearchService(config)
        self.completion_service = CompletionService(config)

    async def reply(self, request: ChatRequest) -> ChatResponse:
        """
        Produce a reply for one chat message.

        Raises:
            ConfigurationError: completion API key missing
            UpstreamError: completion provider failed
        """
        self.completion_service.ensure_configured()

        app_logger.info(
            f"Received message ({len(request.message)} chars), web search: {request.include_web_search}"
        )

        prompt = await self.build_prompt_context(request)
        completion_request = CompletionRequest.build(
            prompt=prompt,
            message=request.message,
            model=self.config.openai_model,
            max_tokens=self.config.max_tokens,
            temperature=self.config.temperature,
        )

        content = await self.completion_service.complete(completion_request)
        return ChatResponse(response=content)

    async def build_prompt_context(self, request: ChatRequest) -> PromptContext:
        """Persona prompt, with web research attached when search produced results."""
        if not request.include_web_search:
            return PromptContext()

        app_logger.info("Performing web search...")
        outcome = await self.search_service.search(request.message)
        if not outcome.ok:
            app_logger.info(f"Continuing without web context: {outcome.error}")

        return PromptContext(
            web_search_block=SearchService.format_results(outcome.or_empty())
        )
