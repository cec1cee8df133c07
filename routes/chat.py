"""
Route handlers for chat operations.
Handles the /chat relay endpoint.
"""
from fastapi import APIRouter, Depends, Request

from config import Config
from models.api_models import ChatRequest, ChatResponse, ErrorResponse
from services.chat_service import ChatService
from utils.exceptions import RelayError, InternalError
from utils.logger import app_logger

router = APIRouter()


def get_config(request: Request) -> Config:
    """Configuration loaded at startup."""
    return request.app.state.config


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def chat(request: ChatRequest, config: Config = Depends(get_config)):
    """
    Relay a chat message to the completion provider, optionally with web search context.
    """
    try:
        return await ChatService(config).reply(request)
    except RelayError:
        raise
    except Exception as e:
        app_logger.exception(f"Error in chat function: {type(e).__name__}")
        raise InternalError("Unexpected error while generating response") from e
