"""
Models package exports.
"""
from models.api_models import ChatRequest, ChatResponse, ErrorResponse
from models.chat_models import SearchResult, SearchOutcome, PromptContext, CompletionRequest

__all__ = [
    'ChatRequest',
    'ChatResponse',
    'ErrorResponse',
    'SearchResult',
    'SearchOutcome',
    'PromptContext',
    'CompletionRequest'
]
