"""
Pydantic data models for API requests and responses.
"""
from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator


class ChatRequest(BaseModel):
    """Chat request model. Only the latest user message is relayed."""
    model_config = ConfigDict(populate_by_name=True)

    message: StrictStr = Field(..., min_length=1, description="User message to answer")
    include_web_search: bool = Field(False, alias="includeWebSearch")

    @field_validator("message")
    @classmethod
    def message_not_blank(cls, value: str) -> str:
        # Relayed as typed; only whitespace-only input is rejected
        if not value.strip():
            raise ValueError("message must not be blank")
        return value


class ChatResponse(BaseModel):
    """Successful chat reply."""
    response: str


class ErrorResponse(BaseModel):
    """Failure envelope."""
    error: str
    details: str
