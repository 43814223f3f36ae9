from typing import Literal
from pydantic import BaseModel, ConfigDict, Field, field_validator


# Request Models
class ChatMessage(BaseModel):
    """A single chat message."""
    model_config = ConfigDict(frozen=True)

    role: str
    content: str


class ChatRequest(BaseModel):
    """Chat completion request. Missing or null fields fall back to zero values."""
    model: str = ""
    messages: list[ChatMessage] = Field(default_factory=list)
    temperature: float = 0.0
    streaming: bool | None = None

    @field_validator("model", "messages", "temperature", mode="before")
    @classmethod
    def null_to_zero_value(cls, value, info):
        if value is None:
            return {"model": "", "messages": [], "temperature": 0.0}[info.field_name]
        return value


# Response Models
class Usage(BaseModel):
    """Token usage information."""
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


class Choice(BaseModel):
    """A single completion choice."""
    message: ChatMessage
    logprobs: None = None
    finish_reason: str
    index: int = Field(default=0, ge=0)


class ChatResponse(BaseModel):
    """Chat completion response, also used as the first streamed fragment."""
    id: str
    object: Literal["chat.completion"] = "chat.completion"
    model: str
    usage: Usage
    choices: list[Choice]


class ApiError(BaseModel):
    """Body of every client error response."""
    error: str


class PingResponse(BaseModel):
    message: str = "pong"
