from collections.abc import Callable, Sequence

from chatmock.config import Settings
from chatmock.errors import EmptyMessagesError
from chatmock.identifiers import new_completion_id
from chatmock.models import (
    ChatMessage,
    ChatRequest,
    ChatResponse,
    Choice,
    Usage,
)

TokenCounter = Callable[[Sequence[ChatMessage]], int]


def count_messages(messages: Sequence[ChatMessage]) -> int:
    """Stand-in token counter: one token per message."""
    return len(messages)


class CompletionAssembler:
    """Builds canned chat completion payloads from a decoded request."""
    
    def __init__(
        self,
        settings: Settings,
        token_counter: TokenCounter = count_messages,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self.settings = settings
        self.token_counter = token_counter
        self.id_factory = id_factory or (lambda: new_completion_id(settings.id_strategy))
    
    @staticmethod
    def _require_messages(request: ChatRequest) -> None:
        if not request.messages:
            raise EmptyMessagesError()
    
    def build_completion(self, request: ChatRequest) -> ChatResponse:
        """
        Build the full synchronous completion.
        
        The reply is the first message's content followed by the configured
        suffix; usage reports the configured fixed completion token count.
        
        Raises:
            EmptyMessagesError: if the request has no messages
        """
        self._require_messages(request)
        prompt_tokens = self.token_counter(request.messages)
        completion_tokens = self.settings.completion_tokens
        
        return ChatResponse(
            id=self.id_factory(),
            model=self.settings.completion_model,
            usage=Usage(
                prompt_tokens=prompt_tokens,
                completion_tokens=completion_tokens,
                total_tokens=prompt_tokens + completion_tokens
            ),
            choices=[
                Choice(
                    message=ChatMessage(
                        role="assistant",
                        content=request.messages[0].content + self.settings.reply_suffix
                    ),
                    finish_reason="stop",
                    index=0
                )
            ]
        )
    
    def build_initial_fragment(self, request: ChatRequest) -> ChatResponse:
        """First streamed fragment: usage only, no choices yet."""
        self._require_messages(request)
        prompt_tokens = self.token_counter(request.messages)
        
        return ChatResponse(
            id=self.id_factory(),
            model=self.settings.completion_model,
            usage=Usage(
                prompt_tokens=prompt_tokens,
                completion_tokens=0,
                total_tokens=prompt_tokens
            ),
            choices=[]
        )
    
    @staticmethod
    def build_stream_choice(part: int) -> Choice:
        # index stays 0: every part belongs to the same logical choice
        return Choice(
            message=ChatMessage(role="assistant", content=f"Streamed response part {part}"),
            finish_reason="stop",
            index=0
        )
