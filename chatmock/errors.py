class ChatMockError(Exception):
    """Base class for errors reported to the client as 400 responses."""


class EmptyMessagesError(ChatMockError):
    """Raised when a request carries no messages to reply to."""

    def __init__(self) -> None:
        super().__init__("messages must contain at least one message")
