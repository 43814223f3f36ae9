"""Mock chat completion API with canned and streamed replies."""

__version__ = "1.0.0"
