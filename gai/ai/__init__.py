"""AI integration package."""

from .client import CompletionProvider, OpenAIProvider, RawResponse, get_openai_client
from .request import ChatTurn, CompletionRequest, build_request
from .response import normalize_message, parse_completion, validate_response

__all__ = [
    "ChatTurn",
    "CompletionRequest",
    "build_request",
    "RawResponse",
    "CompletionProvider",
    "OpenAIProvider",
    "get_openai_client",
    "normalize_message",
    "parse_completion",
    "validate_response",
]
