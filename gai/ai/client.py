"""OpenAI transport for chat completion requests."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

import httpx
import openai

from ..config import OPENAI_BASE_URL
from ..errors import TransportError

logger = logging.getLogger(__name__)

UNKNOWN_ERROR_BODY = "Unknown error"


@dataclass(frozen=True)
class RawResponse:
    """HTTP status and undecoded body of a completion call."""

    status_code: int
    text: str

    @property
    def is_success(self):
        return 200 <= self.status_code < 300


class CompletionProvider(ABC):
    """Sends a CompletionRequest and returns the raw HTTP response."""

    @abstractmethod
    def complete(self, request) -> RawResponse:
        pass


def _read_text(response):
    try:
        return response.text
    except (httpx.ResponseNotRead, httpx.StreamError, UnicodeDecodeError):
        return UNKNOWN_ERROR_BODY


def get_openai_client(api_key, http_client=None):
    """
    Get an OpenAI client for the public API.

    Retries are disabled: every invocation makes exactly one request.
    """
    return openai.OpenAI(
        api_key=api_key,
        base_url=OPENAI_BASE_URL,
        max_retries=0,
        http_client=http_client,
    )


class OpenAIProvider(CompletionProvider):
    """POSTs to /chat/completions with bearer authorization."""

    def __init__(self, api_key, client=None):
        self._client = client or get_openai_client(api_key)

    def complete(self, request):
        payload = request.to_payload()
        logger.debug(
            "POST %s/chat/completions model=%s temperature=%s",
            OPENAI_BASE_URL,
            payload["model"],
            payload["temperature"],
        )
        try:
            raw = self._client.chat.completions.with_raw_response.create(**payload)
        except openai.APIStatusError as exc:
            # Non-2xx responses still go to the validator as-is.
            logger.debug("API answered with status %s", exc.status_code)
            return RawResponse(status_code=exc.status_code, text=_read_text(exc.response))
        except openai.APIConnectionError as exc:
            raise TransportError("Failed to send request to OpenAI API") from exc

        http_response = raw.http_response
        return RawResponse(status_code=http_response.status_code, text=_read_text(http_response))
