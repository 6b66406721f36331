"""Validation of chat completion responses and message cleanup."""

import json
import logging
import string

from ..errors import (
    ApiError,
    ApiRequestFailed,
    EmptyMessageError,
    MalformedResponse,
    NoChoicesError,
)
from .request import ChatTurn

logger = logging.getLogger(__name__)

_TRIM_CHARS = string.whitespace + '"'


def normalize_message(text):
    """
    Clean up a generated commit message.

    Strips whitespace and double quotes from both ends. Each end is trimmed on
    its own, so an unmatched quote is removed as well, and whitespace just
    inside the quotes goes with them.
    """
    return (text or "").strip(_TRIM_CHARS)


def _malformed(reason):
    return MalformedResponse(f"Failed to parse OpenAI API response: {reason}")


def _parse_turn(obj):
    if not isinstance(obj, dict):
        raise _malformed("choice message is not an object")
    role = obj.get("role")
    content = obj.get("content")
    if not isinstance(role, str) or not isinstance(content, str):
        raise _malformed("choice message needs string 'role' and 'content'")
    return ChatTurn(role=role, content=content)


def parse_completion(text):
    """
    Parse a chat completion body.

    Returns a tuple of (turns, error_message) where `turns` holds each choice's
    message in order and `error_message` is None unless the body carries an
    error object. Raises MalformedResponse if the body has the wrong shape.
    """
    try:
        body = json.loads(text)
    except ValueError as exc:
        raise _malformed("body is not valid JSON") from exc

    if not isinstance(body, dict):
        raise _malformed("body is not an object")

    choices = body.get("choices")
    if not isinstance(choices, list):
        raise _malformed("missing 'choices' list")

    turns = []
    for choice in choices:
        if not isinstance(choice, dict) or "message" not in choice:
            raise _malformed("choice without 'message'")
        turns.append(_parse_turn(choice["message"]))

    error = body.get("error")
    error_message = None
    if error is not None:
        if not isinstance(error, dict) or not isinstance(error.get("message"), str):
            raise _malformed("'error' needs a string 'message'")
        error_message = error["message"]

    return turns, error_message


def validate_response(response):
    """
    Turn a RawResponse into a commit message.

    Checks run in order: HTTP status, body shape, error object, choices, and
    finally the cleaned-up content of the first choice.
    """
    if not response.is_success:
        raise ApiRequestFailed(response.status_code, response.text)

    turns, error_message = parse_completion(response.text)

    if error_message is not None:
        raise ApiError(error_message)

    if not turns:
        raise NoChoicesError("No choices in response")

    message = normalize_message(turns[0].content)
    if not message:
        raise EmptyMessageError("The generated commit message is empty")

    logger.debug("Received %d choice(s)", len(turns))
    return message
