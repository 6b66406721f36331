"""Chat request value objects and the request builder."""

from dataclasses import dataclass
from typing import Tuple

from .prompts import SYSTEM_PROMPT, USER_PROMPT

ROLES = ("system", "user", "assistant")


@dataclass(frozen=True)
class ChatTurn:
    role: str
    content: str

    def to_dict(self):
        return {"role": self.role, "content": self.content}


@dataclass(frozen=True)
class CompletionRequest:
    """A chat completion request; turns are sent in order."""

    model: str
    turns: Tuple[ChatTurn, ...]
    temperature: float

    def __post_init__(self):
        # Only outbound turns are checked; responses may use other roles.
        for turn in self.turns:
            if turn.role not in ROLES:
                raise ValueError(f"Invalid chat role: {turn.role}")

    def to_payload(self):
        """Return the JSON body for the chat completions endpoint."""
        return {
            "model": self.model,
            "messages": [turn.to_dict() for turn in self.turns],
            "temperature": self.temperature,
        }


def build_request(model, temperature, diff):
    """Build the [system, user] request asking for a commit message for `diff`."""
    return CompletionRequest(
        model=model,
        turns=(
            ChatTurn(role="system", content=SYSTEM_PROMPT),
            ChatTurn(role="user", content=USER_PROMPT.format(diff=diff)),
        ),
        temperature=float(temperature),
    )
