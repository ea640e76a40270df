"""
Shared data models.
"""

from dataclasses import dataclass, field
from typing import Any

SYSTEM = "system"
USER = "user"
ASSISTANT = "assistant"


@dataclass(frozen=True)
class Message:
    role: str  # "system" | "user" | "assistant"
    content: str

    def to_dict(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}


# Ordered conversation history, replayed in full on every request
Transcript = tuple[Message, ...]


@dataclass(frozen=True)
class ChatRequest:
    model: str
    messages: Transcript


@dataclass(frozen=True)
class Choice:
    message: Message


@dataclass(frozen=True)
class ChatResponse:
    choices: tuple[Choice, ...] = ()
    model: str | None = None
    usage: dict[str, Any] = field(default_factory=dict)

    def first_message(self) -> Message | None:
        """Return the first choice's message, or None when there are no choices."""
        if not self.choices:
            return None
        return self.choices[0].message
