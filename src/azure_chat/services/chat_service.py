"""
Turn processing over an explicit transcript value.

The transcript is never shared state: each call receives the current transcript
and returns the one the next turn should use.
"""

from dataclasses import dataclass
from typing import Protocol

from azure_chat.infrastructure.data_models import (
    SYSTEM,
    USER,
    ChatResponse,
    Message,
    Transcript,
)
from azure_chat.services.errors import ChatError

NO_RESPONSE_MESSAGE = "No response from the assistant."
CANCELLED_MESSAGE = "Request cancelled."


class ChatClient(Protocol):
    def complete(self, transcript: Transcript) -> ChatResponse: ...


@dataclass(frozen=True)
class TurnResult:
    transcript: Transcript
    reply: Message | None = None
    error: str | None = None
    response: ChatResponse | None = None

    @property
    def succeeded(self) -> bool:
        return self.reply is not None


def new_transcript(system_prompt: str) -> Transcript:
    """Start a conversation seeded with a single system message."""
    return (Message(role=SYSTEM, content=system_prompt),)


def run_turn(
    transcript: Transcript,
    user_text: str,
    client: ChatClient,
    *,
    rollback_on_failure: bool = False,
) -> TurnResult:
    """
    Send one user message with the full history and collect the reply.

    The user message is appended before the call. When the call fails it stays in
    the returned transcript unless `rollback_on_failure` is set, in which case the
    transcript comes back unchanged. An empty choice list is not a failure: the
    user message is kept and no assistant message is added.

    Args:
        transcript: The conversation so far.
        user_text: The line the user typed, sent as-is (it may be empty).
        client: Anything with a `complete(transcript)` method.
        rollback_on_failure: Drop the user message again if the call fails.

    Returns:
        A TurnResult holding the transcript for the next turn and either the
        assistant reply or a printable error line.
    """
    pending = transcript + (Message(role=USER, content=user_text),)
    failed = transcript if rollback_on_failure else pending

    try:
        response = client.complete(pending)
    except ChatError as e:
        return TurnResult(transcript=failed, error=str(e))
    except KeyboardInterrupt:
        # Ctrl-C while waiting on the service abandons only this turn
        return TurnResult(transcript=failed, error=CANCELLED_MESSAGE)

    reply = response.first_message()
    if reply is None:
        return TurnResult(transcript=pending, error=NO_RESPONSE_MESSAGE, response=response)

    return TurnResult(transcript=pending + (reply,), reply=reply, response=response)
