import json
from typing import Any, cast

from azure_chat.infrastructure.data_models import (
    ASSISTANT,
    ChatRequest,
    ChatResponse,
    Choice,
    Message,
)
from azure_chat.services.errors import RequestEncodingError, ResponseDecodingError


def encode_request(request: ChatRequest) -> bytes:
    """
    Serialize a chat request to the JSON body expected by the completions endpoint.

    The body carries exactly two fields, `model` and `messages`, with each message
    rendered as `{"role": ..., "content": ...}`.

    Raises:
        RequestEncodingError: If the request cannot be serialized.
    """
    payload = {
        "model": request.model,
        "messages": [m.to_dict() for m in request.messages],
    }
    try:
        return json.dumps(payload).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise RequestEncodingError(e) from e


def _decode_message(raw: Any) -> Message:
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ResponseDecodingError("choice message is not an object")
    message = cast(dict[str, Any], raw)

    role = message.get("role")
    if role is None:
        role = ASSISTANT
    content = message.get("content")
    if content is None:
        content = ""  # e.g. filtered completions carry a null content

    if not isinstance(role, str):
        raise ResponseDecodingError(f"message role has wrong type: {type(role).__name__}")
    if not isinstance(content, str):
        raise ResponseDecodingError(
            f"message content has wrong type: {type(content).__name__}"
        )
    return Message(role=role, content=content)


def decode_response(body: bytes | str) -> ChatResponse:
    """
    Deserialize a completions response body.

    Unknown fields are ignored. A missing or null `choices` decodes as no choices.

    Raises:
        ResponseDecodingError: If the body is not JSON or does not have the expected shape.
    """
    try:
        parsed = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ResponseDecodingError(e) from e

    if parsed is None:
        parsed = {}  # a bare null carries no choices
    if not isinstance(parsed, dict):
        raise ResponseDecodingError("response is not a JSON object")
    data = cast(dict[str, Any], parsed)

    raw_choices = data.get("choices")
    if raw_choices is None:
        raw_choices = []
    if not isinstance(raw_choices, list):
        raise ResponseDecodingError("choices is not a list")

    choices: list[Choice] = []
    for raw_choice in cast(list[Any], raw_choices):
        if not isinstance(raw_choice, dict):
            raise ResponseDecodingError("choice is not an object")
        choices.append(Choice(message=_decode_message(raw_choice.get("message"))))

    model = data.get("model")
    usage = data.get("usage")
    return ChatResponse(
        choices=tuple(choices),
        model=model if isinstance(model, str) else None,
        usage=cast(dict[str, Any], usage) if isinstance(usage, dict) else {},
    )
