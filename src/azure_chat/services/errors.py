"""
Errors raised while processing a chat turn.

Each error renders as the single human-readable line shown to the user.
"""


class ChatError(RuntimeError):
    """Base class for recoverable turn failures."""


class RequestEncodingError(ChatError):
    def __init__(self, detail: object) -> None:
        super().__init__(f"Error creating request payload: {detail}")


class TransportError(ChatError):
    def __init__(self, detail: object) -> None:
        super().__init__(f"Error making API request: {detail}")


class HTTPStatusError(ChatError):
    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"API request failed with status {status_code}: {body}")


class ResponseDecodingError(ChatError):
    def __init__(self, detail: object) -> None:
        super().__init__(f"Error parsing response JSON: {detail}")
