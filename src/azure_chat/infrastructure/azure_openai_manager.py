from __future__ import annotations

from types import TracebackType

import requests

from azure_chat.app.config import ChatSettings
from azure_chat.infrastructure.data_models import ChatRequest, ChatResponse, Transcript
from azure_chat.services.chat_codec import decode_response, encode_request
from azure_chat.services.errors import HTTPStatusError, TransportError
from azure_chat.services.requests_helpers import session_for_endpoint


class AzureOpenAIChat:
    """
    A client for an Azure OpenAI chat-completions deployment.

    Every call issues exactly one blocking POST bounded by the configured timeout.
    Failures are raised, never retried.
    """

    def __init__(self, settings: ChatSettings, session: requests.Session | None = None) -> None:
        """
        Initialize the chat client.

        Args:
            settings: Loaded chat settings (endpoint, key, deployment and timeout)
            session: Optional pre-built session; one is created from the settings otherwise

        Raises:
            ValueError: If the API key is empty
        """
        if not settings.api_key:
            raise ValueError("API_KEY not found in configuration")

        self.settings = settings
        self.url = settings.completions_url
        self.timeout = settings.request_timeout
        self.session: requests.Session = session or session_for_endpoint(settings.api_key)

    def post(self, body: bytes) -> bytes:
        """
        Send one encoded request body and return the raw response body.

        Raises:
            TransportError: If the request fails or times out
            HTTPStatusError: If the service answers with anything other than 200
        """
        # Headers, including the api-key, live on the session
        try:
            resp = self.session.post(self.url, data=body, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            raise TransportError(f"request timed out after {self.timeout:g} seconds") from e
        except requests.exceptions.RequestException as e:
            raise TransportError(e) from e
        except ValueError as e:
            # http.client rejects header values it cannot encode (UnicodeEncodeError)
            raise TransportError(e) from e

        if resp.status_code != 200:
            raise HTTPStatusError(resp.status_code, resp.text)

        return resp.content

    def complete(self, transcript: Transcript) -> ChatResponse:
        """
        Send the full transcript and decode the service reply.

        Args:
            transcript: Every message of the conversation so far, in order

        Returns:
            The decoded response; it may hold no choices

        Raises:
            ChatError: Any encoding, transport, status or decoding failure
        """
        request = ChatRequest(model=self.settings.model_name, messages=transcript)
        body = encode_request(request)
        return decode_response(self.post(body))

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> AzureOpenAIChat:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
