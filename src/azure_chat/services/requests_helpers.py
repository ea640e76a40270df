from __future__ import annotations

import requests


def session_for_endpoint(api_key: str) -> requests.Session:
    """
    Create a requests session for the chat-completions endpoint.

    The session is configured with:
    - the `api-key` header carrying the service secret
    - standard JSON content-type headers

    The session is reused for every turn of one chat and closed by the caller.

    Args:
        api_key: Secret sent in the `api-key` header.

    Returns:
        requests.Session: A configured requests session ready for API calls
    """
    session = requests.Session()
    session.headers.update({
        "Content-Type": "application/json",
        "Accept": "application/json",
        "api-key": api_key,
    })
    return session
