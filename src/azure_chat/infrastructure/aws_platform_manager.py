"""
Chat parameters stored in the AWS SSM Parameter Store.

All parameters live as leaves of one path (`CHAT_PARAMETER_PATH`, default
`/apps/prod/chat/`), e.g. `/apps/prod/chat/api_key`. SecureString leaves are
decrypted on read.
"""

from __future__ import annotations

import os

import boto3

PARAMETER_PATH_ENV = "CHAT_PARAMETER_PATH"
DEFAULT_PARAMETER_PATH = "/apps/prod/chat/"


def parameter_path() -> str:
    """Return the configured parameter path with exactly one trailing slash."""
    path = os.getenv(PARAMETER_PATH_ENV) or DEFAULT_PARAMETER_PATH
    return path.rstrip("/") + "/"


def get_parameters(param_names: list[str]) -> dict[str, str | None]:
    """
    Read every leaf under the chat path in one paginated sweep.

    Args:
        param_names: Leaf names to return; matching is case-insensitive.

    Returns:
        A dict mapping each requested lower-case name to its value, or None if absent.
    """
    wanted = {name.lower() for name in param_names}
    result: dict[str, str | None] = dict.fromkeys(wanted)
    if not wanted:
        return result

    base = parameter_path()
    ssm = boto3.client("ssm")
    paginator = ssm.get_paginator("get_parameters_by_path")
    for page in paginator.paginate(Path=base, Recursive=False, WithDecryption=True):
        for p in page.get("Parameters", []):
            leaf = p["Name"][len(base):].lower()
            if leaf in wanted:
                result[leaf] = p["Value"]

    return result
