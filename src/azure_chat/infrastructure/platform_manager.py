"""
Parameter source switch.

`CHAT_PARAMETER_SOURCE=aws` reads parameters from the AWS SSM Parameter Store;
anything else (the default) reads them from the process environment. Either way
the older `AZURE_OPENAI_*` names stand in for an empty primary name.
"""

import logging
import os
from pathlib import Path

from azure_chat.infrastructure import local_platform_manager

PARAMETER_SOURCE_ENV = "CHAT_PARAMETER_SOURCE"

PARAMETER_ALIASES = {
    "endpoint_url": "azure_openai_endpoint",
    "api_key": "azure_openai_api_key",
    "model_name": "azure_openai_model",
}


def parameter_source() -> str:
    return (os.getenv(PARAMETER_SOURCE_ENV) or "local").strip().lower()


def get_parameters(param_names: list[str] | str) -> dict[str, str | None]:
    """
    Retrieve parameters from the selected source, resolving aliases.

    Returns:
        A dict mapping each requested lower-case name to its value, or None when
        neither the name nor its alias has a non-empty value.
    """
    if isinstance(param_names, str):
        param_names = [param_names]
    names = [name.lower() for name in param_names]
    lookup = names + [PARAMETER_ALIASES[n] for n in names if n in PARAMETER_ALIASES]

    if parameter_source() == "aws":
        # boto3 is only loaded when the AWS source is selected
        from azure_chat.infrastructure import aws_platform_manager

        raw = aws_platform_manager.get_parameters(lookup)
    else:
        raw = local_platform_manager.get_parameters(lookup)

    result: dict[str, str | None] = {}
    for name in names:
        value = raw.get(name)
        if not value and name in PARAMETER_ALIASES:
            value = raw.get(PARAMETER_ALIASES[name]) or value
        result[name] = value
    return result


def create_logger(
    log_level: str = "INFO",
    logger_name: str = "azure-chat",
    logs_dir: str | Path | None = None,
) -> logging.Logger:
    return local_platform_manager.create_logger(
        log_level=log_level, logger_name=logger_name, logs_dir=logs_dir
    )
