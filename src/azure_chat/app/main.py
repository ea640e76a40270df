#!/usr/bin/env python3
"""
Azure OpenAI Chat Client

An interactive command-line client for an Azure OpenAI chat-completions deployment.
Reads one line at a time, sends the whole conversation on every turn and prints
the assistant's reply. Type 'exit' to quit.
"""

import argparse
import dataclasses
import logging
import math
import sys
from typing import TextIO

from azure_chat.app.config import (
    MISSING_SETTINGS_MESSAGE,
    ChatSettings,
    MissingSettingsError,
    get_settings,
)
from azure_chat.app.logging import log_turn_result
from azure_chat.infrastructure.azure_openai_manager import AzureOpenAIChat
from azure_chat.infrastructure.data_models import Transcript
from azure_chat.infrastructure.platform_manager import create_logger
from azure_chat.services.chat_service import ChatClient, new_transcript, run_turn

BANNER = "Start chatting with the Azure OpenAI model (type 'exit' to quit):"
PROMPT = "You: "
EXIT_COMMAND = "exit"
FAREWELL = "Exiting chat. Goodbye!"


def read_line(stream: TextIO) -> str | None:
    """
    Read one line and strip its terminator.

    Returns:
        The line without its trailing newline, or None at end of input.
    """
    line = stream.readline()
    if line == "":
        return None
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def run_chat(
    client: ChatClient,
    system_prompt: str,
    stdin: TextIO,
    stdout: TextIO,
    logger: logging.Logger,
    *,
    rollback_on_failure: bool = False,
) -> Transcript:
    """
    Run the interactive loop until the user types 'exit' or input ends.

    Returns:
        The final transcript.
    """
    transcript = new_transcript(system_prompt)
    print(BANNER, file=stdout)

    while True:
        print(PROMPT, end="", file=stdout, flush=True)
        try:
            user_input = read_line(stdin)
        except KeyboardInterrupt:
            print(file=stdout)
            user_input = None

        if user_input is None or user_input == EXIT_COMMAND:
            if user_input is None:
                logger.info("End of input")
            print(FAREWELL, file=stdout)
            return transcript

        result = run_turn(
            transcript, user_input, client, rollback_on_failure=rollback_on_failure
        )
        transcript = result.transcript
        log_turn_result(result, logger)

        if result.reply is not None:
            print(f"Assistant: {result.reply.content}", file=stdout)
        else:
            print(result.error, file=stdout)


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Chat with an Azure OpenAI deployment from the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Configuration is read from ENDPOINT_URL, API_KEY and MODEL_NAME
(or AZURE_OPENAI_ENDPOINT, AZURE_OPENAI_API_KEY and AZURE_OPENAI_MODEL).

Examples:
  %(prog)s
  %(prog)s --timeout 30 --system-prompt "Answer in one sentence."
        """,
    )

    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Seconds to wait for each reply (default: REQUEST_TIMEOUT or 60)",
    )

    parser.add_argument(
        "--system-prompt",
        default=None,
        help="System message that seeds the conversation",
    )

    parser.add_argument(
        "--rollback-failed-turns",
        action="store_true",
        help="Drop the user message from the history when its turn fails",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log request details and token usage to stderr",
    )

    args = parser.parse_args(argv)
    if args.timeout is not None and (not math.isfinite(args.timeout) or args.timeout <= 0):
        parser.error("--timeout must be a finite number greater than zero")
    return args


def apply_overrides(settings: ChatSettings, args: argparse.Namespace) -> ChatSettings:
    """Return a copy of the settings with command line overrides applied."""
    overrides: dict[str, object] = {}
    if args.timeout is not None:
        overrides["request_timeout"] = args.timeout
    if args.system_prompt is not None:
        overrides["system_prompt"] = args.system_prompt
    if args.verbose:
        overrides["log_level"] = "INFO"
    return dataclasses.replace(settings, **overrides)


def main(argv: list[str] | None = None) -> None:
    """Load the configuration and run the chat loop."""
    args = parse_arguments(argv)

    try:
        settings = get_settings()
    except MissingSettingsError:
        print(MISSING_SETTINGS_MESSAGE)
        return
    except ValueError as e:
        print(e)
        return

    settings = apply_overrides(settings, args)
    logger = create_logger(
        log_level=settings.log_level, logger_name="azure-chat", logs_dir=settings.log_dir
    )
    logger.info(f"Chatting with deployment {settings.model_name} at {settings.endpoint_url}")

    with AzureOpenAIChat(settings) as client:
        run_chat(
            client,
            settings.system_prompt,
            sys.stdin,
            sys.stdout,
            logger,
            rollback_on_failure=args.rollback_failed_turns,
        )


if __name__ == "__main__":
    main()
