import logging

from azure_chat.services.chat_service import TurnResult


def log_turn_result(result: TurnResult, logger: logging.Logger) -> None:
    # Failures are already printed on stdout
    if result.succeeded:
        response = result.response
        logger.info(f"Reply created by model: {response.model if response else 'Unknown'}")
        logger.info(f"Usage: {response.usage if response and response.usage else 'Unknown'}")
    else:
        logger.info(f"Turn failed: {result.error}")
    logger.info(f"Transcript length: {len(result.transcript)}")
