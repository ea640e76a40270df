import logging
import os
from pathlib import Path


def create_logger(
    log_level: str = "INFO",
    logger_name: str = "azure-chat",
    logs_dir: str | Path | None = None,
) -> logging.Logger:
    """
    Create a logger that outputs to the console and optionally to a file.

    Console output goes to stderr so it never mixes with the chat transcript
    printed on stdout.

    Args:
        log_level (str): Logging level (e.g., "INFO", "DEBUG").
        logger_name (str): Name for the logger instance.
        logs_dir (str | Path | None): Directory for log files. If None, only console
            logging is configured.

    Returns:
        logging.Logger: Configured logger instance.
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")

    if not logger.hasHandlers():  # Prevent handler duplication
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if logs_dir is not None:
            logs_path = Path(logs_dir)
            try:
                logs_path.mkdir(parents=True, exist_ok=True)
                file_handler = logging.FileHandler(logs_path / f"{logger_name}.log")
                file_handler.setFormatter(formatter)
                logger.addHandler(file_handler)
            except OSError as e:
                logger.warning(f"File logging disabled ({logs_path}): {e}")

    return logger


def get_parameters(param_names: list[str]) -> dict[str, str | None]:
    """
    Retrieve parameters from the process environment.

    Returns:
        A dict mapping each lower-case parameter name to its value, or None if unset.
    """
    result: dict[str, str | None] = {}
    for param_name in param_names:
        # Parameters are stored in the environment in uppercase
        # but returned in lowercase
        result[param_name.lower()] = os.getenv(param_name.upper())
    return result
