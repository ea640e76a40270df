import math
from dataclasses import dataclass

from azure_chat.infrastructure.platform_manager import get_parameters

# Constants that don't change
DEFAULT_API_VERSION = "2023-06-01-preview"
DEFAULT_REQUEST_TIMEOUT = 60.0  # seconds
DEFAULT_SYSTEM_PROMPT = "You are a helpful assistant."
DEFAULT_LOG_LEVEL = "WARNING"

MISSING_SETTINGS_MESSAGE = (
    "Please set ENDPOINT_URL, API_KEY, and MODEL_NAME environment variables."
)


class MissingSettingsError(ValueError):
    """A required setting is empty or unset."""


@dataclass
class ChatSettings:
    """Chat client configuration loaded from the parameter source."""

    # Required settings
    endpoint_url: str
    api_key: str
    model_name: str

    # Optional settings
    api_version: str = DEFAULT_API_VERSION
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    system_prompt: str = DEFAULT_SYSTEM_PROMPT
    log_level: str = DEFAULT_LOG_LEVEL
    log_dir: str | None = None

    @property
    def completions_url(self) -> str:
        return (
            f"{self.endpoint_url}/openai/deployments/{self.model_name}"
            f"/chat/completions?api-version={self.api_version}"
        )


def _parse_timeout(raw: str | None) -> float:
    if not raw:
        return DEFAULT_REQUEST_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError as e:
        raise ValueError(f"Configuration value is invalid: REQUEST_TIMEOUT ({raw!r})") from e
    if not math.isfinite(timeout) or timeout <= 0:
        raise ValueError(f"Configuration value is invalid: REQUEST_TIMEOUT ({raw!r})")
    return timeout


class Config:
    """Singleton configuration manager for the chat client."""

    _instance = None
    _settings = None

    def __new__(cls) -> "Config":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def get_settings(self) -> ChatSettings:
        """Get chat settings, loading them from the parameter source if not already cached."""
        if self._settings is None:
            self._settings = self._load_settings()
        return self._settings

    def reset(self) -> None:
        """Drop cached settings so the next call reloads them."""
        self._settings = None

    def _load_settings(self) -> ChatSettings:
        """Load settings from the configured parameter source."""
        params = get_parameters([
            "endpoint_url",
            "api_key",
            "model_name",
            "api_version",
            "request_timeout",
            "system_prompt",
            "log_level",
            "log_dir",
        ])

        settings = ChatSettings(
            endpoint_url=(params["endpoint_url"] or "").strip().rstrip("/"),
            api_key=(params["api_key"] or "").strip(),
            model_name=(params["model_name"] or "").strip(),
            api_version=params["api_version"] or DEFAULT_API_VERSION,
            request_timeout=_parse_timeout(params["request_timeout"]),
            system_prompt=params["system_prompt"] or DEFAULT_SYSTEM_PROMPT,
            log_level=(params["log_level"] or DEFAULT_LOG_LEVEL).upper(),
            log_dir=params["log_dir"] or None,
        )

        # Validate settings
        self._validate_settings(settings)

        return settings

    def _validate_settings(self, settings: ChatSettings) -> None:
        """Validate that all required settings have values."""
        for field in ("endpoint_url", "api_key", "model_name"):
            if not getattr(settings, field):
                raise MissingSettingsError(f"Configuration value is invalid: {field.upper()}")


# Create singleton instance
config = Config()


# Convenience functions
def get_settings() -> ChatSettings:
    """Get chat settings from the singleton config."""
    return config.get_settings()
