import pytest

from azure_chat.app.config import (
    DEFAULT_API_VERSION,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_SYSTEM_PROMPT,
    MissingSettingsError,
    config,
    get_settings,
)


@pytest.fixture
def required_env(monkeypatch):
    monkeypatch.setenv("ENDPOINT_URL", "https://example.openai.azure.com/")
    monkeypatch.setenv("API_KEY", "secret")
    monkeypatch.setenv("MODEL_NAME", "gpt-4")


def test_settings_load_from_environment(required_env):
    settings = get_settings()

    assert settings.endpoint_url == "https://example.openai.azure.com"
    assert settings.api_key == "secret"
    assert settings.model_name == "gpt-4"
    assert settings.api_version == DEFAULT_API_VERSION
    assert settings.request_timeout == DEFAULT_REQUEST_TIMEOUT
    assert settings.system_prompt == DEFAULT_SYSTEM_PROMPT
    assert settings.completions_url == (
        "https://example.openai.azure.com/openai/deployments/gpt-4"
        "/chat/completions?api-version=2023-06-01-preview"
    )


def test_optional_settings_override_defaults(required_env, monkeypatch):
    monkeypatch.setenv("API_VERSION", "2024-02-01")
    monkeypatch.setenv("REQUEST_TIMEOUT", "2.5")
    monkeypatch.setenv("SYSTEM_PROMPT", "Be terse.")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.completions_url.endswith("?api-version=2024-02-01")
    assert settings.request_timeout == 2.5
    assert settings.system_prompt == "Be terse."
    assert settings.log_level == "DEBUG"


def test_original_variable_names_are_accepted(monkeypatch):
    monkeypatch.setenv("AZURE_OPENAI_ENDPOINT", "https://legacy.openai.azure.com")
    monkeypatch.setenv("AZURE_OPENAI_API_KEY", "legacy-secret")
    monkeypatch.setenv("AZURE_OPENAI_MODEL", "gpt-35-turbo")

    settings = get_settings()

    assert settings.endpoint_url == "https://legacy.openai.azure.com"
    assert settings.api_key == "legacy-secret"
    assert settings.model_name == "gpt-35-turbo"


@pytest.mark.parametrize("missing", ["ENDPOINT_URL", "API_KEY", "MODEL_NAME"])
def test_empty_required_setting_is_rejected(required_env, monkeypatch, missing):
    monkeypatch.setenv(missing, "")

    with pytest.raises(MissingSettingsError, match=missing):
        get_settings()


@pytest.mark.parametrize("value", ["soon", "0", "-3", "nan", "inf", "-inf"])
def test_invalid_timeout_is_rejected(required_env, monkeypatch, value):
    monkeypatch.setenv("REQUEST_TIMEOUT", value)

    with pytest.raises(ValueError, match="REQUEST_TIMEOUT"):
        get_settings()


def test_settings_are_cached_until_reset(required_env, monkeypatch):
    first = get_settings()
    monkeypatch.setenv("MODEL_NAME", "other")

    assert get_settings() is first

    config.reset()
    assert get_settings().model_name == "other"


def test_empty_primary_name_falls_back_to_original_name(required_env, monkeypatch):
    monkeypatch.setenv("API_KEY", "")
    monkeypatch.setenv("AZURE_OPENAI_API_KEY", "legacy-secret")

    assert get_settings().api_key == "legacy-secret"


def test_log_dir_is_optional(required_env, monkeypatch, tmp_path):
    assert get_settings().log_dir is None

    config.reset()
    monkeypatch.setenv("LOG_DIR", str(tmp_path))
    assert get_settings().log_dir == str(tmp_path)
