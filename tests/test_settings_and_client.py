from openai import AzureOpenAI, OpenAI

from app_settings import DEFAULT_AZURE_API_VERSION, Settings
from llm_client import create_chat_client


def test_defaults_without_environment():
    settings = Settings.from_env()

    assert settings.openai_api_key is None
    assert not settings.openai_configured
    assert settings.model_name == "gpt-4o-mini"
    assert settings.azure_api_version == DEFAULT_AZURE_API_VERSION
    assert settings.fallback_on_missing_key is False
    assert settings.log_level == "INFO"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", " sk-live ")
    monkeypatch.setenv("OPENAI_MODEL", "gpt-4o")
    monkeypatch.setenv("FALLBACK_ON_MISSING_KEY", "Yes")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings.from_env()

    assert settings.openai_api_key == "sk-live"
    assert settings.model_name == "gpt-4o"
    assert settings.fallback_on_missing_key is True
    assert settings.log_level == "DEBUG"


def test_blank_key_is_not_configured(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "   ")
    assert not Settings.from_env().openai_configured


def test_azure_key_and_deployment(monkeypatch):
    monkeypatch.setenv("AZURE_OPENAI_API_KEY", "azure-key")
    monkeypatch.setenv("AZURE_OPENAI_API_BASE", "https://example.openai.azure.com/")
    monkeypatch.setenv("AZURE_OPENAI_DEPLOYMENT", "pets-gpt")

    settings = Settings.from_env()

    assert settings.openai_api_key == "azure-key"
    assert settings.use_azure
    assert settings.model_name == "pets-gpt"


def test_openai_client_without_retries():
    client = create_chat_client(Settings(openai_api_key="sk-test"))

    assert isinstance(client, OpenAI)
    assert client.max_retries == 0


def test_azure_client_without_retries():
    settings = Settings(
        openai_api_key="azure-key",
        azure_api_base="https://example.openai.azure.com/",
        azure_deployment="pets-gpt",
    )

    client = create_chat_client(settings)

    assert isinstance(client, AzureOpenAI)
    assert client.max_retries == 0
