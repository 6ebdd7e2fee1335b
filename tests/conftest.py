from types import SimpleNamespace

import httpx
import openai
import pytest

import llm_client
from app_settings import Settings
from pet_profile import PetProfile

ENV_KEYS = [
    "OPENAI_API_KEY",
    "AZURE_OPENAI_API_KEY",
    "OPENAI_MODEL",
    "OPENAI_BASE_URL",
    "AZURE_OPENAI_API_BASE",
    "AZURE_OPENAI_API_VERSION",
    "AZURE_OPENAI_DEPLOYMENT",
    "FALLBACK_ON_MISSING_KEY",
    "LOG_LEVEL",
]


class FakeCompletions:
    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeChatClient:
    """Stands in for OpenAI/AzureOpenAI: only chat.completions.create is used."""

    def __init__(self, content=None, error=None):
        self.completions = FakeCompletions(content=content, error=error)
        self.chat = SimpleNamespace(completions=self.completions)


def make_status_error(status_code, body=None):
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    response = httpx.Response(status_code, request=request, json=body or {})
    return openai.APIStatusError(f"Error code: {status_code}", response=response, body=body)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    yield monkeypatch


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    return "sk-test"


@pytest.fixture
def settings():
    return Settings(openai_api_key="sk-test", openai_model="gpt-4o-mini")


@pytest.fixture
def fake_client(monkeypatch):
    """Install a fake chat client behind llm_client.create_chat_client and return it."""
    def install(content=None, error=None):
        client = FakeChatClient(content=content, error=error)
        monkeypatch.setattr(llm_client, "create_chat_client", lambda settings: client)
        return client
    return install


@pytest.fixture
def labrador():
    return PetProfile(petType="Dog", breed="Labrador", age="3", weight="60", activityLevel="High", notes="")


@pytest.fixture
def app():
    from backend import app as flask_app
    flask_app.config.update(TESTING=True)
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()
