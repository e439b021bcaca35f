"""Общие фикстуры для тестов NLU."""

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from config.config import ServiceCredentials
from nlu.models import ClassificationResult

CREDENTIAL_VARS = ("BOTFUEL_APP_TOKEN", "BOTFUEL_APP_ID", "BOTFUEL_APP_KEY")


def service_mock():
    """Заглушка сервиса с асинхронными open/close."""
    mock = MagicMock()
    mock.open = AsyncMock()
    mock.close = AsyncMock()
    return mock


@pytest.fixture
def credentials():
    return ServiceCredentials(
        app_token="bot-token",
        app_id="app-id",
        app_key="app-key",
        trainer_api_url="https://trainer.test/api/v0",
        qna_api_url="https://qna.test/api/v1/bots",
        spellchecking_api_url="https://nlp.test/spellchecking",
    )


@pytest.fixture
def clean_env(monkeypatch):
    """Окружение без ключей Botfuel и без чтения .env."""
    for name in CREDENTIAL_VARS + ("BOTFUEL_TRAINER_API_URL",):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("dotenv.load_dotenv", lambda *args, **kwargs: False)
    return monkeypatch


@pytest.fixture
def classifier():
    """Классификатор, возвращающий два намерения."""
    mock = service_mock()
    mock.compute = AsyncMock(return_value=[
        ClassificationResult("lights_off", 0.92),
        ClassificationResult("lights_on", 0.05),
    ])
    return mock


@pytest.fixture
def qna():
    mock = service_mock()
    mock.get_matching_qnas = AsyncMock(return_value=[{"questions": ["hi?"], "answer": "hello"}])
    return mock


@pytest.fixture
def spellchecker():
    from services.spellchecking_service import SpellcheckResult

    mock = service_mock()
    mock.compute = AsyncMock(side_effect=lambda sentence, key: SpellcheckResult(
        correct_sentence="turn off the light",
        original_sentence=sentence,
    ))
    return mock


class RecordingTransport:
    """Обработчик для httpx.MockTransport, запоминающий запросы."""

    def __init__(self, response=None, status_code=200, error=None):
        self.response = response
        self.status_code = status_code
        self.error = error
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, json=self.response)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))
