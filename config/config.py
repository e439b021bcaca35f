from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from config.constants import (
    APP_ID_HEADER,
    APP_KEY_HEADER,
    DEFAULT_LOCALE,
    QNA_API_BASE_URL,
    SPELLCHECKING_API_BASE_URL,
    TRAINER_API_BASE_URL,
)
from utils.errors import ConfigurationError


class QnaMode(Enum):
    """
    Порядок вызова QnA относительно локальной классификации.

    Attributes:
        BEFORE: Сначала QnA, локальная классификация только если QnA пуст
        AFTER: Сначала локальная классификация, QnA только если намерений нет
    """
    BEFORE = "before"
    AFTER = "after"


@dataclass(frozen=True)
class NLUConfig:
    """
    Конфигурация NLU пайплайна. Не меняется после создания пайплайна.

    Attributes:
        path: Корневая папка бота (справочно, пайплайн её не читает:
            плагины передаются явно)
        locale: Язык встроенных экстракторов
        qna: Режим QnA или None
        spellchecking: Ключ словаря или None
        multi_intent: Оставлять до двух намерений после фильтра
    """
    path: str = "."
    locale: str = DEFAULT_LOCALE
    qna: Optional[QnaMode] = None
    spellchecking: Optional[str] = None
    multi_intent: bool = False

    def __post_init__(self):
        object.__setattr__(self, "qna", parse_qna_mode(self.qna))


@dataclass(frozen=True)
class ServiceCredentials:
    """Ключи и адреса Botfuel API из переменных окружения"""
    # Секреты
    app_token: str
    app_id: str
    app_key: str

    # Адреса сервисов
    trainer_api_url: str = TRAINER_API_BASE_URL
    qna_api_url: str = QNA_API_BASE_URL
    spellchecking_api_url: str = SPELLCHECKING_API_BASE_URL

    def __post_init__(self):
        for name in ("app_token", "app_id", "app_key"):
            if not getattr(self, name):
                raise ConfigurationError(f"{name} is required for using the nlu service")
        object.__setattr__(self, "trainer_api_url", normalize_base_url(self.trainer_api_url))
        object.__setattr__(self, "qna_api_url", normalize_base_url(self.qna_api_url))

    def auth_headers(self) -> dict:
        """Заголовки App-Id / App-Key для QnA и spellchecking."""
        return {APP_ID_HEADER: self.app_id, APP_KEY_HEADER: self.app_key}


@dataclass(frozen=True)
class LoggingConfig:
    LOG_LEVEL: str
    LOG_FILE: str


def parse_qna_mode(value: Union[QnaMode, str, None]) -> Optional[QnaMode]:
    """
    Привести значение режима QnA к QnaMode.

    Raises:
        ConfigurationError: Если значение не "before", "after" или None
    """
    if value is None or isinstance(value, QnaMode):
        return value
    try:
        return QnaMode(str(value).lower())
    except ValueError:
        raise ConfigurationError(
            f"Unknown qna mode {value!r}, expected 'before', 'after' or nothing"
        ) from None


def normalize_base_url(url: str) -> str:
    """Добавить завершающий слэш к базовому URL."""
    if not url.endswith("/"):
        url += "/"
    return url


def load_credentials() -> ServiceCredentials:
    """
    Загрузка ключей Botfuel из переменных окружения

    Returns:
        ServiceCredentials: Ключи и адреса сервисов

    Raises:
        ConfigurationError: Если не найдена обязательная переменная
    """
    import os
    from dotenv import load_dotenv

    load_dotenv()

    required = ("BOTFUEL_APP_TOKEN", "BOTFUEL_APP_ID", "BOTFUEL_APP_KEY")
    for name in required:
        if not os.getenv(name):
            raise ConfigurationError(f"{name} is required for using the nlu service")

    return ServiceCredentials(
        app_token=os.getenv("BOTFUEL_APP_TOKEN"),
        app_id=os.getenv("BOTFUEL_APP_ID"),
        app_key=os.getenv("BOTFUEL_APP_KEY"),
        trainer_api_url=os.getenv("BOTFUEL_TRAINER_API_URL") or TRAINER_API_BASE_URL,
        qna_api_url=os.getenv("BOTFUEL_QNA_API_URL") or QNA_API_BASE_URL,
        spellchecking_api_url=os.getenv("BOTFUEL_SPELLCHECKING_API_URL") or SPELLCHECKING_API_BASE_URL,
    )


def load_logging_config() -> LoggingConfig:
    import os
    from dotenv import load_dotenv

    load_dotenv()

    return LoggingConfig(
        LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO"),
        LOG_FILE=os.getenv("LOG_FILE", "logs/nlu.log"),
    )
