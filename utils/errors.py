"""Иерархия ошибок NLU."""

from typing import Optional


class NLUError(Exception):
    """Базовая ошибка NLU пайплайна."""


class ConfigurationError(NLUError):
    """Некорректная или неполная конфигурация (например, нет ключей API)."""


class ExtractorLoadError(NLUError):
    """Не удалось загрузить или создать плагин (экстрактор, фильтр)."""


class TransportError(NLUError):
    """
    Ошибка обращения к удалённому сервису.

    Attributes:
        service: Имя сервиса (trainer, qna, spellchecking)
        status_code: HTTP статус, если сервис ответил
    """

    def __init__(self, service: str, message: str, status_code: Optional[int] = None):
        super().__init__(f"{service}: {message}")
        self.service = service
        self.status_code = status_code


class FilterError(NLUError):
    """Пользовательский фильтр классификации завершился с ошибкой."""
