"""Spellchecking client."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import httpx

from config.config import ServiceCredentials
from services.base import BotfuelClient
from utils import setup_logger
from utils.errors import TransportError

logger = setup_logger(name="spellchecking_client", level=logging.INFO)


@dataclass
class SpellcheckResult:
    """
    Результат проверки орфографии.

    Attributes:
        correct_sentence: Исправленное предложение
        original_sentence: Исходное предложение
        raw: Полный ответ сервиса
    """
    correct_sentence: str
    original_sentence: str
    raw: Dict[str, Any] = field(default_factory=dict)


class SpellcheckingClient(BotfuelClient):
    SERVICE_NAME = "spellchecking"

    def __init__(
        self,
        credentials: ServiceCredentials,
        client: Optional[httpx.AsyncClient] = None,
        **kwargs,
    ):
        super().__init__(
            base_url=credentials.spellchecking_api_url,
            headers=credentials.auth_headers(),
            client=client,
            **kwargs,
        )

    async def compute(self, sentence: str, key: str) -> SpellcheckResult:
        """
        Исправить опечатки в предложении.

        Args:
            sentence: Предложение пользователя
            key: Ключ словаря (например, "EN_1")
        """
        data = await self._request(
            "GET", self.base_url, params={"sentence": sentence, "key": key}
        )
        if not isinstance(data, dict) or "correctSentence" not in data:
            raise TransportError(self.SERVICE_NAME, "response has no correctSentence")

        return SpellcheckResult(
            correct_sentence=data["correctSentence"],
            original_sentence=sentence,
            raw=data,
        )
