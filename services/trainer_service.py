"""
Trainer Classifier - классификация намерений через Botfuel Trainer API.
"""

import logging
from typing import List, Optional, Sequence

import httpx

from config.config import ServiceCredentials
from config.constants import APP_ID_HEADER, APP_KEY_HEADER, BOT_ID_HEADER
from nlu.models import ClassificationResult, Entity
from services.base import BotfuelClient
from utils import setup_logger
from utils.errors import TransportError

logger = setup_logger(name="trainer_classifier", level=logging.INFO)


class TrainerClassifier(BotfuelClient):
    """
    Классификатор намерений на базе удалённого Trainer API.

    Возвращает все намерения в порядке, заданном сервисом.
    Фильтрация и усечение выполняются пайплайном.
    """

    SERVICE_NAME = "trainer"

    def __init__(
        self,
        credentials: ServiceCredentials,
        client: Optional[httpx.AsyncClient] = None,
        **kwargs,
    ):
        super().__init__(
            base_url=credentials.trainer_api_url,
            headers={
                BOT_ID_HEADER: credentials.app_token,
                APP_ID_HEADER: credentials.app_id,
                APP_KEY_HEADER: credentials.app_key,
            },
            client=client,
            **kwargs,
        )

    @property
    def classify_url(self) -> str:
        return f"{self.base_url}classify"

    async def compute(
        self,
        sentence: str,
        entities: Optional[Sequence[Entity]] = None,
    ) -> List[ClassificationResult]:
        """
        Классифицировать предложение.

        Args:
            sentence: Предложение пользователя
            entities: Извлечённые сущности (сервис их не использует)

        Returns:
            Список ClassificationResult

        Raises:
            TransportError: Ошибка запроса или неожиданный формат ответа
        """
        logger.debug(f"compute: {sentence!r}")
        data = await self._request("GET", self.classify_url, params={"sentence": sentence})

        if not isinstance(data, list):
            raise TransportError(self.SERVICE_NAME, f"expected a list, got {type(data).__name__}")

        try:
            results = [ClassificationResult.from_dict(item) for item in data]
        except (KeyError, TypeError, ValueError) as e:
            raise TransportError(self.SERVICE_NAME, f"malformed classification: {e}") from e

        logger.debug(f"compute: intents {results}")
        return results
