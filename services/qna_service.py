"""QnA client - поиск готовых ответов в базе вопросов-ответов."""

import logging
from typing import Any, Dict, List, Optional

import httpx

from config.config import ServiceCredentials
from services.base import BotfuelClient
from utils import setup_logger
from utils.errors import TransportError

logger = setup_logger(name="qna_client", level=logging.INFO)


class QnaClient(BotfuelClient):
    """Клиент Botfuel QnA API. Совпадения возвращаются без изменений."""

    SERVICE_NAME = "qna"

    def __init__(
        self,
        credentials: ServiceCredentials,
        client: Optional[httpx.AsyncClient] = None,
        **kwargs,
    ):
        super().__init__(
            base_url=credentials.qna_api_url,
            headers=credentials.auth_headers(),
            client=client,
            **kwargs,
        )

    async def get_matching_qnas(self, sentence: str) -> List[Dict[str, Any]]:
        """
        Найти вопросы-ответы, подходящие к предложению.

        Args:
            sentence: Предложение пользователя

        Returns:
            Список совпадений (может быть пустым)
        """
        logger.debug(f"get_matching_qnas: {sentence!r}")
        data = await self._request("POST", f"{self.base_url}classify", json={"sentence": sentence})
        if not isinstance(data, list):
            raise TransportError(self.SERVICE_NAME, f"expected a list, got {type(data).__name__}")
        return data
