"""
Базовый HTTP клиент для сервисов Botfuel.

Общий жизненный цикл httpx.AsyncClient и перевод ошибок транспорта
в TransportError для trainer, QnA и spellchecking.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from config.constants import API_TIMEOUT_SECONDS
from utils import setup_logger
from utils.errors import TransportError

logger = setup_logger(name="botfuel_client", level=logging.INFO)


class BotfuelClient:
    """
    Базовый клиент удалённого сервиса.

    Один запрос на вызов, без повторов: ошибка сети или HTTP статус
    передаются вызывающему как TransportError.
    """

    SERVICE_NAME = "botfuel"

    def __init__(
        self,
        base_url: str,
        headers: Optional[Dict[str, str]] = None,
        timeout: float = API_TIMEOUT_SECONDS,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url
        self.headers = dict(headers or {})
        self.timeout = timeout
        self._client = client
        self._owns_client = client is None

    async def open(self):
        """Создать HTTP клиент заранее (вызывается из init пайплайна)."""
        await self._get_client()

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                headers=self.headers,
                timeout=httpx.Timeout(self.timeout),
            )
        return self._client

    async def close(self):
        if self._client and self._owns_client:
            await self._client.aclose()
        self._client = None

    async def __aenter__(self):
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc_value, traceback):
        await self.close()

    async def _request(self, method: str, url: str, **kwargs) -> Any:
        """
        Выполнить запрос и вернуть JSON ответа.

        Args:
            method: HTTP метод
            url: Полный URL
            **kwargs: Параметры httpx (params, json)

        Returns:
            Декодированный JSON

        Raises:
            TransportError: Ошибка сети, HTTP статус >= 400 или не-JSON ответ
        """
        client = await self._get_client()
        # Заголовки передаём явно: внешний клиент мог быть создан без них
        headers = {**self.headers, **kwargs.pop("headers", {})}
        try:
            response = await client.request(method, url, headers=headers, **kwargs)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"Ошибка {self.SERVICE_NAME}: HTTP {e.response.status_code}")
            raise TransportError(
                self.SERVICE_NAME,
                f"HTTP {e.response.status_code} from {url}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Ошибка {self.SERVICE_NAME}: {e}")
            raise TransportError(self.SERVICE_NAME, str(e) or type(e).__name__) from e
        except ValueError as e:
            logger.error(f"Ошибка {self.SERVICE_NAME}: некорректный JSON")
            raise TransportError(self.SERVICE_NAME, f"invalid JSON from {url}") from e
