"""
Composite Extractor - реестр экстракторов сущностей.

Запускает все экстракторы на одном предложении и объединяет
результаты в порядке регистрации.
"""

import asyncio
import logging
from typing import List, Sequence

from nlu.models import Entity
from utils import setup_logger
from .base import Extractor

logger = setup_logger(name="composite_extractor", level=logging.INFO)


class CompositeExtractor(Extractor):
    """
    Упорядоченный набор экстракторов.

    Экстракторы вызываются параллельно, но результат всегда
    A-results ++ B-results для порядка [A, B], независимо от того,
    кто завершился первым. Ошибка любого экстрактора прерывает
    вычисление.
    """

    def __init__(self, extractors: Sequence[Extractor]):
        self.extractors = tuple(extractors)
        logger.debug(
            f"Инициализирован CompositeExtractor: {[type(e).__name__ for e in self.extractors]}"
        )

    async def compute(self, sentence: str) -> List[Entity]:
        """
        Извлечь сущности всеми экстракторами.

        Args:
            sentence: Предложение пользователя

        Returns:
            Объединённый список Entity
        """
        logger.debug(f"compute: {sentence!r}")
        tasks = [
            asyncio.ensure_future(self._run(extractor, sentence))
            for extractor in self.extractors
        ]
        try:
            results = await asyncio.gather(*tasks)
        except BaseException:
            # Остальные экстракторы прерываем, их ошибки собираем
            for task in tasks:
                if not task.done():
                    task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        entities = []
        for extractor_entities in results:
            entities.extend(extractor_entities)
        return entities

    async def _run(self, extractor: Extractor, sentence: str) -> List[Entity]:
        try:
            items = await extractor.compute(sentence)
        except Exception as e:
            logger.error(f"Ошибка экстрактора {type(extractor).__name__}: {e}")
            raise
        return [Entity.coerce(item) for item in items or []]
