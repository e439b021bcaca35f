"""Extractor interface for pluggable entity extractors."""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, List, Mapping, Union

from nlu.models import Entity

ExtractedItem = Union[Entity, Mapping[str, Any]]


class Extractor(ABC):
    """
    Абстрактный экстрактор сущностей.

    Экземпляр создаётся один раз при инициализации пайплайна
    и переиспользуется для всех предложений.

    Attributes:
        params: Параметры конструктора, с которыми пайплайн
            создаёт экстрактор, если передан класс
    """

    params: ClassVar[Dict[str, Any]] = {}

    @abstractmethod
    async def compute(self, sentence: str) -> List[ExtractedItem]:
        """Извлечь сущности из предложения."""
