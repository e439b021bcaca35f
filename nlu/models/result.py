"""NLU result model."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from config.constants import QNAS_DIM
from .classification import ClassificationResult
from .entities import Entity


@dataclass
class NLUResult:
    """
    Результат обработки предложения NLU пайплайном.

    Attributes:
        intents: Намерения, в порядке, заданном классификатором
        entities: Сущности, в порядке регистрации экстракторов
    """
    intents: List[ClassificationResult] = field(default_factory=list)
    entities: List[Entity] = field(default_factory=list)

    def get_entity(self, dim: str) -> Optional[Entity]:
        """Получить первую сущность определённого типа."""
        for entity in self.entities:
            if entity.dim == dim:
                return entity
        return None

    def get_entities(self, dim: str) -> List[Entity]:
        """Получить все сущности определённого типа."""
        return [e for e in self.entities if e.dim == dim]

    @property
    def qnas(self) -> List[Any]:
        """Совпадения QnA (пустой список, если QnA не вызывался)."""
        entity = self.get_entity(QNAS_DIM)
        if entity is None or not entity.value:
            return []
        return list(entity.value)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "intents": [intent.to_dict() for intent in self.intents],
            "entities": [entity.to_dict() for entity in self.entities],
        }
