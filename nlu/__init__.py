"""
NLU (Natural Language Understanding) модуль.

Обеспечивает понимание пользовательских предложений:
- Проверка орфографии
- Поиск ответов в базе QnA
- Извлечение сущностей (entities)
- Классификация намерений (intents) с необязательным фильтром

Пайплайн: from nlu.pipeline import NLUPipeline
"""

from .models import (
    Entity,
    ClassificationResult,
    NLUResult,
)
from .extractors import Extractor, CompositeExtractor, BooleanExtractor
from .classification_filter import ClassificationFilter, apply_classification_filter

__all__ = [
    # Models
    "Entity",
    "ClassificationResult",
    "NLUResult",
    # Extractors
    "Extractor",
    "CompositeExtractor",
    "BooleanExtractor",
    # Filter
    "ClassificationFilter",
    "apply_classification_filter",
]
