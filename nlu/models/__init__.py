"""NLU Models - dataclasses для работы с NLU."""

from .entities import Entity
from .classification import ClassificationResult
from .result import NLUResult

__all__ = [
    "Entity",
    "ClassificationResult",
    "NLUResult",
]
