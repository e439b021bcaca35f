"""NLU Extractors - экстракторы сущностей."""

from .base import Extractor
from .composite_extractor import CompositeExtractor
from .boolean_extractor import BooleanExtractor

__all__ = [
    "Extractor",
    "CompositeExtractor",
    "BooleanExtractor",
]
