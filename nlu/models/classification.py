"""Classification result model for NLU."""

from dataclasses import dataclass
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class ClassificationResult:
    """
    Результат классификации намерения.

    Порядок результатов задаёт классификатор (по убыванию уверенности),
    пайплайн его не пересортировывает.

    Attributes:
        label: Название намерения
        value: Уверенность (0.0 - 1.0)
    """
    label: str
    value: float

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ClassificationResult":
        return cls(label=data["label"], value=float(data["value"]))

    def to_dict(self) -> Dict[str, Any]:
        return {"label": self.label, "value": self.value}

    def is_confident(self, threshold: float = 0.7) -> bool:
        """Проверяет, достаточно ли высокая уверенность."""
        return self.value >= threshold
