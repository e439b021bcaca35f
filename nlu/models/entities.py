"""Entity models for NLU."""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Mapping, Optional, Union


@dataclass
class Entity:
    """
    Сущность, извлечённая из предложения.

    Attributes:
        dim: Тип (измерение) сущности, например "qnas" или "system:boolean"
        value: Значение, зависит от экстрактора
        body: Фрагмент предложения, из которого извлечена сущность
        start: Начальная позиция в предложении
        end: Конечная позиция в предложении
    """
    dim: str
    value: Any
    body: Optional[str] = None
    start: Optional[int] = None
    end: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Entity":
        """Создать сущность из словаря с ключами dim/value."""
        return cls(
            dim=data["dim"],
            value=data.get("value"),
            body=data.get("body"),
            start=data.get("start"),
            end=data.get("end"),
        )

    @classmethod
    def coerce(cls, item: Union["Entity", Mapping[str, Any]]) -> "Entity":
        """Принять Entity или словарь и вернуть Entity."""
        if isinstance(item, cls):
            return item
        if isinstance(item, Mapping):
            return cls.from_dict(item)
        raise TypeError(f"Cannot convert {type(item).__name__} to Entity")

    def to_dict(self) -> Dict[str, Any]:
        """Преобразовать в словарь без пустых полей."""
        return {k: v for k, v in asdict(self).items() if v is not None or k == "value"}
