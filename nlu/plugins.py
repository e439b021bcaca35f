"""
Загрузка плагинов NLU: пользовательских экстракторов и фильтра классификации.

Плагин задаётся явно: экземпляром, классом или строкой "package.module:Name".
"""

import importlib
import inspect
import logging
from typing import Any, Callable, Optional, Union

from nlu.extractors import Extractor
from utils import setup_logger
from utils.errors import ExtractorLoadError

logger = setup_logger(name="nlu_plugins", level=logging.INFO)

ExtractorSpec = Union[Extractor, type, str]


def load_object(reference: str) -> Any:
    """
    Импортировать объект по ссылке "package.module:Name".

    Raises:
        ExtractorLoadError: Модуль или атрибут не найден
    """
    module_name, sep, attr = reference.partition(":")
    if not sep or not module_name or not attr:
        raise ExtractorLoadError(f"Invalid plugin reference {reference!r}, expected 'module:Name'")
    try:
        module = importlib.import_module(module_name)
    except Exception as e:
        logger.error(f"Не удалось импортировать плагин {reference}: {e}")
        raise ExtractorLoadError(f"Cannot import {module_name}: {e}") from e

    obj = module
    for part in attr.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise ExtractorLoadError(f"{module_name} has no attribute {attr}") from e
    return obj


def build_extractor(spec: ExtractorSpec) -> Extractor:
    """
    Создать экземпляр экстрактора.

    Класс создаётся с параметрами из его атрибута params.
    """
    if isinstance(spec, str):
        spec = load_object(spec)

    if inspect.isclass(spec):
        params = dict(getattr(spec, "params", None) or {})
        try:
            spec = spec(**params)
        except Exception as e:
            logger.error(f"Не удалось создать экстрактор {spec.__name__}: {e}")
            raise ExtractorLoadError(f"Cannot instantiate {spec.__name__}: {e}") from e

    if not callable(getattr(spec, "compute", None)):
        raise ExtractorLoadError(f"{type(spec).__name__} has no compute(sentence) method")
    return spec


def load_classification_filter(spec: Union[Callable, str, None]) -> Optional[Callable]:
    """Получить функцию фильтра по ссылке или вернуть её как есть."""
    if spec is None:
        return None
    if isinstance(spec, str):
        spec = load_object(spec)
    if not callable(spec):
        raise ExtractorLoadError(f"Classification filter {spec!r} is not callable")
    return spec
