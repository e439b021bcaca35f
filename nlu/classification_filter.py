"""
Classification filter hook.

Необязательная пользовательская функция, которая переранжирует
результаты классификации с учётом контекста диалога.
"""

import inspect
import logging
from typing import Any, Awaitable, Callable, List, Optional, Sequence, Union

from config.constants import MULTI_INTENT_LIMIT, SINGLE_INTENT_LIMIT
from nlu.models import ClassificationResult
from utils import setup_logger
from utils.errors import FilterError

logger = setup_logger(name="classification_filter", level=logging.INFO)

ClassificationFilter = Callable[
    [List[ClassificationResult], Any],
    Union[Awaitable[Sequence[ClassificationResult]], Sequence[ClassificationResult]],
]


def intent_limit(multi_intent: bool) -> int:
    return MULTI_INTENT_LIMIT if multi_intent else SINGLE_INTENT_LIMIT


async def apply_classification_filter(
    results: List[ClassificationResult],
    context: Any,
    classification_filter: Optional[ClassificationFilter],
    multi_intent: bool = False,
) -> List[ClassificationResult]:
    """
    Применить фильтр и усечь результаты.

    Без фильтра результаты возвращаются как есть, без усечения.
    С фильтром результат усекается до 1 (или 2 при multi_intent).

    Raises:
        FilterError: Фильтр завершился с ошибкой
    """
    if classification_filter is None:
        return results

    try:
        filtered = classification_filter(list(results), context)
        if inspect.isawaitable(filtered):
            filtered = await filtered
    except Exception as e:
        logger.error(f"Ошибка фильтра классификации: {e}")
        raise FilterError(f"Classification filter failed: {e}") from e

    if not isinstance(filtered, Sequence) or isinstance(filtered, (str, bytes)):
        logger.error(f"Фильтр классификации вернул {type(filtered).__name__}")
        raise FilterError(
            f"Classification filter must return a sequence, got {type(filtered).__name__}"
        )

    return list(filtered)[:intent_limit(multi_intent)]
