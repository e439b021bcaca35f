"""
NLU Pipeline - основной пайплайн обработки предложений.

Объединяет проверку орфографии, QnA, извлечение сущностей
и классификацию намерений в один вызов compute.
"""

import logging
from typing import Any, List, Optional, Sequence

from config.config import NLUConfig, QnaMode, ServiceCredentials, load_credentials
from config.constants import QNAS_DIM, QNAS_INTENT_LABEL
from nlu.classification_filter import ClassificationFilter, apply_classification_filter
from nlu.extractors import BooleanExtractor, CompositeExtractor, Extractor
from nlu.models import ClassificationResult, Entity, NLUResult
from nlu.plugins import ExtractorSpec, build_extractor, load_classification_filter
from services.qna_service import QnaClient
from services.spellchecking_service import SpellcheckingClient, SpellcheckResult
from services.trainer_service import TrainerClassifier
from utils import setup_logger
from utils.errors import ConfigurationError, NLUError

logger = setup_logger(name="nlu_pipeline", level=logging.INFO)


class NLUPipeline:
    """
    Главный пайплайн NLU.

    Использует:
    - Spellchecking (если задан config.spellchecking)
    - QnA (до или после локальной классификации, см. QnaMode)
    - CompositeExtractor с пользовательскими и встроенными экстракторами
    - TrainerClassifier для намерений
    - необязательный фильтр классификации

    Все вызовы внутри compute последовательны: QnA и локальная
    классификация никогда не выполняются одновременно.
    """

    def __init__(
        self,
        config: NLUConfig,
        credentials: Optional[ServiceCredentials] = None,
        extractors: Sequence[ExtractorSpec] = (),
        classification_filter: Optional[ClassificationFilter] = None,
        classifier: Optional[TrainerClassifier] = None,
        qna: Optional[QnaClient] = None,
        spellchecker: Optional[SpellcheckingClient] = None,
    ):
        """
        Args:
            config: Конфигурация NLU
            credentials: Ключи Botfuel (по умолчанию из окружения)
            extractors: Пользовательские экстракторы (экземпляры, классы
                или ссылки "module:Name"), идут перед встроенными
            classification_filter: Фильтр (функция или ссылка "module:name")
            classifier: Классификатор намерений
            qna: Клиент QnA
            spellchecker: Клиент проверки орфографии

        Raises:
            ConfigurationError: Нет обязательных ключей в окружении
        """
        logger.debug(f"constructor: {config}")
        self.config = config
        self.credentials = credentials or load_credentials()
        self.classification_filter = load_classification_filter(classification_filter)

        self.classifier = classifier or TrainerClassifier(self.credentials)
        self.qna = qna
        if self.qna is None and config.qna is not None:
            self.qna = QnaClient(self.credentials)
        self.spellchecker = spellchecker
        if self.spellchecker is None and config.spellchecking:
            self.spellchecker = SpellcheckingClient(self.credentials)

        self._extractor_specs = list(extractors)
        self.extractor: Optional[CompositeExtractor] = None

    async def init(self):
        """Создать экстракторы и открыть клиенты сервисов."""
        if self.extractor is not None:
            return
        logger.debug("init")

        extractors = [build_extractor(spec) for spec in self._extractor_specs]
        extractors.extend(self._builtin_extractors())

        for service in (self.classifier, self.qna, self.spellchecker):
            if service is not None and hasattr(service, "open"):
                await service.open()

        # Признак завершённой инициализации, выставляется последним
        self.extractor = CompositeExtractor(extractors)

        logger.info(
            f"NLU инициализирован: qna={self.config.qna}, "
            f"spellchecking={self.config.spellchecking}, "
            f"filter={'yes' if self.classification_filter else 'no'}"
        )

    def _builtin_extractors(self) -> List[Extractor]:
        try:
            return [BooleanExtractor(locale=self.config.locale)]
        except ValueError as e:
            raise ConfigurationError(str(e)) from e

    async def close(self):
        """Закрытие ресурсов."""
        for service in (self.classifier, self.qna, self.spellchecker):
            if service is not None and hasattr(service, "close"):
                await service.close()

    async def __aenter__(self):
        await self.init()
        return self

    async def __aexit__(self, exc_type, exc_value, traceback):
        await self.close()

    async def compute(self, sentence: str, context: Any = None) -> NLUResult:
        """
        Вычислить намерения и сущности для предложения.

        Args:
            sentence: Предложение пользователя
            context: Контекст диалога, передаётся только в фильтр

        Returns:
            NLUResult с намерениями и сущностями
        """
        # Контекст не логируем
        logger.debug(f"compute: {sentence!r}")
        if self.extractor is None:
            raise NLUError("NLUPipeline.init() must be called before compute()")

        if self.config.spellchecking:
            result = await self.spellcheck(sentence, self.config.spellchecking)
            sentence = result.correct_sentence

        if self.config.qna is QnaMode.BEFORE:
            result = await self.qna_compute(sentence)
            if not self._is_empty_qna(result):
                return result
            return await self.local_compute(sentence, context)

        if self.config.qna is QnaMode.AFTER:
            result = await self.local_compute(sentence, context)
            if not self._is_empty_local(result):
                return result
            return await self.qna_compute(sentence)

        return await self.local_compute(sentence, context)

    async def local_compute(self, sentence: str, context: Any = None) -> NLUResult:
        """Вычислить сущности и намерения бота."""
        logger.debug(f"local_compute: {sentence!r}")
        entities = await self.compute_entities(sentence)
        logger.debug(f"local_compute: entities {entities}")

        intents = await self.classifier.compute(sentence, entities)
        intents = await apply_classification_filter(
            intents,
            context,
            self.classification_filter,
            multi_intent=self.config.multi_intent,
        )
        logger.debug(f"local_compute: intents {intents}")
        return NLUResult(intents=list(intents), entities=entities)

    async def qna_compute(self, sentence: str) -> NLUResult:
        """Найти совпадения QnA и обернуть их в NLUResult."""
        logger.debug(f"qna_compute: {sentence!r}")
        if self.qna is None:
            raise NLUError("QnA client is not configured")

        qnas = await self.qna.get_matching_qnas(sentence)
        logger.debug(f"qna_compute: qnas {qnas}")
        return NLUResult(
            intents=[ClassificationResult(label=QNAS_INTENT_LABEL, value=1.0)],
            entities=[Entity(dim=QNAS_DIM, value=qnas)],
        )

    async def compute_entities(self, sentence: str) -> List[Entity]:
        """Извлечь сущности всеми зарегистрированными экстракторами."""
        logger.debug(f"compute_entities: {sentence!r}")
        return await self.extractor.compute(sentence)

    async def spellcheck(self, sentence: str, key: str) -> SpellcheckResult:
        """
        Исправить опечатки в предложении.

        Args:
            sentence: Предложение
            key: Ключ словаря
        """
        logger.debug(f"spellcheck: {sentence!r}, key={key}")
        if self.spellchecker is None:
            raise NLUError("Spellchecking client is not configured")
        result = await self.spellchecker.compute(sentence, key)
        logger.debug(f"spellcheck: result {result.correct_sentence!r}")
        return result

    @staticmethod
    def _is_empty_qna(result: NLUResult) -> bool:
        return len(result.qnas) == 0

    @staticmethod
    def _is_empty_local(result: NLUResult) -> bool:
        return len(result.intents) == 0
