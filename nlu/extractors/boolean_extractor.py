"""Built-in yes/no extractor."""

import re
from typing import Dict, List, Tuple

from config.constants import BOOLEAN_DIM, DEFAULT_LOCALE
from nlu.models import Entity
from .base import Extractor

BOOLEAN_WORDS: Dict[str, Tuple[Tuple[str, ...], Tuple[str, ...]]] = {
    "en": (
        ("yes", "yeah", "yep", "sure", "ok", "okay", "of course", "absolutely", "right"),
        ("no", "nope", "nah", "not", "never", "no way"),
    ),
    "fr": (
        ("oui", "ouais", "d'accord", "ok", "bien sûr", "absolument", "exact"),
        ("non", "pas", "jamais", "pas du tout"),
    ),
}


class BooleanExtractor(Extractor):
    """
    Извлекает согласие/отказ ("yes", "non", ...).

    Сущность: dim "system:boolean", value True или False.
    """

    def __init__(self, locale: str = DEFAULT_LOCALE):
        if locale not in BOOLEAN_WORDS:
            raise ValueError(f"Unsupported locale for BooleanExtractor: {locale}")
        self.locale = locale
        yes_words, no_words = BOOLEAN_WORDS[locale]
        self._patterns = [
            (self._compile(yes_words), True),
            (self._compile(no_words), False),
        ]

    @staticmethod
    def _compile(words) -> "re.Pattern":
        # Длинные фразы первыми, чтобы "no way" не распалось на "no"
        alternatives = "|".join(re.escape(w) for w in sorted(words, key=len, reverse=True))
        return re.compile(rf"(?<![\w'])(?:{alternatives})(?![\w'])", re.IGNORECASE)

    async def compute(self, sentence: str) -> List[Entity]:
        matches = []
        for pattern, value in self._patterns:
            for match in pattern.finditer(sentence):
                matches.append(Entity(
                    dim=BOOLEAN_DIM,
                    value=value,
                    body=match.group(),
                    start=match.start(),
                    end=match.end(),
                ))
        matches.sort(key=lambda e: e.start)
        return matches
