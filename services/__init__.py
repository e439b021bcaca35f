from .base import BotfuelClient
from .trainer_service import TrainerClassifier
from .qna_service import QnaClient
from .spellchecking_service import SpellcheckingClient, SpellcheckResult

__all__ = [
    "BotfuelClient",
    "TrainerClassifier",
    "QnaClient",
    "SpellcheckingClient",
    "SpellcheckResult",
]
