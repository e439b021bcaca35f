"""
Статичные константы NLU

Здесь должны быть только константы, которые:
- Не изменяются между окружениями (dev/prod)
- Не являются секретами
- Определяют поведение пайплайна
"""

# Botfuel API (значения по умолчанию, переопределяются через окружение)
TRAINER_API_BASE_URL = "https://api.botfuel.io/trainer/api/v0"
QNA_API_BASE_URL = "https://api.botfuel.io/qna/api/v1/bots/"
SPELLCHECKING_API_BASE_URL = "https://api.botfuel.io/nlp/spellchecking"

# HTTP заголовки авторизации
BOT_ID_HEADER = "Botfuel-Bot-Id"
APP_ID_HEADER = "App-Id"
APP_KEY_HEADER = "App-Key"

API_TIMEOUT_SECONDS = 30

# QnA
QNAS_DIM = "qnas"
QNAS_INTENT_LABEL = "qnas_dialog"

# Multi-intent: сколько намерений оставлять после фильтра
SINGLE_INTENT_LIMIT = 1
MULTI_INTENT_LIMIT = 2

# Встроенные экстракторы
BOOLEAN_DIM = "system:boolean"
DEFAULT_LOCALE = "en"
