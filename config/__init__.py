from .config import (
    NLUConfig,
    QnaMode,
    ServiceCredentials,
    load_credentials,
    load_logging_config,
)

__all__ = [
    "NLUConfig",
    "QnaMode",
    "ServiceCredentials",
    "load_credentials",
    "load_logging_config",
]
