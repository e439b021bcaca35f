from .logger import setup_logger
from .errors import (
    NLUError,
    ConfigurationError,
    ExtractorLoadError,
    TransportError,
    FilterError,
)

__all__ = [
    'setup_logger',
    'NLUError',
    'ConfigurationError',
    'ExtractorLoadError',
    'TransportError',
    'FilterError',
]
