"""코어 패키지 초기화(KR). Core package initialisation (EN)."""

from .config import EnumeratorSettings
from .errors import ConfigError
from .io import JsonArrayWriter
from .logging import configure_logging
from .timezone import utc_now

__all__ = [
    "EnumeratorSettings",
    "ConfigError",
    "JsonArrayWriter",
    "configure_logging",
    "utc_now",
]
