"""로깅 설정 유틸리티(KR). Logging configuration utilities (EN)."""

from __future__ import annotations

import json
import logging
import logging.config
from pathlib import Path
from typing import Any, Dict, List

from .timezone import utc_now

LOGGER_NAMES = ("direnum", "core", "cli")
CONSOLE_FORMAT = "%(levelname)s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """JSON 포맷터 구현 · Implement JSON log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        """레코드를 JSON 문자열로 직렬화 · Serialize record into JSON string."""

        payload: Dict[str, Any] = {
            "timestamp": utc_now(),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def _handlers(log_file: Path, console: bool) -> Dict[str, Dict[str, Any]]:
    """파일/콘솔 핸들러 구성 · Build file and optional console handlers."""

    handlers: Dict[str, Dict[str, Any]] = {
        "file": {
            "class": "logging.FileHandler",
            "formatter": "json",
            "filename": str(log_file),
            "encoding": "utf-8",
        }
    }
    if console:
        handlers["console"] = {
            "class": "logging.StreamHandler",
            "formatter": "plain",
            "stream": "ext://sys.stderr",
        }
    return handlers


def configure_logging(log_file: Path, level: str = "INFO", console: bool = False) -> None:
    """JSON 파일 로거를 설정한다 · Configure JSON file logger, optionally echoing to stderr."""

    log_file.parent.mkdir(parents=True, exist_ok=True)
    handlers = _handlers(log_file, console)
    handler_names: List[str] = list(handlers)
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {"()": JsonFormatter},
                "plain": {"format": CONSOLE_FORMAT},
            },
            "handlers": handlers,
            "loggers": {
                name: {
                    "level": level.upper(),
                    "handlers": handler_names,
                    "propagate": False,
                }
                for name in LOGGER_NAMES
            },
        }
    )


__all__ = ["configure_logging", "CONSOLE_FORMAT", "JsonFormatter", "LOGGER_NAMES"]
