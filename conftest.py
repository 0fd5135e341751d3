'''KR: 테스트 공통 설정. EN: Shared pytest configuration.'''

from __future__ import annotations

import logging
from typing import Iterator

import pytest

from core.logging import LOGGER_NAMES


@pytest.fixture(autouse=True)
def reset_loggers() -> Iterator[None]:
    '''테스트 간 로거 핸들러를 정리한다(KR). Detach file handlers between tests (EN).'''

    yield
    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.propagate = True
        logger.setLevel(logging.NOTSET)
