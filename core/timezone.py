'''시간대 유틸리티(KR). Timezone utilities (EN).'''

from __future__ import annotations

from datetime import datetime, timezone


def utc_now() -> str:
    '''UTC 현재 시각을 ISO8601로 반환 · Return UTC now as ISO8601.'''

    return datetime.now(tz=timezone.utc).isoformat(timespec='seconds')


__all__ = ['utc_now']
