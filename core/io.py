"""JSON 스트리밍 유틸리티(KR). JSON streaming utilities (EN)."""

from __future__ import annotations

import json
from pathlib import Path
from types import TracebackType
from typing import Any, Optional, Type


class JsonArrayWriter:
    """JSON 배열을 스트리밍으로 작성 · Stream-write JSON arrays."""

    def __init__(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        self._handle = path.open("w", encoding="utf-8")
        self._handle.write("[")
        self._count = 0

    @property
    def count(self) -> int:
        return self._count

    def write(self, payload: Any) -> None:
        """단일 항목을 추가 · Append one JSON value."""

        self._handle.write(",\n" if self._count else "\n")
        json.dump(payload, self._handle, ensure_ascii=False)
        self._count += 1

    def close(self) -> None:
        """스트림을 종료 · Close the underlying stream."""

        if self._handle.closed:
            return
        self._handle.write("\n]\n" if self._count else "]\n")
        self._handle.close()

    def __enter__(self) -> "JsonArrayWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()


__all__ = ["JsonArrayWriter"]
