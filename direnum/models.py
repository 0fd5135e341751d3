"""디렉터리 열거 데이터 모델./Directory enumeration data models."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable, Iterator

if TYPE_CHECKING:
    from .cursor import DirectoryCursor

NamePredicate = Callable[[str], bool]
NameCallback = Callable[[str], None]


class EntryKind(Enum):
    """원시 항목 종류./Kind of a raw directory entry."""

    REGULAR = "regular"
    DIRECTORY = "directory"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class RawEntry:
    """필터 이전의 네이티브 항목./Native listing record before filtering."""

    kind: EntryKind
    name: str


@dataclass(frozen=True, slots=True)
class DirectorySpec:
    """열거 대상과 필터 설정./Target directory and filter configuration."""

    path: str
    files_only: bool = False
    name_predicate: NamePredicate | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", os.fspath(self.path))

    def cursor(self, **kwargs: object) -> DirectoryCursor:
        """새 커서를 엽니다./Open a new cursor over this directory."""

        from .cursor import DirectoryCursor

        return DirectoryCursor(self, **kwargs)  # type: ignore[arg-type]

    def for_each(self, callback: NameCallback, **kwargs: object) -> int:
        """콜백으로 이름을 전달합니다./Push every qualifying name to callback."""

        from .runner import for_each

        return for_each(self, callback, **kwargs)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[str]:
        from .runner import iter_names

        return iter_names(self)


__all__ = [
    "DirectorySpec",
    "EntryKind",
    "NameCallback",
    "NamePredicate",
    "RawEntry",
]
