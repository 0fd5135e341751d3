"""플랫폼 워커 계약과 종류 매핑./Platform walker contract and kind mapping."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from ..models import EntryKind, RawEntry

PSEUDO_ENTRIES = frozenset({".", ".."})

FILE_ATTRIBUTE_DIRECTORY = 0x10

HandleT = TypeVar("HandleT")


def classify_posix(name: str, is_regular: bool, is_directory: bool) -> EntryKind:
    """dirent 유형을 종류로 변환./Map a dirent type to an entry kind."""

    if is_regular:
        return EntryKind.REGULAR
    if is_directory and name not in PSEUDO_ENTRIES:
        return EntryKind.DIRECTORY
    return EntryKind.OTHER


def classify_windows(name: str, attributes: int) -> EntryKind:
    """검색 속성을 종류로 변환./Map find-data attributes to an entry kind."""

    if not attributes & FILE_ATTRIBUTE_DIRECTORY:
        return EntryKind.REGULAR
    if name not in PSEUDO_ENTRIES:
        return EntryKind.DIRECTORY
    return EntryKind.OTHER


class PlatformWalker(ABC, Generic[HandleT]):
    """
    네이티브 디렉터리 검색 래퍼./Wrap a native directory search primitive.

    A handle returned by ``open`` belongs to the caller, which must pass it
    to ``close`` exactly once. ``open`` raises ``OSError`` when the
    directory cannot be listed. ``fetch_next`` returns one native record
    per call, unfiltered, and ``None`` once the listing is exhausted.
    """

    @abstractmethod
    def open(self, path: str) -> HandleT:
        """검색을 시작합니다./Begin a search over ``path``."""

    @abstractmethod
    def fetch_next(self, handle: HandleT) -> RawEntry | None:
        """다음 원시 항목을 반환합니다./Return the next raw entry."""

    @abstractmethod
    def close(self, handle: HandleT) -> None:
        """네이티브 자원을 해제합니다./Release the native resource."""


__all__ = [
    "FILE_ATTRIBUTE_DIRECTORY",
    "PSEUDO_ENTRIES",
    "PlatformWalker",
    "classify_posix",
    "classify_windows",
]
