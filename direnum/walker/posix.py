"""POSIX 디렉터리 스트림 워커./POSIX directory stream walker."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Iterator

from ..exceptions import HandleReleasedError
from ..models import RawEntry
from .base import PlatformWalker, classify_posix

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PosixHandle:
    """열린 디렉터리 스트림./An open directory stream."""

    path: str
    stream: Iterator[os.DirEntry[str]]
    released: bool = False


class PosixWalker(PlatformWalker[PosixHandle]):
    """opendir/readdir/closedir 기반 워커./Walker over opendir/readdir/closedir."""

    def open(self, path: str) -> PosixHandle:
        return PosixHandle(path=path, stream=os.scandir(path))

    def fetch_next(self, handle: PosixHandle) -> RawEntry | None:
        if handle.released:
            raise HandleReleasedError(f"directory stream already closed: {handle.path}")
        try:
            entry = next(handle.stream)
        except StopIteration:
            return None
        except OSError as exc:
            logger.warning("directory listing aborted for %s: %s", handle.path, exc)
            return None
        try:
            # d_type is used when the filesystem provides it; links are not followed
            is_regular = entry.is_file(follow_symlinks=False)
            is_directory = entry.is_dir(follow_symlinks=False)
        except OSError:
            is_regular = is_directory = False
        return RawEntry(kind=classify_posix(entry.name, is_regular, is_directory), name=entry.name)

    def close(self, handle: PosixHandle) -> None:
        if handle.released:
            raise HandleReleasedError(f"directory stream already closed: {handle.path}")
        handle.released = True
        handle.stream.close()  # type: ignore[attr-defined]


__all__ = ["PosixHandle", "PosixWalker"]
