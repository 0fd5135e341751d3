"""플랫폼별 워커 선택./Select the walker backend for this platform."""

from __future__ import annotations

import sys

from .base import PlatformWalker, classify_posix, classify_windows

if sys.platform == "win32":
    from .windows import WindowsWalker as NativeWalker
else:
    from .posix import PosixWalker as NativeWalker  # type: ignore[assignment]


def default_walker() -> PlatformWalker:
    """현재 플랫폼의 워커를 생성./Create the walker for the running platform."""

    return NativeWalker()


__all__ = [
    "NativeWalker",
    "PlatformWalker",
    "classify_posix",
    "classify_windows",
    "default_walker",
]
