"""푸시 방식 열거와 어댑터./Push-style enumeration and adapters."""

from __future__ import annotations

from typing import Callable, Iterator

from .cursor import DirectoryCursor, ErrorReporter
from .models import DirectorySpec, NameCallback
from .walker import PlatformWalker

__all__ = ["for_each", "iter_names", "list_names", "print_names"]


def for_each(
    spec: DirectorySpec,
    callback: NameCallback,
    *,
    walker: PlatformWalker | None = None,
    report_error: ErrorReporter | None = None,
) -> int:
    """모든 이름을 콜백에 전달합니다./Deliver every qualifying name to callback.

    The cursor is closed before this call returns, including when the
    callback raises; the exception then propagates unchanged. Returns the
    number of names delivered.
    """

    delivered = 0
    with DirectoryCursor(spec, walker=walker, report_error=report_error) as cursor:
        for name in cursor:
            callback(name)
            delivered += 1
    return delivered


def iter_names(
    spec: DirectorySpec,
    *,
    walker: PlatformWalker | None = None,
    report_error: ErrorReporter | None = None,
) -> Iterator[str]:
    """이름 제너레이터./Yield names, closing the cursor when the generator ends."""

    cursor = DirectoryCursor(spec, walker=walker, report_error=report_error)
    try:
        yield from cursor
    finally:
        cursor.close()


def list_names(
    spec: DirectorySpec,
    *,
    walker: PlatformWalker | None = None,
    report_error: ErrorReporter | None = None,
) -> list[str]:
    """한 번의 열거 결과를 리스트로./Collect one full pass into a list."""

    names: list[str] = []
    for_each(spec, names.append, walker=walker, report_error=report_error)
    return names


def print_names(spec: DirectorySpec, echo: Callable[[str], object] = print) -> int:
    """이름을 한 줄씩 출력합니다./Print each qualifying name on its own line."""

    return for_each(spec, echo)
