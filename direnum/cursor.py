"""자원 안전 디렉터리 커서./Resource-safe directory cursor."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import TracebackType
from typing import Any, Callable, Optional, Type, Union

from .filters import accept_entry
from .models import DirectorySpec, EntryKind
from .walker import PlatformWalker, default_walker

logger = logging.getLogger(__name__)

ErrorReporter = Callable[[str, OSError], None]


@dataclass(frozen=True, slots=True)
class Unopened:
    """아직 열리지 않음./Search not started yet."""


@dataclass(frozen=True, slots=True)
class HasCandidate:
    """다음 이름이 준비됨./A qualifying name is ready."""

    name: str


@dataclass(frozen=True, slots=True)
class Exhausted:
    """종료됨, 자원 없음./Finished and holding no resource."""


UNOPENED = Unopened()
EXHAUSTED = Exhausted()

CursorState = Union[Unopened, HasCandidate, Exhausted]


class DirectoryCursor:
    """
    디렉터리 항목을 하나씩 당겨오는 커서./Pull qualifying names one at a time.

    The directory is opened in the constructor and the first qualifying
    entry is located immediately; later entries are fetched on demand by
    ``pull``. The native handle is released once, either when the listing
    runs out or when ``close`` is called. A directory that cannot be opened
    behaves like an empty one; ``report_error`` receives the ``OSError``
    when given.

    Use the cursor as a context manager (or call ``close``) when it may be
    abandoned early. ``__del__`` also closes it, but garbage collection
    timing is not guaranteed and should not be relied on.
    """

    _handle: Any = None
    _state: CursorState = UNOPENED

    def __init__(
        self,
        spec: DirectorySpec,
        *,
        walker: PlatformWalker | None = None,
        report_error: ErrorReporter | None = None,
    ) -> None:
        self._spec = spec
        self._walker = walker if walker is not None else default_walker()
        self._report_error = report_error
        self._open()

    @property
    def spec(self) -> DirectorySpec:
        return self._spec

    @property
    def state(self) -> CursorState:
        return self._state

    @property
    def exhausted(self) -> bool:
        """더 이상 항목이 없는지 반환./Return True once no names remain."""

        return isinstance(self._state, Exhausted)

    def _open(self) -> None:
        path = self._spec.path
        try:
            self._handle = self._walker.open(path)
        except OSError as exc:
            logger.debug("directory not openable, treating as empty: %s (%s)", path, exc)
            self._state = EXHAUSTED
            if self._report_error is not None:
                self._report_error(path, exc)
            return
        self._advance()

    def _advance(self) -> None:
        spec = self._spec
        try:
            while True:
                entry = self._walker.fetch_next(self._handle)
                if entry is None:
                    break
                if entry.kind is EntryKind.OTHER:
                    continue
                if accept_entry(entry.kind, entry.name, spec.files_only, spec.name_predicate):
                    self._state = HasCandidate(entry.name)
                    return
        except BaseException:
            self.close()
            raise
        self.close()

    def pull(self) -> str | None:
        """현재 이름을 꺼내고 전진합니다./Take the current name, then advance."""

        state = self._state
        if not isinstance(state, HasCandidate):
            return None
        self._advance()
        return state.name

    def close(self) -> None:
        """핸들을 한 번만 해제합니다./Release the handle exactly once."""

        handle, self._handle = self._handle, None
        self._state = EXHAUSTED
        if handle is not None:
            self._walker.close(handle)

    def __iter__(self) -> "DirectoryCursor":
        return self

    def __next__(self) -> str:
        name = self.pull()
        if name is None:
            raise StopIteration
        return name

    def __enter__(self) -> "DirectoryCursor":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()

    def __del__(self) -> None:
        if self._handle is not None:
            self.close()

    def __repr__(self) -> str:
        return f"DirectoryCursor(path={self._spec.path!r}, state={self._state!r})"


__all__ = [
    "CursorState",
    "DirectoryCursor",
    "ErrorReporter",
    "EXHAUSTED",
    "Exhausted",
    "HasCandidate",
    "UNOPENED",
    "Unopened",
]
