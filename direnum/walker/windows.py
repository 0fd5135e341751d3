"""Windows 파일 검색 핸들 워커./Windows file-search handle walker."""

from __future__ import annotations

import ctypes
import functools
import logging
import sys
from ctypes import wintypes
from dataclasses import dataclass, field
from typing import Any, Callable

from ..exceptions import HandleReleasedError, UnsupportedPlatformError
from ..models import RawEntry
from .base import PlatformWalker, classify_windows

logger = logging.getLogger(__name__)

INVALID_HANDLE_VALUE = ctypes.c_void_p(-1).value
ERROR_NO_MORE_FILES = 18
SEARCH_PATTERN = "\\*.*"


@functools.lru_cache(maxsize=1)
def _kernel32() -> Any:
    """kernel32 검색 함수를 바인딩./Bind the kernel32 search functions."""

    kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)  # type: ignore[attr-defined]
    find_data_ptr = ctypes.POINTER(wintypes.WIN32_FIND_DATAW)
    kernel32.FindFirstFileW.argtypes = (wintypes.LPCWSTR, find_data_ptr)
    kernel32.FindFirstFileW.restype = wintypes.HANDLE
    kernel32.FindNextFileW.argtypes = (wintypes.HANDLE, find_data_ptr)
    kernel32.FindNextFileW.restype = wintypes.BOOL
    kernel32.FindClose.argtypes = (wintypes.HANDLE,)
    kernel32.FindClose.restype = wintypes.BOOL
    return kernel32


@dataclass(slots=True)
class WindowsHandle:
    """열린 검색 핸들과 첫 레코드./An open search handle and its first record."""

    path: str
    search_handle: int
    pending: RawEntry | None = None
    released: bool = False
    find_data: wintypes.WIN32_FIND_DATAW = field(default_factory=wintypes.WIN32_FIND_DATAW)


def _get_last_error() -> int:
    return ctypes.get_last_error()  # type: ignore[attr-defined]


def _to_entry(find_data: wintypes.WIN32_FIND_DATAW) -> RawEntry:
    name = find_data.cFileName
    return RawEntry(kind=classify_windows(name, find_data.dwFileAttributes), name=name)


class WindowsWalker(PlatformWalker[WindowsHandle]):
    """
    FindFirstFileW/FindNextFileW 기반 워커./Walker over FindFirstFileW/FindNextFileW.

    ``api`` is an object exposing the kernel32 ``FindFirstFileW``,
    ``FindNextFileW`` and ``FindClose`` calls and ``last_error`` reads the
    calling thread's last Win32 error code. Both default to the real
    kernel32 bindings, which only exist on win32.
    """

    def __init__(
        self,
        api: Any | None = None,
        last_error: Callable[[], int] | None = None,
    ) -> None:
        if api is None:
            if sys.platform != "win32":
                raise UnsupportedPlatformError("Windows search handles require win32")
            api = _kernel32()
        self._api = api
        self._last_error = last_error if last_error is not None else _get_last_error

    def open(self, path: str) -> WindowsHandle:
        find_data = wintypes.WIN32_FIND_DATAW()
        search_handle = self._api.FindFirstFileW(path + SEARCH_PATTERN, ctypes.byref(find_data))
        if search_handle is None or search_handle == INVALID_HANDLE_VALUE:
            code = self._last_error()
            # winerror selects the OSError subclass on win32
            raise OSError(None, f"cannot open directory (winerror {code})", path, code)
        # FindFirstFileW already consumed the first record
        return WindowsHandle(
            path=path,
            search_handle=search_handle,
            pending=_to_entry(find_data),
            find_data=find_data,
        )

    def fetch_next(self, handle: WindowsHandle) -> RawEntry | None:
        if handle.released:
            raise HandleReleasedError(f"search handle already closed: {handle.path}")
        if handle.pending is not None:
            entry, handle.pending = handle.pending, None
            return entry
        if not self._api.FindNextFileW(handle.search_handle, ctypes.byref(handle.find_data)):
            code = self._last_error()
            if code != ERROR_NO_MORE_FILES:
                logger.warning(
                    "directory listing aborted for %s: winerror %d", handle.path, code
                )
            return None
        return _to_entry(handle.find_data)

    def close(self, handle: WindowsHandle) -> None:
        if handle.released:
            raise HandleReleasedError(f"search handle already closed: {handle.path}")
        handle.released = True
        handle.pending = None
        self._api.FindClose(handle.search_handle)


__all__ = ["ERROR_NO_MORE_FILES", "INVALID_HANDLE_VALUE", "WindowsHandle", "WindowsWalker"]
