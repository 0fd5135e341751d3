"""열거기 전용 예외를 정의합니다./Define enumerator specific exceptions."""

from __future__ import annotations


class EnumeratorErrorBase(RuntimeError):
    """열거 오류 기본 클래스./Base class for enumerator errors."""


class HandleReleasedError(EnumeratorErrorBase):
    """해제된 검색 핸들을 다시 사용함./Search handle used after release."""


class UnsupportedPlatformError(EnumeratorErrorBase):
    """현재 플랫폼에서 쓸 수 없는 백엔드./Backend unavailable on this platform."""
