"""항목 필터와 이름 조건 빌더./Entry filter and name predicate builders."""

from __future__ import annotations

import fnmatch
from typing import Sequence

from .models import EntryKind, NamePredicate


def accept_entry(
    kind: EntryKind,
    name: str,
    files_only: bool,
    name_predicate: NamePredicate | None,
) -> bool:
    """항목 포함 여부를 결정합니다./Decide whether an entry qualifies."""

    if files_only and kind is not EntryKind.REGULAR:
        return False
    if name_predicate is not None and not name_predicate(name):
        return False
    return True


def pattern_predicate(patterns: Sequence[str]) -> NamePredicate | None:
    """글롭 패턴 조건을 만듭니다./Build a predicate matching any glob."""

    compiled = tuple(patterns)
    if not compiled:
        return None

    def _match(name: str) -> bool:
        return any(fnmatch.fnmatchcase(name, pattern) for pattern in compiled)

    return _match


def suffix_predicate(*suffixes: str) -> NamePredicate:
    """접미사 조건을 만듭니다./Build a predicate matching name suffixes."""

    if not suffixes:
        raise ValueError("at least one suffix is required")
    return lambda name: name.endswith(suffixes)


__all__ = ["accept_entry", "pattern_predicate", "suffix_predicate"]
