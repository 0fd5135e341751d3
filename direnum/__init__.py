"""지연 필터링 디렉터리 열거 API./Lazy filtered directory enumeration API."""

from __future__ import annotations

from .cursor import DirectoryCursor, ErrorReporter
from .exceptions import EnumeratorErrorBase, HandleReleasedError, UnsupportedPlatformError
from .filters import accept_entry, pattern_predicate, suffix_predicate
from .models import DirectorySpec, EntryKind, NameCallback, NamePredicate, RawEntry
from .runner import for_each, iter_names, list_names, print_names
from .walker import PlatformWalker, default_walker

__all__ = [
    "DirectoryCursor",
    "DirectorySpec",
    "EntryKind",
    "EnumeratorErrorBase",
    "ErrorReporter",
    "HandleReleasedError",
    "NameCallback",
    "NamePredicate",
    "PlatformWalker",
    "RawEntry",
    "UnsupportedPlatformError",
    "accept_entry",
    "default_walker",
    "for_each",
    "iter_names",
    "list_names",
    "pattern_predicate",
    "print_names",
    "suffix_predicate",
]
