"""디렉터리 커서 상태 기계를 검증합니다./Validate the directory cursor state machine."""

from __future__ import annotations

import gc

import pytest

from direnum import DirectoryCursor, DirectorySpec, EntryKind, RawEntry, suffix_predicate
from direnum.cursor import EXHAUSTED, HasCandidate
from tests.fixtures.scripted_walker import NATIVE_PSEUDO, ScriptedWalker, sample_entries


def _drain(cursor: DirectoryCursor) -> list[str]:
    names: list[str] = []
    while (name := cursor.pull()) is not None:
        names.append(name)
    return names


def test_construction_locates_first_candidate() -> None:
    """생성 시 첫 후보를 찾습니다./Construction finds the first candidate."""

    walker = ScriptedWalker(entries=sample_entries())
    cursor = DirectoryCursor(DirectorySpec("d"), walker=walker)
    assert cursor.state == HasCandidate("a.txt")
    # ".", ".." and "a.txt"
    assert walker.fetches == 3
    assert walker.closes == 0
    cursor.close()


def test_full_pass_closes_once_after_last_fetch() -> None:
    """끝까지 당기면 마지막 fetch 후 한 번 해제./Exhaustion closes once after the last fetch."""

    entries = sample_entries()
    walker = ScriptedWalker(entries=entries)
    cursor = DirectoryCursor(DirectorySpec("d"), walker=walker)
    assert _drain(cursor) == ["a.txt", "b.log", "sub"]
    assert walker.closes == 1
    assert walker.fetches == len(entries) + 1
    assert cursor.exhausted
    cursor.close()
    assert walker.closes == 1


def test_scenario_files_only_with_suffix() -> None:
    """파일 전용 + .txt 조건은 a.txt만./files-only with .txt predicate yields a.txt."""

    walker = ScriptedWalker(entries=sample_entries())
    spec = DirectorySpec("d", files_only=True, name_predicate=suffix_predicate(".txt"))
    with DirectoryCursor(spec, walker=walker) as cursor:
        assert list(cursor) == ["a.txt"]
    assert walker.closes == 1


def test_trailing_rejections_close_before_exhaustion_reported() -> None:
    """마지막 후보 뒤 거부 항목도 소비 후 해제./Trailing rejected entries are consumed before release."""

    walker = ScriptedWalker(entries=sample_entries())
    spec = DirectorySpec("d", files_only=True)
    cursor = DirectoryCursor(spec, walker=walker)
    assert cursor.pull() == "a.txt"
    assert walker.closes == 0
    assert cursor.pull() == "b.log"
    # "sub" rejected, then end of listing
    assert walker.closes == 1
    assert cursor.pull() is None


def test_exhaustion_is_absorbing() -> None:
    """소진 상태는 유지됩니다./Exhausted stays exhausted."""

    walker = ScriptedWalker(entries=[RawEntry(EntryKind.REGULAR, "only")])
    cursor = DirectoryCursor(DirectorySpec("d"), walker=walker)
    assert cursor.pull() == "only"
    for _ in range(3):
        assert cursor.pull() is None
    with pytest.raises(StopIteration):
        next(cursor)
    assert cursor.state is EXHAUSTED
    assert walker.closes == 1


def test_empty_listing_starts_exhausted() -> None:
    """'.'와 '..'만 있으면 비어 있음./Only pseudo entries means empty."""

    walker = ScriptedWalker(entries=list(NATIVE_PSEUDO))
    cursor = DirectoryCursor(DirectorySpec("d"), walker=walker)
    assert cursor.exhausted
    assert walker.closes == 1
    assert cursor.pull() is None


def test_missing_directory_holds_no_resource() -> None:
    """열기 실패는 빈 결과, 해제 없음./Open failure is empty with nothing to release."""

    reported: list[tuple[str, OSError]] = []
    walker = ScriptedWalker(missing=True)
    cursor = DirectoryCursor(
        DirectorySpec("nowhere"),
        walker=walker,
        report_error=lambda path, exc: reported.append((path, exc)),
    )
    assert cursor.exhausted
    assert cursor.pull() is None
    cursor.close()
    assert walker.opened == 0
    assert walker.closes == 0
    assert [path for path, _ in reported] == ["nowhere"]
    assert isinstance(reported[0][1], FileNotFoundError)


@pytest.mark.parametrize("pulls", [0, 1, 2])
def test_early_disposal_closes_once(pulls: int) -> None:
    """중간 폐기도 한 번만 해제./Early disposal releases exactly once."""

    walker = ScriptedWalker(entries=sample_entries())
    with DirectoryCursor(DirectorySpec("d"), walker=walker) as cursor:
        for _ in range(pulls):
            assert cursor.pull() is not None
        assert walker.closes == 0
    assert walker.closes == 1
    assert cursor.pull() is None
    cursor.close()
    assert walker.closes == 1


def test_abandoned_cursor_closed_on_collection() -> None:
    """버려진 커서는 수집 시 해제./Abandoned cursor is released when collected."""

    walker = ScriptedWalker(entries=sample_entries())
    cursor = DirectoryCursor(DirectorySpec("d"), walker=walker)
    assert cursor.pull() == "a.txt"
    del cursor
    gc.collect()
    assert walker.closes == 1


def test_predicate_error_releases_handle() -> None:
    """조건 예외 시 해제 후 전파./Predicate failure releases the handle, then propagates."""

    def predicate(name: str) -> bool:
        if name == "b.log":
            raise RuntimeError("predicate failed")
        return True

    walker = ScriptedWalker(entries=sample_entries())
    cursor = DirectoryCursor(DirectorySpec("d", name_predicate=predicate), walker=walker)
    with pytest.raises(RuntimeError, match="predicate failed"):
        cursor.pull()
    assert walker.closes == 1
    assert cursor.exhausted
    assert cursor.pull() is None


def test_independent_cursors_do_not_share_state() -> None:
    """두 커서는 독립적./Two cursors are independent."""

    walker = ScriptedWalker(entries=sample_entries())
    spec = DirectorySpec("d")
    first = DirectoryCursor(spec, walker=walker)
    second = DirectoryCursor(spec, walker=walker)
    assert first.pull() == "a.txt"
    assert first.pull() == "b.log"
    assert second.pull() == "a.txt"
    first.close()
    assert not second.exhausted
    assert _drain(second) == ["b.log", "sub"]
    assert walker.closes == 2
    assert all(handle.closed for handle in walker.handles)
