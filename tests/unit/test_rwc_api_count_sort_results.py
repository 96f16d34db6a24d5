"""Unit tests for rwc.api.count.sort_results module."""

from rwc.api.count.Count import Count
from rwc.api.count.CountIOError import CountIOError
from rwc.api.count.CountResult import CountResult
from rwc.api.count.Counts import Counts
from rwc.api.count.sort_results import sort_results


def _entry(path: str, n: int = 1) -> CountResult:
    counts = Counts(bytes=Count.present(n), chars=Count.absent(), words=Count.absent(), lines=Count.absent())
    return CountResult(path=path, counts=counts)


def test_sorted_ascending():
    results = sort_results([_entry("b"), _entry("a"), _entry("c")])
    assert [r.path for r in results] == ["a", "b", "c"]


def test_compares_path_components():
    """'a/b' sorts before 'a-b' because component 'a' < 'a-b'."""
    results = sort_results([_entry("a-b"), _entry("a/b")])
    assert [r.path for r in results] == ["a/b", "a-b"]


def test_equal_paths_keep_relative_order():
    first, second = _entry("same", 1), _entry("same", 2)
    results = sort_results([first, second])
    assert results == [first, second]


def test_errors_sorted_with_successes():
    error = CountResult(path="b", error=CountIOError(FileNotFoundError("b")))
    results = sort_results([error, _entry("a")])
    assert [r.path for r in results] == ["a", "b"]


def test_leading_current_dir_sorts_before_names():
    results = sort_results([_entry("a"), _entry("./b")])
    assert [r.path for r in results] == ["./b", "a"]


def test_root_sorts_before_names():
    """'/x' precedes '-y' even though '-' < '/' as characters."""
    results = sort_results([_entry("-y"), _entry("/x")])
    assert [r.path for r in results] == ["/x", "-y"]


def test_parent_dir_sorts_before_names_after_current_dir():
    results = sort_results([_entry("a"), _entry("../a"), _entry("./a")])
    assert [r.path for r in results] == ["./a", "../a", "a"]


def test_interior_current_dir_and_repeated_separators_ignored():
    first, second = _entry("a/./b", 1), _entry("a//b/", 2)
    results = sort_results([first, _entry("a/c"), second])
    assert results[:2] == [first, second]
