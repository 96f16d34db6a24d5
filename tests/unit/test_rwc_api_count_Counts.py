"""Unit tests for rwc.api.count.Counts module."""

import pytest

from rwc.api.count.Count import Count
from rwc.api.count.Counts import Counts


def test_counts_requires_a_present_metric():
    """An all-absent Counts is never valid."""
    with pytest.raises(ValueError, match="at least one"):
        Counts(bytes=Count.absent(), chars=Count.absent(), words=Count.absent(), lines=Count.absent())


def test_counts_get_by_name():
    counts = Counts(
        bytes=Count.present(6),
        chars=Count.absent(),
        words=Count.present(8),
        lines=Count.present(9),
    )
    assert counts.get("bytes").val == 6
    assert counts.get("chars").val is None
    assert counts.get("words").val == 8
    assert counts.get("lines").val == 9


def test_counts_get_unknown_metric():
    counts = Counts(bytes=Count.present(1), chars=Count.absent(), words=Count.absent(), lines=Count.absent())
    with pytest.raises(KeyError):
        counts.get("pages")
