import os

import pytest

from primesh.descriptors import (
    FD_MAX,
    DescriptorError,
    DescriptorErrorKind,
    DescriptorTracker,
)


def _is_open(fd):
    try:
        os.fstat(fd)
    except OSError:
        return False
    return True


def test_add_and_len():
    closed = []
    tracker = DescriptorTracker(closer=closed.append)
    tracker.add(5)
    tracker.add(6)
    assert len(tracker) == 2
    assert tracker.fds == (5, 6)


def test_minus_one_ignored():
    tracker = DescriptorTracker(closer=lambda fd: None)
    tracker.add(-1)
    assert len(tracker) == 0


def test_capacity_doubles():
    tracker = DescriptorTracker(closer=lambda fd: None)
    assert tracker.capacity == 2
    for fd in (3, 4, 5):
        tracker.add(fd)
    assert tracker.capacity == 4
    assert len(tracker) == 3


def test_close_real_descriptor_marks_slot():
    read_end, write_end = os.pipe()
    try:
        tracker = DescriptorTracker()
        tracker.add(read_end)
        tracker.add(write_end)
        tracker.close(read_end)
        assert not _is_open(read_end)
        assert _is_open(write_end)
        assert tracker.fds == (-1, write_end)
        assert len(tracker) == 2
    finally:
        if _is_open(write_end):
            os.close(write_end)


def test_close_skips_descriptor_zero():
    closed = []
    tracker = DescriptorTracker(closer=closed.append)
    tracker.add(0)
    tracker.close(0)
    assert closed == []
    assert tracker.fds == (-1,)


def test_close_all_duplicate_slots():
    closed = []
    tracker = DescriptorTracker(closer=closed.append)
    tracker.add(7)
    tracker.add(7)
    tracker.close(7)
    assert tracker.fds == (-1, -1)
    assert closed == [7, 7]


def test_clear_closes_open_and_resets():
    read_end, write_end = os.pipe()
    tracker = DescriptorTracker()
    tracker.add(read_end)
    tracker.add(write_end)
    tracker.add(read_end + write_end + 1000)
    tracker.close(write_end)
    tracker.clear()
    assert not _is_open(read_end)
    assert not _is_open(write_end)
    assert len(tracker) == 0
    assert tracker.capacity == 2


def test_fd_max_error_clears_tracker():
    closed = []
    tracker = DescriptorTracker(closer=closed.append)
    for fd in range(1, FD_MAX + 1):
        tracker.add(fd)
    assert len(tracker) == FD_MAX
    with pytest.raises(DescriptorError) as info:
        tracker.add(FD_MAX + 1)
    assert info.value.kind is DescriptorErrorKind.FD_MAX_ERROR
    assert str(info.value) == "FD_MAX_ERROR"
    assert len(tracker) == 0
    assert len(closed) == FD_MAX


def test_report_contents():
    tracker = DescriptorTracker(closer=lambda fd: None)
    tracker.add(3)
    text = tracker.report()
    assert text.startswith("=== Garbage Descriptor Stats ===\n")
    assert "Nombre de descripteur : 1\n" in text
    assert "Capacité : 2\n" in text
    assert "Descripteur 0: 3\n" in text


def test_context_manager_clears():
    closed = []
    with DescriptorTracker(closer=closed.append) as tracker:
        tracker.add(9)
    assert closed == [9]
    assert len(tracker) == 0