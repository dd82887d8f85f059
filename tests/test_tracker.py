import pytest

from primesh.tracker import ResourceTracker


class Closable:
    def __init__(self, log=None):
        self.closed = False
        self.log = log

    def close(self):
        self.closed = True
        if self.log is not None:
            self.log.append(self)


def test_add_tracks_item():
    tracker = ResourceTracker()
    item = Closable()
    tracker.add(item)
    assert item in tracker
    assert len(tracker) == 1


def test_add_ignores_none_and_duplicates():
    tracker = ResourceTracker()
    item = Closable()
    tracker.add(None)
    tracker.add(item)
    tracker.add(item)
    assert len(tracker) == 1


def test_identity_not_equality():
    tracker = ResourceTracker(release=lambda item: None)
    first = [1]
    second = [1]
    tracker.add(first)
    assert second not in tracker
    tracker.add(second)
    assert len(tracker) == 2


def test_remove_releases_item():
    tracker = ResourceTracker()
    item = Closable()
    tracker.add(item)
    tracker.remove(item)
    assert item.closed is True
    assert item not in tracker
    assert len(tracker) == 0


def test_remove_untracked_is_ignored():
    tracker = ResourceTracker()
    kept = Closable()
    other = Closable()
    tracker.add(kept)
    tracker.remove(other)
    assert other.closed is False
    assert len(tracker) == 1


def test_remove_then_add_again():
    tracker = ResourceTracker()
    first, second, third = Closable(), Closable(), Closable()
    for item in (first, second, third):
        tracker.add(item)
    tracker.remove(third)
    tracker.add(third)
    assert list(tracker) == [first, second, third]


def test_free_all_releases_in_order_and_empties():
    log = []
    tracker = ResourceTracker()
    items = [Closable(log) for _ in range(3)]
    for item in items:
        tracker.add(item)
    tracker.free_all()
    assert log == items
    assert len(tracker) == 0


def test_add_many_with_container():
    released = []
    tracker = ResourceTracker(release=released.append)
    elements = [object(), object()]
    tracker.add_many(elements, container=True)
    assert len(tracker) == 3
    assert elements in tracker
    tracker.free_all()
    assert released[-1] is elements


def test_add_many_without_container():
    tracker = ResourceTracker(release=lambda item: None)
    elements = (object(), object())
    tracker.add_many(elements, container=False)
    assert len(tracker) == 2
    assert elements not in tracker


def test_report_lists_items():
    tracker = ResourceTracker()
    item = Closable()
    tracker.add(item)
    text = tracker.report()
    assert text.startswith("=== Garbage Collector Stats ===\n")
    assert "Nombre de pointeurs : 1\n" in text
    assert f"Pointer 0: {id(item):#x}" in text


def test_verbose_announces_additions(capsys):
    tracker = ResourceTracker(verbose=True)
    tracker.add(Closable())
    out = capsys.readouterr().out
    assert "Pointer added to garbage collector chain" in out


def test_context_manager_frees_on_exit():
    item = Closable()
    with ResourceTracker() as tracker:
        tracker.add(item)
    assert item.closed is True
    assert len(tracker) == 0


def test_release_errors_propagate():
    def fail(item):
        raise RuntimeError("boom")

    tracker = ResourceTracker(release=fail)
    tracker.add(object())
    with pytest.raises(RuntimeError):
        tracker.free_all()