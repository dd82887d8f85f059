"""Tracking of owned resources so they can all be released together."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator


def _default_release(item: Any) -> None:
    close = getattr(item, "close", None)
    if callable(close):
        close()


class ResourceTracker:
    """Keeps owned objects in insertion order and releases them on demand.

    Objects are matched by identity, so the same object is tracked only once.
    Releasing an object calls ``release`` on it; by default that calls its
    ``close()`` method when it has one.
    """

    def __init__(
        self,
        release: Callable[[Any], None] = _default_release,
        verbose: bool = False,
    ) -> None:
        self._items: list[Any] = []
        self._release = release
        self.verbose = verbose
        if self.verbose:
            print("Garbage collector chain initialized")

    def add(self, item: Any) -> None:
        """Track ``item``; None and already tracked objects are ignored."""
        if item is None or item in self:
            return
        self._items.append(item)
        if self.verbose:
            print("Pointer added to garbage collector chain")

    def add_many(self, items: Iterable[Any], container: bool = False) -> None:
        """Track every element of ``items``, and ``items`` itself when ``container`` is true."""
        for item in items:
            self.add(item)
        if container:
            self.add(items)

    def remove(self, item: Any) -> None:
        """Release ``item`` and stop tracking it; untracked objects are ignored."""
        for position, tracked in enumerate(self._items):
            if tracked is item:
                del self._items[position]
                self._release(tracked)
                return

    def free_all(self) -> None:
        """Release every tracked object in insertion order and forget them all."""
        items, self._items = self._items, []
        for item in items:
            self._release(item)

    def report(self) -> str:
        """Return a readable summary of the tracked objects."""
        lines = [
            "=== Garbage Collector Stats ===",
            f"Nombre de pointeurs : {len(self._items)}",
        ]
        lines.extend(
            f"Pointer {index}: {id(item):#x}" for index, item in enumerate(self._items)
        )
        lines.append("================================")
        return "\n".join(lines) + "\n"

    def __contains__(self, item: Any) -> bool:
        return any(tracked is item for tracked in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __enter__(self) -> "ResourceTracker":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.free_all()