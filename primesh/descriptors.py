"""Tracking of open file descriptors so they can be closed together."""

from __future__ import annotations

import enum
import os
from typing import Any, Callable

FD_MAX = 1024
INITIAL_CAPACITY = 2


class DescriptorErrorKind(enum.Enum):
    """Failures reported by a descriptor tracker."""

    NO_ERROR = "NO_ERROR"
    REALLOC_ERROR = "REALLOC_ERROR"
    FD_MAX_ERROR = "FD_MAX_ERROR"
    EMPTY_TRASH_ERROR = "EMPTY_TRASH_ERROR"
    MALLOC_ERROR = "MALLOC_ERROR"


class DescriptorError(Exception):
    """Raised when the tracker fails; the tracker has been cleared by then."""

    def __init__(self, kind: DescriptorErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


def _quiet_close(fd: int) -> None:
    try:
        os.close(fd)
    except OSError:
        pass


class DescriptorTracker:
    """Remembers file descriptors and closes them on demand.

    Closed slots keep their place and hold -1. The slot capacity starts at 2
    and doubles when full; at most ``FD_MAX`` slots may be used.
    """

    def __init__(self, closer: Callable[[int], None] = _quiet_close) -> None:
        self._fds: list[int] = []
        self._capacity = INITIAL_CAPACITY
        self._closer = closer

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def fds(self) -> tuple[int, ...]:
        return tuple(self._fds)

    def add(self, fd: int) -> None:
        """Track ``fd``; -1 is ignored.

        Raises DescriptorError (FD_MAX_ERROR) after closing everything when the
        tracker is full.
        """
        if fd == -1:
            return
        if len(self._fds) == FD_MAX:
            self._fail(DescriptorErrorKind.FD_MAX_ERROR)
        if len(self._fds) == self._capacity:
            self._capacity *= 2
        self._fds.append(fd)

    def close(self, fd: int) -> None:
        """Close every slot holding ``fd`` and mark it as -1."""
        for position, tracked in enumerate(self._fds):
            if tracked == fd:
                if tracked:
                    self._closer(tracked)
                self._fds[position] = -1

    def clear(self) -> None:
        """Close all still-open descriptors and reset the tracker."""
        fds, self._fds = self._fds, []
        self._capacity = INITIAL_CAPACITY
        for fd in fds:
            if fd != -1:
                self._closer(fd)

    def report(self) -> str:
        """Return a readable summary of the tracked descriptors."""
        lines = [
            "=== Garbage Descriptor Stats ===",
            f"Nombre de descripteur : {len(self._fds)}",
            f"Capacité : {self._capacity}",
        ]
        lines.extend(f"Descripteur {index}: {fd}" for index, fd in enumerate(self._fds))
        lines.append("================================")
        return "\n".join(lines) + "\n"

    def _fail(self, kind: DescriptorErrorKind) -> None:
        self.clear()
        raise DescriptorError(kind)

    def __len__(self) -> int:
        return len(self._fds)

    def __enter__(self) -> "DescriptorTracker":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.clear()