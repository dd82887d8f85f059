"""The interactive shell loop."""

from __future__ import annotations

import locale
import signal
import sys
from dataclasses import dataclass, field
from typing import Callable, Optional

from .prompt import build_prompt
from .signals import SignalState, handle_signal
from .tracker import ResourceTracker

WELCOME = "Welcome to PrimeSH! Type 'exit' to quit or CTRL + D.\n"

_HANDLED_SIGNALS = [
    signum
    for signum in (
        signal.SIGINT,
        getattr(signal, "SIGQUIT", None),
        getattr(signal, "SIGTSTP", None),
    )
    if signum is not None
]


@dataclass(eq=False)
class ChainNode:
    """A link of the shell's chain, pointing back to the shell data."""

    next: Optional["ChainNode"] = field(default=None, repr=False)
    prev: Optional["ChainNode"] = field(default=None, repr=False)
    data: Optional["ShellData"] = field(default=None, repr=False)


@dataclass(eq=False)
class ShellData:
    """Everything the running shell holds."""

    chain: Optional[ChainNode] = None
    garbage: ResourceTracker = field(default_factory=ResourceTracker)
    signals: SignalState = field(default_factory=SignalState)
    history: list[str] = field(default_factory=list)


def initialize_data() -> ShellData:
    """Create the shell data with its chain head and signal state tracked."""
    data = ShellData()
    data.chain = ChainNode(data=data)
    data.garbage.add(data.chain)
    data.signals.extsh = False
    data.signals.status = 0
    data.garbage.add(data.signals)
    return data


def run(
    data: ShellData,
    read_input: Callable[[str], Optional[str]],
    write: Callable[[str], object],
) -> int:
    """Run the read loop until ``exit`` or end of input; return the last status.

    ``read_input`` receives the prompt and returns a line, or None at end of
    input. The previous signal handlers are restored when the loop ends.
    """
    previous = {signum: signal.getsignal(signum) for signum in _HANDLED_SIGNALS}
    write(WELCOME)
    try:
        while True:
            handle_signal(data.signals)
            line = read_input(build_prompt(data.signals.status))
            if line is None or line == "exit":
                write("exit\n")
                data.history.clear()
                data.garbage.free_all()
                break
            data.history.append(line)
            write(f"You entered: {line}\n")
    finally:
        for signum, handler in previous.items():
            if handler is not None:
                signal.signal(signum, handler)
    return int(data.signals.status)


def _read_line(prompt: str) -> Optional[str]:
    try:
        return input(prompt)
    except EOFError:
        return None


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def main(argv: Optional[list[str]] = None) -> int:
    """Start the interactive shell."""
    try:
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error:
        pass
    try:
        import readline
    except ImportError:
        readline = None
    data = initialize_data()
    run(data, _read_line, _write)
    clear_history = getattr(readline, "clear_history", None)
    if callable(clear_history):
        clear_history()
    return 0


if __name__ == "__main__":
    sys.exit(main())