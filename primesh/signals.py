"""Signal dispositions for the prompt, command execution and here-documents."""

from __future__ import annotations

import signal
import sys
from dataclasses import dataclass
from typing import Any, Callable, TextIO

from .exit_codes import ExitCode

_SIGINT = signal.SIGINT
_SIGQUIT = getattr(signal, "SIGQUIT", None)
_SIGTSTP = getattr(signal, "SIGTSTP", None)


@dataclass(eq=False)
class SignalState:
    """Shell-wide signal state: the sub-shell flag and the last exit status."""

    extsh: bool = False
    status: int = 0
    stream: TextIO | None = None

    def _write(self, text: str) -> None:
        out = self.stream if self.stream is not None else sys.stdout
        out.write(text)
        out.flush()

    def on_exec_signal(self, signum: int, frame: Any = None) -> None:
        """Handle a signal that arrives while a command runs."""
        if signum == _SIGINT:
            self._write("\n")
            self.status = ExitCode.EXIT_CTRL_C
        elif _SIGQUIT is not None and signum == _SIGQUIT:
            self._write("Quit (core dumped)\n")
            self.status = ExitCode.EXIT_QUIT

    def on_prompt_signal(self, signum: int, frame: Any = None) -> None:
        """Handle a signal that arrives while the prompt waits for input."""
        if signum == _SIGINT:
            self._write("\n")
            self.status = ExitCode.EXIT_CTRL_C


def _install(handlers: dict[int | None, Callable | int]) -> dict[int, Callable | int]:
    installed = {}
    for signum, handler in handlers.items():
        if signum is None:
            continue
        signal.signal(signum, handler)
        installed[signum] = handler
    return installed


def handle_signal(
    state: SignalState, executing: bool = False, heredoc: bool = False
) -> dict[int, Callable | int]:
    """Install the handlers suited to the current phase; return what was installed."""
    ign = signal.SIG_IGN
    if state.extsh:
        installed = _install({_SIGINT: ign, _SIGQUIT: ign, _SIGTSTP: ign})
        if executing:
            state.extsh = False
        elif heredoc:
            state.extsh = True
        return installed
    if executing:
        handler = state.on_exec_signal
        return _install({_SIGINT: handler, _SIGQUIT: handler, _SIGTSTP: handler})
    if heredoc:
        return _install({_SIGINT: ign, _SIGQUIT: ign, _SIGTSTP: ign})
    installed = _install({_SIGINT: state.on_prompt_signal, _SIGQUIT: ign, _SIGTSTP: ign})
    state.extsh = False
    return installed