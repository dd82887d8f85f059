"""Construction of the coloured interactive prompt."""

from __future__ import annotations

import os

from .git import get_git_branch
from .utils import format_status, status_color

_DETECT = object()

_START = "\001"
_END = "\002"
_RESET = "\001\x1b[0m\002 "


def directory_label(cwd: str) -> str:
    """Return the last path component of ``cwd``, or ``cwd`` itself when there is none."""
    slash = cwd.rfind("/")
    if slash != -1 and slash + 1 < len(cwd):
        return cwd[slash + 1:]
    return cwd


def _segment(color: int, icon: str, text: str) -> str:
    return "".join(
        (
            f"\001\x1b[38;5;{color}m\x1b[1m\002",
            f"\001\x1b[0m\x1b[48;5;{color}m\x1b[1;37m\002",
            f" {icon} ",
            text,
            " ",
            f"\001\x1b[0m\x1b[38;5;{color}m\x1b[1m\002",
            _RESET,
        )
    )


def build_prompt(status: int, cwd: str | None = None, branch=_DETECT) -> str:
    """Build the prompt showing the last status, the directory and the git branch.

    ``cwd`` defaults to the working directory. ``branch`` is looked up with git
    unless given; pass None to leave the branch segment out.
    """
    if cwd is None:
        cwd = os.getcwd()
    if branch is _DETECT:
        branch = get_git_branch(cwd)
    parts = [
        _START,
        status_color(status),
        "\x1b[1m",
        _END,
        format_status(status),
        _RESET,
        _segment(208, "📁", directory_label(cwd)),
    ]
    if branch:
        parts.append(_segment(35, "👾", branch))
    return "".join(parts)