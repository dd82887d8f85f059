"""Lookup of the current git branch."""

from __future__ import annotations

import os
import subprocess

GIT_PATH = "/usr/bin/git"
BRANCH_BUFFER_SIZE = 128
_GIT_ARGV = ["git", "rev-parse", "--abbrev-ref", "HEAD"]


def is_valid_branch(branch: str) -> bool:
    """Tell whether git's answer names a branch rather than an error."""
    return bool(branch) and not branch.startswith("fatal:")


def parse_branch_output(output: bytes | str) -> str | None:
    """Turn the raw output of ``git rev-parse`` into a branch name, or None."""
    if isinstance(output, str):
        output = output.encode("utf-8", errors="surrogateescape")
    data = output[: BRANCH_BUFFER_SIZE - 1]
    if not data:
        return None
    if data.endswith(b"\n"):
        data = data[:-1]
    branch = data.decode("utf-8", errors="replace")
    return branch if is_valid_branch(branch) else None


def get_git_branch(cwd: str | os.PathLike[str] | None = None) -> str | None:
    """Return the branch checked out in ``cwd`` (default: the current directory)."""
    try:
        result = subprocess.run(
            _GIT_ARGV,
            executable=GIT_PATH,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            env={},
            cwd=cwd,
            check=False,
        )
    except OSError:
        return None
    return parse_branch_output(result.stdout or b"")