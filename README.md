# primesh

An interactive shell loop with a coloured prompt. The prompt shows:

- the exit status of the last command, in green when it is 0 and red otherwise,
- the name of the current directory,
- the current git branch, when `/usr/bin/git rev-parse --abbrev-ref HEAD`
  reports one for that directory.

## Installation

```
pip install .
```

## Usage

```
primesh
```

The shell prints a welcome line, then reads lines at the prompt. Each line is
added to the session history and echoed back as `You entered: <line>`. Typing
`exit` or pressing CTRL + D prints `exit` and leaves. At the prompt, CTRL + C
prints a new line and sets the status shown in the prompt to 130; CTRL + \ and
CTRL + Z are ignored.

## What it does not do

The shell does not run commands. It has no parsing, no pipes, no redirections,
no variables and no built-ins other than `exit`: every other line is only
echoed back.

## Library use

The parts that make up the shell can be used on their own.

```python
from primesh.prompt import build_prompt, directory_label
from primesh.git import get_git_branch
from primesh.printf import sprintf
from primesh.lines import LineReader

branch = get_git_branch("/home/me/project")       # None outside a git work tree
prompt = build_prompt(0, "/home/me/project", branch)
label = directory_label("/home/me/project")       # "project"

text = sprintf("%s has %d items", "list", 42)

with open("notes.txt", "rb") as handle:
    for line in LineReader(handle.fileno()):      # bytes, newline included
        print(line)
```

- `primesh.prompt.build_prompt(status, cwd=None, branch=...)` looks up the
  working directory and the git branch when they are not given; pass
  `branch=None` to leave the branch segment out.
- `primesh.printf` offers `sprintf`, `printf` and `dprintf` with the
  conversions `c`, `s`, `p`, `d`, `i`, `u`, `x`, `X` and `%%`. Hexadecimal
  conversions always carry one leading `0`; unknown conversions produce
  nothing. `printf` and `dprintf` return the number of bytes written.
- `primesh.lines.LineReader` reads from a file descriptor or a binary file
  object in chunks of 42 bytes by default, and returns `None` from
  `next_line()` once the input is exhausted.
- `primesh.signals.handle_signal(state, executing, heredoc)` installs the
  signal handlers for the prompt, for command execution or for a
  here-document, and records the resulting status on a `SignalState`.
- `primesh.tracker.ResourceTracker` keeps an ordered set of objects, matched
  by identity, and releases them together (by default by calling their
  `close()`); it can be used as a context manager.
- `primesh.descriptors.DescriptorTracker` does the same for file descriptors.
  It holds at most 1024 of them and raises `DescriptorError` (after closing
  everything) when full.
- `primesh.exit_codes.ExitCode` lists the exit statuses the shell uses.

## Tests

```
pip install .[test]
pytest
```