"""Exit statuses used by the shell."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit statuses. Several names share a value and act as aliases."""

    SUCCESS = 0
    FAILURE = 1
    COMMAND_NOT_FOUND = 127
    SYNTAX_ERROR = 258
    PERMISSION_DENIED = 126
    EXIT_SIGNAL = 130
    EXIT_QUIT = 131
    EXIT_CTRL_C = 130
    EXIT_CTRL_D = 0
    EXIT_CTRL_Z = 20
    EXIT_SIGINT = 130
    EXIT_SIGQUIT = 131
    EXIT_SIGTERM = 143
    EXIT_SIGKILL = 137
    EXIT_SIGSEGV = 139