"""Small helpers for rendering the last exit status."""

SUCCESS_COLOR = "\x1b[38;5;82m"
FAILURE_COLOR = "\x1b[38;5;196m"


def status_color(status: int) -> str:
    """Return the ANSI colour used to show ``status``: green for 0, red otherwise."""
    return SUCCESS_COLOR if status == 0 else FAILURE_COLOR


def format_status(status: int) -> str:
    """Return the decimal text of ``status``."""
    return str(int(status))