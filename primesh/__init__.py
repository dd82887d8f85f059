"""An interactive shell loop with a status, directory and git-branch prompt, and its helpers."""

__version__ = "0.1.0"