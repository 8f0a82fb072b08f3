"""Interactive line-oriented text editor in the classic Unix style."""

__all__ = [
    "actions",
    "buffer",
    "cli",
    "commands",
    "config",
    "editor",
    "errors",
    "modes",
    "runtime",
]

__version__ = "0.1.0"
