"""Terminal emulator core: selections, key bindings, tabs, timers and PTY messaging."""

__version__ = "0.1.0"
__all__ = ["bindings", "messenger", "point", "scheduler", "selection", "tabs"]