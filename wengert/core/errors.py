# wengert/core/errors.py
"""Exceptions raised when handles are used against the wrong tape."""


class WengertError(Exception):
    """Base class for all errors raised by the wengert package."""


class TapeError(WengertError):
    """A tape contract was broken (bad parent index, foreign or stale handle)."""


class TapeMismatchError(TapeError):
    """Two handles bound to different tapes were combined."""


class StaleVariableError(TapeError):
    """A handle was used after its tape had been cleared."""
