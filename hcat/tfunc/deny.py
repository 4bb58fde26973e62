"""A template function that always refuses to run."""

from __future__ import annotations

_DISABLED_MESSAGE = "function disabled"


class FunctionDisabledError(Exception):
    """Raised when a denied template function is called."""

    def __init__(self, message: str = _DISABLED_MESSAGE, arg_count: int = 0) -> None:
        super().__init__(message)
        self.arg_count = arg_count


def deny_func(*args) -> str:
    """Always raise :class:`FunctionDisabledError`, noting how many arguments came."""
    error = FunctionDisabledError(_DISABLED_MESSAGE, arg_count=len(args))
    raise error