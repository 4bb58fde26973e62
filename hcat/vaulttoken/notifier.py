"""A notifier that defers to a callback."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class CallbackNotifier:
    """Notifier for a dependency whose decisions come from *fun*.

    A false return from :meth:`notify` tells the watcher not to pass the
    notification on.
    """

    dep: Any
    fun: Optional[Callable[[Any], bool]] = None

    def notify(self, d: Any) -> bool:
        if self.fun is not None:
            return self.fun(d)
        return True

    def id(self) -> str:
        """Return the identifier of the watched dependency."""
        return self.dep.id()