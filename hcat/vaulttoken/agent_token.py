"""Dependency on a token file written by a Vault agent."""

from __future__ import annotations

import os
import threading
import time

from hcat.view import DependencyStopped, ResponseMetadata

VAULT_AGENT_TOKEN_SLEEP_TIME = 15.0


class VaultAgentTokenQuery:
    """Watches a token file and returns its contents whenever it changes."""

    def __init__(self, path: str, poll_interval: float = VAULT_AGENT_TOKEN_SLEEP_TIME) -> None:
        self.path = path
        self.poll_interval = poll_interval
        self._stopped = threading.Event()
        self._last_stat: tuple[int, int] | None = None

    def fetch(self, clients=None) -> tuple[str, ResponseMetadata]:
        """Wait until the file differs from the last read, then return it."""
        while True:
            if self._stopped.is_set():
                raise DependencyStopped()
            try:
                st = os.stat(self.path)
            except OSError as exc:
                raise self._wrap(exc) from exc

            current = (st.st_size, st.st_mtime_ns)
            if self._last_stat is None or current != self._last_stat:
                if self._stopped.is_set():
                    raise DependencyStopped()
                try:
                    with open(self.path, encoding="utf-8", errors="surrogateescape") as fh:
                        token = fh.read()
                except OSError as exc:
                    raise self._wrap(exc) from exc
                self._last_stat = current
                return token, ResponseMetadata(last_index=int(time.time()))

            if self._stopped.wait(self.poll_interval):
                raise DependencyStopped()

    def _wrap(self, exc: OSError) -> OSError:
        return type(exc)(exc.errno, f"{self.id()}: {exc.strerror}", exc.filename)

    def id(self) -> str:
        return "vault-agent.token"

    def stop(self) -> None:
        """Halt any fetch in progress."""
        self._stopped.set()

    def __str__(self) -> str:
        return self.id()