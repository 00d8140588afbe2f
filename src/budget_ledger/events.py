# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from __future__ import annotations

import logging
from typing import Callable, Protocol

from budget_ledger.types import LedgerEvent

logger = logging.getLogger("budget_ledger.events")


class LedgerListener(Protocol):
    """Callable notified once per completed ledger mutation."""

    def __call__(self, event: LedgerEvent) -> None:
        ...


class ChangeNotifier:
    """
    Synchronous observer fan-out.

    Listeners are called in registration order on the thread that made the
    change. A listener that raises stops delivery of that event and the
    exception reaches the mutator's caller; the change itself is already
    applied.
    """

    def __init__(self) -> None:
        self._listeners: list[LedgerListener] = []

    def subscribe(self, listener: LedgerListener) -> Callable[[], bool]:
        """
        Register ``listener`` and return a callable that unregisters it.

        Registering the same listener again is a no-op.
        """
        if listener not in self._listeners:
            self._listeners.append(listener)

        def unsubscribe() -> bool:
            return self.unsubscribe(listener)

        return unsubscribe

    def unsubscribe(self, listener: LedgerListener) -> bool:
        """
        Remove ``listener``.

        Returns:
            True if the listener was registered.
        """
        try:
            self._listeners.remove(listener)
        except ValueError:
            return False
        return True

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def notify(self, event: LedgerEvent) -> None:
        # Snapshot so listeners may (un)subscribe during dispatch.
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Ledger listener %r failed on %s event", listener, event.kind)
                raise
