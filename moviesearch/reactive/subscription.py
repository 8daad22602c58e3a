"""Subscription handles with explicit, idempotent release."""

from __future__ import annotations

import threading
from collections.abc import Callable


class Subscription:
    """Handle returned by ``Observable.subscribe``.

    Once ``dispose()`` returns, the observer attached to this handle is never
    called again.
    """

    def __init__(self, on_dispose: Callable[[], None] | None = None):
        self._teardowns: list[Callable[[], None]] = [on_dispose] if on_dispose else []
        self._disposed = False
        self._lock = threading.Lock()

    @property
    def disposed(self) -> bool:
        return self._disposed

    def add_teardown(self, callback: Callable[[], None]) -> None:
        """Run ``callback`` on dispose; runs it now if already disposed."""
        with self._lock:
            if not self._disposed:
                self._teardowns.append(callback)
                return
        callback()

    def dispose(self) -> None:
        with self._lock:
            if self._disposed:
                return
            self._disposed = True
            teardowns, self._teardowns = self._teardowns, []
        for callback in teardowns:
            callback()


class CompositeSubscription(Subscription):
    """Groups subscriptions so they can be released together on teardown.

    A child released on its own is dropped from the group.
    """

    def __init__(self, *subscriptions: Subscription):
        super().__init__(self._dispose_children)
        self._children: list[Subscription] = []
        for subscription in subscriptions:
            self.add(subscription)

    def add(self, subscription: Subscription) -> Subscription:
        """Track a subscription; disposes it immediately if already released."""
        with self._lock:
            if not self._disposed:
                self._children.append(subscription)
                added = True
            else:
                added = False
        if not added:
            subscription.dispose()
            return subscription
        subscription.add_teardown(lambda: self._discard(subscription))
        return subscription

    def __len__(self) -> int:
        with self._lock:
            return len(self._children)

    def _discard(self, subscription: Subscription) -> None:
        with self._lock:
            if subscription in self._children:
                self._children.remove(subscription)

    def _dispose_children(self) -> None:
        with self._lock:
            children, self._children = self._children, []
        for child in children:
            child.dispose()
