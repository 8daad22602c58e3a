"""Observable values and subjects."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Generic, TypeVar

from loguru import logger

from moviesearch.reactive.subscription import Subscription

T = TypeVar("T")

Observer = Callable[[T], None]


def deliver(observer: Observer, value) -> None:
    """Call one observer, logging instead of propagating its failures."""
    try:
        observer(value)
    except Exception:
        logger.exception("Observer {!r} failed while handling an emission", observer)


class Observable(Generic[T]):
    """A push-based source of values."""

    def subscribe(self, observer: Observer[T]) -> Subscription:
        raise NotImplementedError


class AnonymousObservable(Observable[T]):
    """Observable whose subscribe behaviour is a plain function."""

    def __init__(self, on_subscribe: Callable[[Observer[T]], Subscription]):
        self._on_subscribe = on_subscribe

    def subscribe(self, observer: Observer[T]) -> Subscription:
        return self._on_subscribe(observer)


class _Entry:
    __slots__ = ("observer", "subscription")

    def __init__(self, observer: Observer):
        self.observer = observer
        self.subscription: Subscription | None = None


class PublishSubject(Observable[T]):
    """Multicasts every emitted value to the current subscribers, without replay.

    Deliveries are serialized per subject: an ``emit`` from another thread
    waits until the current delivery round has finished. Re-entrant emits
    from an observer on the delivering thread are allowed.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._delivery = threading.RLock()
        self._entries: list[_Entry] = []

    @property
    def observer_count(self) -> int:
        with self._lock:
            return len(self._entries)

    def subscribe(self, observer: Observer[T]) -> Subscription:
        entry = self._register(observer)
        return entry.subscription

    def emit(self, value: T) -> None:
        with self._delivery:
            with self._lock:
                entries = list(self._entries)
            self._dispatch(entries, value)

    def _register(self, observer: Observer[T]) -> _Entry:
        entry = _Entry(observer)
        entry.subscription = Subscription(lambda: self._remove(entry))
        with self._lock:
            self._entries.append(entry)
        return entry

    def _dispatch(self, entries: list[_Entry], value: T) -> None:
        for entry in entries:
            if entry.subscription.disposed:
                continue
            deliver(entry.observer, value)

    def _remove(self, entry: _Entry) -> None:
        with self._lock:
            if entry in self._entries:
                self._entries.remove(entry)


class BehaviorSubject(PublishSubject[T]):
    """Holds a latest value and replays it to every new subscriber.

    Registration, the replay and every ``emit`` go through the subject's
    delivery lock, so producers on any thread may call ``emit`` and a new
    subscriber always ends on the latest value.
    """

    def __init__(self, initial: T):
        super().__init__()
        self._value = initial

    @property
    def value(self) -> T:
        with self._lock:
            return self._value

    def subscribe(self, observer: Observer[T]) -> Subscription:
        with self._delivery:
            entry = self._register(observer)
            current = self.value
            if not entry.subscription.disposed:
                deliver(observer, current)
        return entry.subscription

    def emit(self, value: T) -> None:
        with self._delivery:
            with self._lock:
                self._value = value
                entries = list(self._entries)
            self._dispatch(entries, value)
