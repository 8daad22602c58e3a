"""Operators composing observables."""

from __future__ import annotations

import asyncio
import threading
from collections.abc import Callable
from typing import Any, TypeVar

from moviesearch.reactive.observable import AnonymousObservable, Observable, Observer, deliver
from moviesearch.reactive.subscription import CompositeSubscription, Subscription

A = TypeVar("A")
B = TypeVar("B")
R = TypeVar("R")

_MISSING: Any = object()


def combine_latest(first: Observable[A], second: Observable[B]) -> Observable[tuple[A, B]]:
    """
    Emit ``(a, b)`` whenever either source emits, once both have emitted.

    The most recently seen value of the other source is reused; the two
    sources never need to tick together. Emissions are serialized so the
    output order matches the order in which input changes were observed.
    """

    def on_subscribe(observer: Observer[tuple[A, B]]) -> Subscription:
        latest = [_MISSING, _MISSING]
        lock = threading.RLock()
        subscription = CompositeSubscription()

        def update(index: int, value: Any) -> None:
            with lock:
                if subscription.disposed:
                    return
                latest[index] = value
                if latest[0] is _MISSING or latest[1] is _MISSING:
                    return
                deliver(observer, (latest[0], latest[1]))

        subscription.add(first.subscribe(lambda value: update(0, value)))
        subscription.add(second.subscribe(lambda value: update(1, value)))
        return subscription

    return AnonymousObservable(on_subscribe)


def map_values(source: Observable[A], transform: Callable[[A], R]) -> Observable[R]:
    """Apply ``transform`` to every value of ``source``."""

    def on_subscribe(observer: Observer[R]) -> Subscription:
        return source.subscribe(lambda value: observer(transform(value)))

    return AnonymousObservable(on_subscribe)


def observe_on(source: Observable[A], loop: asyncio.AbstractEventLoop) -> Observable[A]:
    """
    Re-deliver every value of ``source`` on ``loop``.

    Producers may emit from any thread; the hand-off goes through
    ``loop.call_soon_threadsafe`` so the observer only ever runs on the loop
    thread, in emission order. Values still queued when the subscription is
    disposed, or emitted after the loop has closed, are dropped.
    """

    def on_subscribe(observer: Observer[A]) -> Subscription:
        subscription = CompositeSubscription()

        def run(value: A) -> None:
            if not subscription.disposed:
                deliver(observer, value)

        def schedule(value: A) -> None:
            if subscription.disposed:
                return
            try:
                loop.call_soon_threadsafe(run, value)
            except RuntimeError:
                # loop already closed
                return

        subscription.add(source.subscribe(schedule))
        return subscription

    return AnonymousObservable(on_subscribe)
