"""Minimal observable primitives for the search pipeline."""

from moviesearch.reactive.observable import (
    AnonymousObservable,
    BehaviorSubject,
    Observable,
    Observer,
    PublishSubject,
)
from moviesearch.reactive.operators import combine_latest, map_values, observe_on
from moviesearch.reactive.subscription import CompositeSubscription, Subscription

__all__ = [
    "AnonymousObservable",
    "BehaviorSubject",
    "CompositeSubscription",
    "Observable",
    "Observer",
    "PublishSubject",
    "Subscription",
    "combine_latest",
    "map_values",
    "observe_on",
]
