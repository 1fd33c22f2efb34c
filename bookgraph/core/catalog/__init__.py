"""Catalog core: author index, book store, event bus and resolvers."""

from bookgraph.core.catalog.authors import AuthorIndex
from bookgraph.core.catalog.events import EventBus, Subscription
from bookgraph.core.catalog.resolvers import ResolverSet, build_resolver_set, get_resolver_set
from bookgraph.core.catalog.store import BookStore

__all__ = [
    "AuthorIndex",
    "BookStore",
    "EventBus",
    "ResolverSet",
    "Subscription",
    "build_resolver_set",
    "get_resolver_set",
]
