"""Bindings from named catalog operations to the store, index and bus."""

from typing import Optional, Sequence, Union

import structlog

from bookgraph.api.schemas.catalog import Author, AuthorInput, Book, BookInput, BookUpdateInput
from bookgraph.config import Settings, get_settings
from bookgraph.core.catalog.authors import AuthorIndex
from bookgraph.core.catalog.events import EventBus, Subscription
from bookgraph.core.catalog.seed import seed_authors, seed_books
from bookgraph.core.catalog.store import BookStore

logger = structlog.get_logger(__name__)

BOOK_CREATED = "BOOK_CREATED"


class ResolverSet:
    """
    One method per API operation.

    ``create_book`` is the only method that does more than forward a
    call. It publishes a :class:`Book` built from the raw input, with no
    id, before the store assigns one; subscribers therefore see a
    payload that differs from the mutation's return value. Set
    ``publish_committed`` to publish the stored book instead.

    With ``resolve_authors`` on, submitted authors that match a catalog
    author by name (and by age, when one is given) are replaced with the
    shared catalog entry. Everything else is stored exactly as submitted.
    """

    def __init__(
        self,
        store: BookStore,
        authors: AuthorIndex,
        events: EventBus,
        resolve_authors: bool = False,
        publish_committed: bool = False,
    ) -> None:
        self.store = store
        self.authors = authors
        self.events = events
        self.resolve_authors = resolve_authors
        self.publish_committed = publish_committed

    # --- Queries ---

    def books(self) -> list[Book]:
        return self.store.list_books()

    def book_by_id(self, book_id: str) -> Optional[Book]:
        return self.store.get_by_id(book_id)

    def books_by_title(self, title: str) -> Optional[Book]:
        return self.store.get_by_title(title)

    def books_by_author(self, name: str) -> list[Book]:
        return self.store.get_by_author_name(name)

    # --- Mutations ---

    def create_book(self, book: Optional[BookInput]) -> Optional[Book]:
        """Store a new book and notify subscribers."""
        if book is None:
            return None
        if not self.publish_committed:
            self._publish(Book(title=book.title, authors=list(book.authors)))
        created = self.store.create(book.title, self._author_refs(book.authors))
        if self.publish_committed:
            self._publish(created)
        return created

    def update_book(self, book: BookUpdateInput) -> list[Book]:
        return self.store.update(book.id, book.title, self._author_refs(book.authors))

    def delete_book(self, book_id: str) -> list[Book]:
        return self.store.delete(book_id)

    # --- Subscriptions ---

    def new_book(self) -> Subscription:
        """Register for books created from now on."""
        return self.events.subscribe()

    def _publish(self, book: Book) -> None:
        reached = self.events.publish(book)
        logger.debug("Event published", event_type=BOOK_CREATED, book_id=book.id, subscribers=reached)

    def _author_refs(self, authors: Sequence[AuthorInput]) -> list[Union[Author, AuthorInput]]:
        if not self.resolve_authors:
            return list(authors)
        return [self._resolve(author) for author in authors]

    def _resolve(self, author: AuthorInput) -> Union[Author, AuthorInput]:
        if author.name is None:
            return author
        match = self.authors.find_by_name(author.name)
        if match is None or (author.age is not None and author.age != match.age):
            return author
        return match


def build_resolver_set(settings: Optional[Settings] = None) -> ResolverSet:
    """Create a catalog loaded with the seed data."""
    settings = settings or get_settings()
    index = AuthorIndex(seed_authors())
    store = BookStore(seed_books(list(index)), id_strategy=settings.book_id_strategy)
    events = EventBus(queue_size=settings.subscriber_queue_size)
    logger.info(
        "Catalog initialized",
        books=len(store),
        authors=len(index),
        id_strategy=settings.book_id_strategy,
    )
    return ResolverSet(
        store,
        index,
        events,
        resolve_authors=settings.resolve_author_references,
        publish_committed=settings.publish_committed_book,
    )


# Singleton instance
_resolvers: ResolverSet | None = None


def get_resolver_set() -> ResolverSet:
    """Get or create the process-wide catalog."""
    global _resolvers
    if _resolvers is None:
        _resolvers = build_resolver_set()
    return _resolvers
