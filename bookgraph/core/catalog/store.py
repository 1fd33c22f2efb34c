"""In-memory book storage."""

import threading
from typing import Iterable, Literal, Optional, Sequence, Union

import structlog

from bookgraph.api.schemas.catalog import Author, AuthorInput, Book

logger = structlog.get_logger(__name__)

AuthorRef = Union[Author, AuthorInput]
IdStrategy = Literal["size", "counter"]


class BookStore:
    """
    Ordered in-memory collection of books.

    Lookups never raise: a missing book is ``None`` (or an empty list),
    and mutations aimed at an unknown id hand back the collection as it
    is.

    Ids come from ``id_strategy``:

    * ``"size"`` - ``str(len(books) + 1)`` at creation time. After a
      deletion this can hand out an id that is still in use.
    * ``"counter"`` - a monotonic counter that starts after the
      initial books and never goes back.
    """

    def __init__(self, books: Iterable[Book] = (), id_strategy: IdStrategy = "size") -> None:
        if id_strategy not in ("size", "counter"):
            raise ValueError(f"Unknown id strategy '{id_strategy}'. Available: size, counter")
        self._books: list[Book] = list(books)
        self._id_strategy = id_strategy
        self._next_id = len(self._books) + 1
        self._lock = threading.RLock()

    @property
    def id_strategy(self) -> IdStrategy:
        return self._id_strategy

    def list_books(self) -> list[Book]:
        """List all books. The returned list is the store's own, not a copy."""
        return self._books

    def get_by_id(self, book_id: str) -> Optional[Book]:
        """Get the first book with the given ID."""
        with self._lock:
            for book in self._books:
                if book.id == book_id:
                    return book
        return None

    def get_by_title(self, title: str) -> Optional[Book]:
        """Get the first book whose title matches exactly."""
        with self._lock:
            for book in self._books:
                if book.title == title:
                    return book
        return None

    def get_by_author_name(self, name: str) -> list[Book]:
        """Get every book with at least one author of exactly this name."""
        with self._lock:
            return [book for book in self._books if name in book.author_names()]

    def create(self, title: str, authors: Sequence[AuthorRef]) -> Book:
        """Append a new book. Authors are stored as given."""
        with self._lock:
            book = Book(id=self._assign_id(), title=title, authors=list(authors))
            self._books.append(book)
        logger.info("Book created", book_id=book.id, title=title, authors=len(book.authors))
        return book

    def update(self, book_id: str, title: str, authors: Sequence[AuthorRef]) -> list[Book]:
        """Replace the first book with the given ID, keeping its position."""
        with self._lock:
            index = self._index_of(book_id)
            if index is None:
                logger.debug("Update skipped, book not found", book_id=book_id)
                return self._books
            self._books[index] = Book(id=book_id, title=title, authors=list(authors))
        logger.info("Book updated", book_id=book_id, title=title, position=index)
        return self._books

    def delete(self, book_id: str) -> list[Book]:
        """Remove the first book with the given ID, if there is one."""
        with self._lock:
            index = self._index_of(book_id)
            if index is None:
                logger.debug("Delete skipped, book not found", book_id=book_id)
                return self._books
            del self._books[index]
        logger.info("Book deleted", book_id=book_id, remaining=len(self._books))
        return self._books

    def _index_of(self, book_id: str) -> Optional[int]:
        for index, book in enumerate(self._books):
            if book.id == book_id:
                return index
        return None

    def _assign_id(self) -> str:
        if self._id_strategy == "counter":
            book_id = self._next_id
            self._next_id += 1
            return str(book_id)
        return str(len(self._books) + 1)

    def __len__(self) -> int:
        return len(self._books)
