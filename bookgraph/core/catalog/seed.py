"""Data loaded into a fresh catalog."""

from bookgraph.api.schemas.catalog import Author, Book


def seed_authors() -> list[Author]:
    return [
        Author(id=1, name="Author1", age=22),
        Author(id=2, name="Author2", age=25),
    ]


def seed_books(authors: list[Author]) -> list[Book]:
    """Build the starting books, referencing the given author objects."""
    first, second = authors[0], authors[1]
    return [
        Book(id="1", title="Book1", authors=[first, second]),
        Book(id="2", title="Book2", authors=[second]),
        Book(id="3", title="Book3", authors=[first]),
    ]
