"""Read-only author reference data."""

from typing import Iterable, Iterator, Optional

from bookgraph.api.schemas.catalog import Author


class AuthorIndex:
    """Static table of catalog authors, fixed at construction."""

    def __init__(self, authors: Iterable[Author]) -> None:
        self._authors: tuple[Author, ...] = tuple(authors)

    def get(self, author_id: int) -> Optional[Author]:
        """Get an author by ID."""
        for author in self._authors:
            if author.id == author_id:
                return author
        return None

    def find_by_name(self, name: str) -> Optional[Author]:
        """Get the first author whose name matches exactly."""
        for author in self._authors:
            if author.name == name:
                return author
        return None

    def __iter__(self) -> Iterator[Author]:
        return iter(self._authors)

    def __len__(self) -> int:
        return len(self._authors)
