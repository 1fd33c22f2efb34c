"""API schemas."""

from bookgraph.api.schemas.catalog import Author, AuthorInput, Book, BookInput, BookUpdateInput

__all__ = ["Author", "AuthorInput", "Book", "BookInput", "BookUpdateInput"]
