"""Strawberry schema for the catalog.

Types here only mirror the API shape; every resolver forwards to the
:class:`~bookgraph.core.catalog.ResolverSet` found in the request
context. All output fields are nullable, so stored author inputs render
with ``id: null``.
"""

from typing import AsyncGenerator, Optional, Union

import strawberry
from strawberry.types import Info

from bookgraph.api.schemas.catalog import Author, AuthorInput, Book, BookInput, BookUpdateInput
from bookgraph.core.catalog import ResolverSet


def _resolvers(info: Info) -> ResolverSet:
    return info.context["resolvers"]


@strawberry.type(name="Author")
class AuthorType:
    id: Optional[strawberry.ID] = None
    name: Optional[str] = None
    age: Optional[int] = None
    books: Optional[list["BookType"]] = None

    @classmethod
    def from_model(cls, author: Union[Author, AuthorInput]) -> "AuthorType":
        if isinstance(author, Author):
            return cls(
                id=strawberry.ID(str(author.id)),
                name=author.name,
                age=author.age,
                books=[BookType.from_model(book) for book in author.books],
            )
        return cls(name=author.name, age=author.age)


@strawberry.type(name="Book")
class BookType:
    id: Optional[strawberry.ID] = None
    title: Optional[str] = None
    authors: Optional[list[Optional[AuthorType]]] = None

    @classmethod
    def from_model(cls, book: Book) -> "BookType":
        return cls(
            id=strawberry.ID(book.id) if book.id is not None else None,
            title=book.title,
            authors=[AuthorType.from_model(author) for author in book.authors],
        )


def _books(books: list[Book]) -> list[Optional[BookType]]:
    return [BookType.from_model(book) for book in books]


def _book(book: Optional[Book]) -> Optional[BookType]:
    return BookType.from_model(book) if book is not None else None


@strawberry.input(name="AuthorInput")
class AuthorInputType:
    name: Optional[str] = None
    age: Optional[int] = None


@strawberry.input(name="BookInput")
class BookInputType:
    title: str
    authors: list[Optional[AuthorInputType]]


@strawberry.input(name="BookInputForUpdate")
class BookUpdateInputType:
    id: strawberry.ID
    title: str
    authors: list[Optional[AuthorInputType]]


def _author_inputs(authors: list[Optional[AuthorInputType]]) -> list[AuthorInput]:
    # a null list entry is kept as an author with no fields
    return [
        AuthorInput(name=author.name, age=author.age) if author is not None else AuthorInput()
        for author in authors
    ]


@strawberry.type
class Query:
    @strawberry.field
    def books(self, info: Info) -> Optional[list[Optional[BookType]]]:
        return _books(_resolvers(info).books())

    @strawberry.field
    def book_by_id(self, info: Info, id: strawberry.ID) -> Optional[BookType]:
        return _book(_resolvers(info).book_by_id(str(id)))

    @strawberry.field
    def books_by_title(self, info: Info, title: str) -> Optional[BookType]:
        return _book(_resolvers(info).books_by_title(title))

    @strawberry.field
    def books_by_author(self, info: Info, name: str) -> Optional[list[Optional[BookType]]]:
        return _books(_resolvers(info).books_by_author(name))


@strawberry.type
class Mutation:
    @strawberry.mutation
    def create_book(self, info: Info, book: Optional[BookInputType] = None) -> Optional[BookType]:
        if book is None:
            return _book(_resolvers(info).create_book(None))
        created = _resolvers(info).create_book(
            BookInput(title=book.title, authors=_author_inputs(book.authors))
        )
        return _book(created)

    @strawberry.mutation
    def update_book(self, info: Info, book: BookUpdateInputType) -> Optional[list[Optional[BookType]]]:
        books = _resolvers(info).update_book(
            BookUpdateInput(id=str(book.id), title=book.title, authors=_author_inputs(book.authors))
        )
        return _books(books)

    @strawberry.mutation
    def delete_book(self, info: Info, id: strawberry.ID) -> Optional[list[Optional[BookType]]]:
        return _books(_resolvers(info).delete_book(str(id)))


@strawberry.type
class Subscription:
    @strawberry.subscription
    async def new_book(self, info: Info) -> AsyncGenerator[Optional[BookType], None]:
        subscription = _resolvers(info).new_book()
        try:
            async for book in subscription:
                yield _book(book)
        finally:
            subscription.close()


schema = strawberry.Schema(query=Query, mutation=Mutation, subscription=Subscription)
