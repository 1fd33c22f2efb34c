"""Book and author schemas."""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class AuthorInput(BaseModel):
    """An author reference as submitted by a caller, stored as given."""
    name: Optional[str] = None
    age: Optional[int] = None


class Author(BaseModel):
    """
    A catalog author.

    ``books`` is part of the published shape but nothing ever fills it:
    the book -> author direction is the only one maintained.
    """
    model_config = ConfigDict(frozen=True)

    id: int = Field(description="Author identifier")
    name: str = Field(description="Author name")
    age: int = Field(description="Author age")
    books: list["Book"] = Field(default_factory=list)


class Book(BaseModel):
    """A book in the catalog."""
    id: Optional[str] = Field(default=None, description="Assigned when the book is stored")
    title: str = Field(description="Book title")
    authors: list[Union[Author, AuthorInput]] = Field(default_factory=list)

    def author_names(self) -> list[Optional[str]]:
        """Names of all authors, in order."""
        return [author.name for author in self.authors]


Author.model_rebuild()


class BookInput(BaseModel):
    """Input for creating a book."""
    title: str
    authors: list[AuthorInput] = Field(default_factory=list)


class BookUpdateInput(BaseModel):
    """Input for replacing a stored book."""
    id: str
    title: str
    authors: list[AuthorInput] = Field(default_factory=list)
