"""Tests for the in-memory book store and author index."""

import pytest

from bookgraph.api.schemas.catalog import Author, AuthorInput
from bookgraph.core.catalog import AuthorIndex, BookStore
from bookgraph.core.catalog.seed import seed_authors, seed_books


@pytest.fixture
def index():
    return AuthorIndex(seed_authors())


@pytest.fixture
def store(index):
    return BookStore(seed_books(list(index)))


def ids(books):
    return [book.id for book in books]


def test_seed_books(store):
    assert ids(store.list_books()) == ["1", "2", "3"]
    assert store.get_by_id("1").author_names() == ["Author1", "Author2"]


def test_list_is_live_view(store):
    books = store.list_books()
    store.create("Book4", [])
    assert len(books) == 4


def test_get_by_id_missing(store):
    assert store.get_by_id("99") is None


def test_get_by_title(store):
    assert store.get_by_title("Book2").id == "2"
    assert store.get_by_title("book2") is None


def test_get_by_title_is_idempotent(store):
    first = store.get_by_title("Book3")
    second = store.get_by_title("Book3")
    assert first == second


def test_get_by_author_name(store):
    assert ids(store.get_by_author_name("Author1")) == ["1", "3"]
    assert ids(store.get_by_author_name("Author2")) == ["1", "2"]
    assert store.get_by_author_name("Nobody") == []


def test_get_by_author_name_matches_stored_inputs(store):
    store.create("Book4", [AuthorInput(name="Zed", age=40)])
    assert ids(store.get_by_author_name("Zed")) == ["4"]


def test_create_assigns_size_based_id(store):
    book = store.create("Book4", [])
    assert book.id == "4"
    assert len(store) == 4
    assert store.get_by_id("4") == book


def test_create_stores_authors_as_given(store):
    ghost = AuthorInput(name="Author1", age=99)
    book = store.create("Book4", [ghost])
    assert book.authors == [ghost]
    assert isinstance(book.authors[0], AuthorInput)


def test_update_replaces_in_place(store):
    before = [book.model_copy() for book in store.list_books()]
    books = store.update("2", "Book2-v2", [AuthorInput(name="New")])

    assert ids(books) == ["1", "2", "3"]
    assert books[1].title == "Book2-v2"
    assert books[1].author_names() == ["New"]
    assert books[0] == before[0]
    assert books[2] == before[2]


def test_update_missing_id_is_noop(store):
    before = [book.model_dump() for book in store.list_books()]
    books = store.update("42", "Nope", [])
    assert [book.model_dump() for book in books] == before


def test_delete(store):
    books = store.delete("2")
    assert ids(books) == ["1", "3"]
    assert store.get_by_id("2") is None


def test_delete_missing_id_is_noop(store):
    books = store.delete("42")
    assert ids(books) == ["1", "2", "3"]


def test_size_strategy_reuses_ids_after_delete(store):
    store.delete("1")
    book = store.create("Book4", [])
    # three books left after the delete and one more created, so the id is "3" again
    assert book.id == "3"
    assert ids(store.list_books()) == ["2", "3", "3"]
    assert store.get_by_id("3").title == "Book3"


def test_counter_strategy_never_reuses_ids(index):
    store = BookStore(seed_books(list(index)), id_strategy="counter")
    store.delete("3")
    assert store.create("Book4", []).id == "4"
    assert store.create("Book5", []).id == "5"
    assert ids(store.list_books()) == ["1", "2", "4", "5"]


def test_unknown_id_strategy():
    with pytest.raises(ValueError):
        BookStore(id_strategy="uuid")


def test_author_index_lookup(index):
    assert len(index) == 2
    assert index.find_by_name("Author2") == Author(id=2, name="Author2", age=25)
    assert index.find_by_name("author2") is None
    assert index.get(1).name == "Author1"
    assert index.get(3) is None


def test_authors_have_no_books(index):
    assert all(author.books == [] for author in index)
