from bookshelf.ids import BookId
from bookshelf.models import Book, BookRow, CreateBook


def test_row_into_book_keeps_fields():
    book_id = BookId.new()
    row = BookRow(
        book_id=book_id,
        title="Test Title",
        author="Test Author",
        isbn="Test ISBN",
        description="Test Description",
    )
    assert row.into_book() == Book(
        id=book_id,
        title="Test Title",
        author="Test Author",
        isbn="Test ISBN",
        description="Test Description",
    )


def test_row_id_becomes_book_id():
    book_id = BookId.new()
    book = BookRow(book_id, "t", "a", "i", "d").into_book()
    assert book.id is book_id


def test_create_book_equality():
    assert CreateBook("t", "a", "i", "d") == CreateBook("t", "a", "i", "d")
    assert CreateBook("t", "a", "i", "d") != CreateBook("t", "a", "i", "e")