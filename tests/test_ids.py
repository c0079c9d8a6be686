import uuid

import pytest

from bookshelf.errors import ConvertToUuidError
from bookshelf.ids import BookId, CheckoutId, UserId

SAMPLE = "67e55044-10b1-426f-9247-bb680e5fe0c8"


def test_str_is_simple_lowercase_hex():
    assert str(BookId.parse(SAMPLE)) == "67e5504410b1426f9247bb680e5fe0c8"


@pytest.mark.parametrize("cls", [UserId, BookId, CheckoutId])
def test_round_trip(cls):
    original = cls.new()
    assert cls.parse(str(original)) == original


def test_parse_accepts_hyphenated_and_upper():
    assert BookId.parse(SAMPLE.upper()) == BookId.parse(SAMPLE)
    assert BookId.parse(SAMPLE).value == uuid.UUID(SAMPLE)


@pytest.mark.parametrize("text", ["", "not-a-uuid", "67e55044-10b1-426f-9247"])
def test_parse_rejects_garbage(text):
    with pytest.raises(ConvertToUuidError):
        BookId.parse(text)


def test_new_is_random_v4():
    first, second = BookId.new(), BookId.new()
    assert first != second
    assert first.value.version == 4


def test_default_constructor_is_random_v4():
    ids = {BookId() for _ in range(10)}
    assert len(ids) == 10
    assert all(book_id.value.version == 4 for book_id in ids)


def test_different_kinds_are_not_equal():
    value = uuid.UUID(SAMPLE)
    assert BookId(value) != UserId(value)
    assert BookId(value) == BookId(value)


def test_hashable():
    value = uuid.UUID(SAMPLE)
    assert len({BookId(value), BookId(value), CheckoutId(value)}) == 2