import math

from rustlings.exercises.basics import Book, add_optional, circle_area, longest, swap


def test_longest_picks_longer():
    assert longest("abcd", "xyz") == "abcd"
    assert longest("xyz", "long string is long") == "long string is long"


def test_longest_tie_returns_second():
    assert longest("abc", "xyz") == "xyz"


def test_longest_counts_bytes():
    assert longest("éé", "abc") == "éé"


def test_book_display():
    book = Book(author="Jill Smith", title="Fish Flying")
    assert str(book) == "Fish Flying by Jill Smith"


def test_circle_area_zero():
    assert circle_area(0) == 0


def test_circle_area_scales_with_square():
    assert math.isclose(circle_area(2), 4 * circle_area(1))
    assert math.isclose(circle_area(1), math.pi)


def test_add_optional_present():
    assert add_optional(42, 12) - 42 == 12


def test_add_optional_absent():
    assert add_optional(42, None) == 42


def test_swap():
    assert swap(45, 66) == (66, 45)
    assert swap(*swap("a", 1)) == ("a", 1)