import pytest

from raycub.search import (
    bounded_concat,
    bounded_copy,
    compare_bytes,
    compare_n,
    find_bounded,
    find_byte,
    find_char,
    rfind_char,
)


@pytest.mark.parametrize("text, c", [("hello", "l"), ("abcabc", "c"), ("x", "x")])
def test_find_char_is_first_occurrence(text, c):
    index = find_char(text, c)
    assert text[index] == c
    assert c not in text[:index]


def test_find_char_missing():
    assert find_char("hello", "z") is None


def test_find_char_terminator_is_end():
    assert find_char("abc", "\0") == len("abc")


def test_find_char_rejects_long_needle():
    with pytest.raises(ValueError):
        find_char("abc", "ab")


@pytest.mark.parametrize("text, c", [("hello", "l"), ("abcabc", "a"), ("q", "q")])
def test_rfind_char_is_last_occurrence(text, c):
    index = rfind_char(text, c)
    assert text[index] == c
    assert c not in text[index + 1:]


def test_rfind_char_missing_and_terminator():
    assert rfind_char("hello", "z") is None
    assert rfind_char("hello", "\0") == len("hello")


def test_find_bounded_inside_window():
    haystack = "Foo Bar Baz"
    index = find_bounded(haystack, "Bar", len(haystack))
    assert haystack[index:index + 3] == "Bar"


def test_find_bounded_match_must_fit_window():
    haystack = "Foo Bar Baz"
    start = haystack.index("Bar")
    assert find_bounded(haystack, "Bar", start + 2) is None
    assert find_bounded(haystack, "Bar", start + 3) == start


def test_find_bounded_empty_needle():
    assert find_bounded("anything", "", 0) == 0


def test_find_bounded_length_beyond_text():
    assert find_bounded("abc", "c", 100) == "abc".index("c")
    assert find_bounded("abc", "d", 100) is None


def test_find_bounded_negative_length():
    with pytest.raises(ValueError):
        find_bounded("abc", "a", -1)


def test_compare_n_equal_prefix():
    assert compare_n("abc", "abd", 2) == 0
    assert compare_n("same", "same", 10) == 0


def test_compare_n_sign():
    assert compare_n("abc", "abd", 3) < 0
    assert compare_n("abd", "abc", 3) > 0


def test_compare_n_is_antisymmetric():
    assert compare_n("apple", "apply", 5) == -compare_n("apply", "apple", 5)


def test_compare_n_shorter_string_uses_terminator():
    assert compare_n("a", "", 1) == ord("a")
    assert compare_n("", "b", 1) == -ord("b")


def test_compare_n_zero_length():
    assert compare_n("x", "y", 0) == 0


def test_bounded_copy_truncates():
    copied, total = bounded_copy("hello", 3)
    assert copied == "hello"[:2]
    assert total == len("hello")


def test_bounded_copy_fits():
    assert bounded_copy("hi", 10) == ("hi", 2)


def test_bounded_copy_zero_size():
    assert bounded_copy("hello", 0) == ("", len("hello"))


def test_bounded_concat_appends_within_room():
    result, total = bounded_concat("ab", "cdef", 5)
    assert result.startswith("ab")
    assert len(result) == 5 - 1
    assert "abcdef".startswith(result)
    assert total == len("ab") + len("cdef")


def test_bounded_concat_full_append():
    assert bounded_concat("ab", "cd", 10) == ("abcd", 4)


def test_bounded_concat_dest_fills_buffer():
    result, total = bounded_concat("abcdef", "xyz", 4)
    assert result == "abcdef"
    assert total == 4 + len("xyz")


def test_find_byte():
    data = b"hello"
    index = find_byte(data, ord("l"), len(data))
    assert data[index] == ord("l")
    assert find_byte(data, ord("o"), 4) is None


def test_find_byte_reduces_value():
    data = b"\x01\x02"
    assert find_byte(data, 0x102, 2) == data.index(b"\x02")


def test_find_byte_rejects_overrun():
    with pytest.raises(ValueError):
        find_byte(b"ab", 0, 3)


def test_compare_bytes():
    assert compare_bytes(b"abc", b"abc", 3) == 0
    assert compare_bytes(b"\xff", b"\x00", 1) == 255
    assert compare_bytes(b"abx", b"aby", 2) == 0
    assert compare_bytes(b"abx", b"aby", 3) < 0


def test_compare_bytes_rejects_overrun():
    with pytest.raises(ValueError):
        compare_bytes(b"ab", b"abc", 3)