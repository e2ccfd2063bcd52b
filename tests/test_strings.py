import pytest

from raycub.strings import (
    iter_indexed,
    join,
    map_indexed,
    split,
    substring,
    trim,
)

SPLIT_CASES = [
    ("  hello  world ", " "),
    ("a,b,,c,", ","),
    (",,,", ","),
    ("nosep", ","),
    ("", ","),
    ("1 1 0 1", " "),
]


def test_split_drops_empty_pieces_between_runs():
    assert split("  hello  world ", " ") == ["hello", "world"]


@pytest.mark.parametrize("text,sep", SPLIT_CASES)
def test_split_invariants(text, sep):
    pieces = split(text, sep)
    assert all(pieces)
    assert all(sep not in piece for piece in pieces)
    assert "".join(pieces) == text.replace(sep, "")


def test_split_of_only_separators_is_empty():
    assert len(split(",,,", ",")) == 0


def test_split_without_separator_keeps_whole_text():
    assert split("nosep", ",") == ["nosep"]


@pytest.mark.parametrize("sep", ["", ",,"])
def test_split_rejects_bad_separator(sep):
    with pytest.raises(ValueError):
        split("a,b", sep)


def test_trim_removes_both_ends():
    assert trim("xxhixx", "x") == "hi"


@pytest.mark.parametrize(
    "text,charset",
    [("  NO ./tex.xpm \n", " \n"), ("abcba", "ab"), ("keep", "xyz"), ("", " ")],
)
def test_trim_invariants(text, charset):
    result = trim(text, charset)
    assert result in text
    if result:
        assert result[0] not in charset
        assert result[-1] not in charset
    assert trim(result, charset) == result


def test_trim_with_empty_charset_keeps_text():
    assert trim("  spaced  ", "") == "  spaced  "


def test_trim_everything_in_charset_gives_empty():
    assert len(trim("aaaa", "a")) == 0


def test_substring_start_past_end_is_empty():
    assert substring("hello", 10, 3) == ""


@pytest.mark.parametrize("k", [0, 1, 3, 5])
def test_substring_round_trip(k):
    text = "hello"
    assert join(substring(text, 0, k), substring(text, k, len(text))) == text


@pytest.mark.parametrize("start,length", [(0, 2), (2, 10), (4, 1), (1, 0)])
def test_substring_bounds(start, length):
    text = "hello"
    result = substring(text, start, length)
    assert len(result) <= length
    assert text[start:].startswith(result)


@pytest.mark.parametrize("start,length", [(-1, 2), (0, -1)])
def test_substring_rejects_negative(start, length):
    with pytest.raises(ValueError):
        substring("hello", start, length)


@pytest.mark.parametrize("prefix,suffix", [("ab", "cd"), ("", "x"), ("y", ""), ("", "")])
def test_join_invariants(prefix, suffix):
    result = join(prefix, suffix)
    assert len(result) == len(prefix) + len(suffix)
    assert result.startswith(prefix)
    assert result.endswith(suffix)


def test_map_indexed_passes_indices():
    assert map_indexed("abc", lambda i, c: str(i)) == "012"


def test_map_indexed_identity_and_visits():
    seen = []

    def record(i, c):
        seen.append((i, c))
        return c

    assert map_indexed("map", record) == "map"
    assert seen == list(enumerate("map"))


def test_map_indexed_rejects_multi_char_result():
    with pytest.raises(ValueError):
        map_indexed("ab", lambda i, c: c * 2)


def test_iter_indexed_none_keeps_text():
    assert iter_indexed("walls", lambda i, c: None) == "walls"


def test_iter_indexed_replaces_selected():
    result = iter_indexed("1 0 1", lambda i, c: "0" if c == " " else None)
    assert " " not in result
    assert len(result) == len("1 0 1")
    assert result.replace("0", "") == "1 0 1".replace(" ", "").replace("0", "")


def test_iter_indexed_rejects_bad_replacement():
    with pytest.raises(ValueError):
        iter_indexed("ab", lambda i, c: "")