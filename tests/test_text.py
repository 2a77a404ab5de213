import pytest

from ftkit.text import atoi, itoa, join, map_indexed, split, substr, trim


@pytest.mark.parametrize("n", [0, 1, -1, 7, 42, -42, 2147483647, -2147483648, 1000000])
def test_atoi_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_zero():
    assert itoa(0) == "0"


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("12")


def test_atoi_skips_whitespace_and_plus():
    assert atoi(" \t\n\v\f\r+123abc") == 123


def test_atoi_negative_with_trailing_text():
    assert atoi("   -2147483648xyz") == -2147483648


@pytest.mark.parametrize("text", ["", "abc", "   ", "+", "-", "--5", "+-5", "- 5"])
def test_atoi_without_digits_is_zero(text):
    assert atoi(text) == 0


def test_atoi_stops_at_non_ascii_digit():
    assert atoi("12\u0663") == 12


def test_atoi_rejects_non_str():
    with pytest.raises(TypeError):
        atoi(None)


def test_split_drops_empty_words():
    assert split("  hello  world ", " ") == ["hello", "world"]


def test_split_only_separators():
    assert split(",,,,", ",") == []


def test_split_empty_string():
    assert split("", ",") == []


def test_split_no_separator_present():
    assert split("single", ",") == ["single"]


@pytest.mark.parametrize("text", ["a,b,,c", ",x,y,", "one"])
def test_split_words_have_no_separator(text):
    words = split(text, ",")
    assert all(word and "," not in word for word in words)
    assert "".join(words) == text.replace(",", "")


@pytest.mark.parametrize("sep", ["", "ab"])
def test_split_rejects_bad_separator(sep):
    with pytest.raises(ValueError):
        split("a b", sep)


def test_trim_both_ends():
    assert trim("xxhelloxyx", "xy") == "hello"


def test_trim_everything():
    assert trim("aaaa", "a") == ""


def test_trim_empty_charset_keeps_string():
    assert trim("  keep  ", "") == "  keep  "


def test_trim_keeps_inner_characters():
    assert trim("--a-b--", "-") == "a-b"


def test_substr_middle():
    assert substr("hello world", 6, 5) == "world"


def test_substr_length_past_end():
    assert substr("hello", 2, 100) == "llo"


def test_substr_start_past_end():
    assert substr("hello", 10, 3) == ""


def test_substr_zero_length():
    assert substr("hello", 1, 0) == ""


@pytest.mark.parametrize("start,length", [(-1, 2), (0, -1)])
def test_substr_rejects_negative(start, length):
    with pytest.raises(ValueError):
        substr("hello", start, length)


def test_join_concatenates():
    assert join("foo", "bar") == "foobar"


def test_join_with_empty():
    assert join("", "bar") == "bar"
    assert join("foo", "") == "foo"


def test_join_length_invariant():
    first, second = "abc", "defgh"
    assert len(join(first, second)) == len(first) + len(second)


def test_join_rejects_none():
    with pytest.raises(TypeError):
        join(None, "x")


def test_map_indexed_passes_indices():
    seen = []

    def record(index, ch):
        seen.append((index, ch))
        return ch

    assert map_indexed("abc", record) == "abc"
    assert seen == [(0, "a"), (1, "b"), (2, "c")]


def test_map_indexed_upper_on_even_positions():
    result = map_indexed("abcd", lambda i, c: c.upper() if i % 2 == 0 else c)
    assert result == "AbCd"


def test_map_indexed_empty():
    assert map_indexed("", lambda i, c: "z") == ""


def test_map_indexed_rejects_multi_char_result():
    with pytest.raises(ValueError):
        map_indexed("ab", lambda i, c: c * 2)