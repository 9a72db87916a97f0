import pytest

from fmtprint.chars import to_upper
from fmtprint.strutil import (
    chr_pos,
    split,
    strchr,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strndup,
    strnstr,
    strrchr,
    strtrim,
    substr,
)

CONVERSIONS = "csdiuxXp%"


@pytest.mark.parametrize("char", list(CONVERSIONS))
def test_chr_pos_finds_each_conversion(char):
    assert CONVERSIONS[chr_pos(char, CONVERSIONS)] == char


def test_chr_pos_first_occurrence():
    text = "banana"
    pos = chr_pos("a", text)
    assert text[pos] == "a"
    assert "a" not in text[:pos]


def test_chr_pos_missing():
    assert chr_pos("z", CONVERSIONS) == -1


def test_chr_pos_rejects_multi_char():
    with pytest.raises(ValueError):
        chr_pos("ab", CONVERSIONS)


def test_strndup_longer_limit_copies_all():
    assert strndup("hello", 10) == "hello"


def test_strndup_cuts_at_limit():
    result = strndup("hello", 3)
    assert len(result) == 3
    assert "hello".startswith(result)


def test_strndup_negative_limit_is_empty():
    assert strndup("hello", -1) == ""


def test_strchr_first_match():
    text = "hello world"
    index = strchr(text, "o")
    assert text[index] == "o"
    assert "o" not in text[:index]


def test_strchr_nul_finds_end():
    assert strchr("abc", "\0") == len("abc")


def test_strchr_missing():
    assert strchr("abc", "z") is None


def test_strrchr_last_match():
    text = "hello world"
    index = strrchr(text, "o")
    assert text[index] == "o"
    assert "o" not in text[index + 1 :]


def test_strrchr_nul_and_missing():
    assert strrchr("abc", "\0") == len("abc")
    assert strrchr("abc", "z") is None


def test_strncmp_equal():
    assert strncmp("abc", "abc", 10) == 0


def test_strncmp_stops_at_limit():
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "abd", 0) == 0


def test_strncmp_sign():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0


def test_strncmp_antisymmetric():
    assert strncmp("apple", "apricot", 5) == -strncmp("apricot", "apple", 5)


def test_strncmp_prefix_counts_end_as_zero():
    assert strncmp("ab", "abc", 3) == -ord("c")
    assert strncmp("abc", "ab", 3) == ord("c")


def test_strlcpy_fits():
    assert strlcpy("hello", 10) == ("hello", len("hello"))


def test_strlcpy_truncates():
    copied, length = strlcpy("hello", 3)
    assert len(copied) == 2
    assert "hello".startswith(copied)
    assert length == len("hello")


def test_strlcpy_zero_size():
    assert strlcpy("hello", 0) == ("", len("hello"))


def test_strlcat_appends():
    assert strlcat("ab", "cd", 10) == ("abcd", 4)


def test_strlcat_truncates_within_size():
    result, total = strlcat("ab", "cdef", 4)
    assert len(result) == 3
    assert ("ab" + "cdef").startswith(result)
    assert total == len("ab") + len("cdef")


def test_strlcat_full_destination():
    assert strlcat("abc", "xy", 2) == ("abc", 2 + len("xy"))


def test_strlcat_zero_size():
    assert strlcat("abc", "xy", 0) == ("abc", len("xy"))


def test_strnstr_found():
    haystack = "lorem ipsum dolor"
    index = strnstr(haystack, "ipsum", len(haystack))
    assert haystack[index:].startswith("ipsum")


def test_strnstr_needle_past_limit():
    haystack = "lorem ipsum dolor"
    assert strnstr(haystack, "ipsum", haystack.index("ipsum") + 2) is None


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 0) == 0


def test_strnstr_missing():
    assert strnstr("abc", "zz", 3) is None


def test_strjoin():
    joined = strjoin("foo", "bar")
    assert joined.startswith("foo")
    assert joined.endswith("bar")
    assert len(joined) == len("foo") + len("bar")


def test_strjoin_none_rejected():
    with pytest.raises(TypeError):
        strjoin(None, "bar")


def test_strmapi_upper():
    assert strmapi("abc", lambda i, c: to_upper(c)) == "ABC"


def test_strmapi_passes_indices_in_order():
    seen = []

    def record(index, char):
        seen.append(index)
        return char

    assert strmapi("hello", record) == "hello"
    assert seen == list(range(len("hello")))


def test_split_drops_empty_pieces():
    assert split("  hello  world ", " ") == ["hello", "world"]


def test_split_only_separators():
    assert split(",,,", ",") == []
    assert split("", ",") == []


def test_split_rejects_bad_separator():
    with pytest.raises(ValueError):
        split("a b", "")


def test_strtrim_both_ends():
    assert strtrim("xxhixx", "x") == "hi"


def test_strtrim_keeps_inner():
    assert strtrim("-a-b-", "-") == "a-b"


def test_strtrim_all_removed():
    assert strtrim("xxxx", "x") == ""


def test_strtrim_none_set_unchanged():
    assert strtrim("  text  ", None) == "  text  "


def test_substr_slice():
    assert substr("hello", 1, 3) == "hello"[1:4]


def test_substr_length_capped():
    assert substr("hello", 2, 100) == "hello"[2:]


def test_substr_start_past_end():
    assert substr("hello", 10, 3) == ""


def test_substr_negative_start():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)