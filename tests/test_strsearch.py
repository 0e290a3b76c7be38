import pytest

from minishell.strsearch import atoi, strchr, strncmp, strnstr, strrchr, strstr


def _sign(x):
    return (x > 0) - (x < 0)


@pytest.mark.parametrize("n", [0, 7, -7, 123456, -2147483647, 2147483647])
def test_atoi_round_trip(n):
    assert atoi(str(n)) == n


def test_atoi_skips_whitespace_and_stops_at_garbage():
    assert atoi(" \t\n\v\f\r-42abc") == -42
    assert atoi("+17 18") == 17


def test_atoi_single_sign_only():
    assert atoi("--5") == 0
    assert atoi("+-5") == atoi("")


def test_atoi_wraps_like_int32():
    assert atoi("2147483648") == -2147483648


def test_atoi_stops_at_nul():
    assert atoi("12\x0034") == 12


@pytest.mark.parametrize(
    "s1,s2,n",
    [
        ("abc", "abd", 3),
        ("abc", "abd", 2),
        ("abc", "ab", 3),
        ("", "yoyoyoyo", 6),
        ("same", "same", 10),
        ("zeta", "alpha", 1),
    ],
)
def test_strncmp_sign_matches_prefix_order(s1, s2, n):
    a, b = s1[:n], s2[:n]
    expected = (a > b) - (a < b)
    assert _sign(strncmp(s1, s2, n)) == expected


def test_strncmp_returns_code_point_difference():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")
    assert strncmp("ab", "abc", 5) == -ord("c")


def test_strncmp_zero_length_is_equal():
    assert strncmp("x", "y", 0) == 0


def test_strncmp_rejects_negative_n():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


@pytest.mark.parametrize("s,c", [("teste", "e"), ("pepe y cparlos", "c"), ("hello", "l")])
def test_strchr_and_strrchr_find_ends(s, c):
    assert strchr(s, c) == s.index(c)
    assert strrchr(s, c) == s.rindex(c)


def test_strchr_accepts_byte_value():
    assert strchr("hello", ord("o")) == "hello".index("o")


def test_strchr_missing_returns_none():
    assert strchr("pepe y cparlos", "d") is None
    assert strrchr("pepe y cparlos", "d") is None


def test_search_for_nul_finds_end():
    assert strchr("teste", "\0") == len("teste")
    assert strrchr("teste", 0) == len("teste")


def test_strchr_rejects_multi_character_target():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strnstr_within_limit():
    big, little = "lorem ipsum dolor", "ipsum"
    assert strnstr(big, little, len(big)) == big.find(little)
    end = big.find(little) + len(little)
    assert strnstr(big, little, end) == big.find(little)
    assert strnstr(big, little, end - 1) is None


def test_strnstr_empty_needle_matches_at_start():
    assert strnstr("anything", "", 0) == 0


def test_strnstr_rejects_negative_n():
    with pytest.raises(ValueError):
        strnstr("a", "a", -1)


def test_strstr_recognises_only_prefix():
    assert strstr("foobar", "foo") == 0
    assert strstr("foobar", "") == 0
    assert strstr("foobar", "bar") is None
    assert strstr("fo", "foo") is None