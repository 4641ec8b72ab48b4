import pytest

from libft.convert import INT_MAX, INT_MIN, atoi, itoa


def test_atoi_plain_number():
    assert atoi("42") == 42


def test_atoi_skips_all_whitespace_kinds():
    assert atoi(" \f\n\r\t\v123") == 123


def test_atoi_signs():
    assert atoi("-17") == -17
    assert atoi("+17") == 17


def test_atoi_only_one_sign_allowed():
    assert atoi("--5") == 0
    assert atoi("+-5") == 0


def test_atoi_stops_at_first_non_digit():
    assert atoi("  -42abc99") == -42
    assert atoi("7 8") == 7


def test_atoi_no_digits_gives_zero():
    assert atoi("") == 0
    assert atoi("abc") == 0
    assert atoi("-") == 0


def test_atoi_whitespace_after_sign_stops():
    assert atoi("- 5") == 0


def test_atoi_int_min_text():
    assert atoi("-2147483648") == INT_MIN


def test_itoa_int_min():
    assert itoa(INT_MIN) == "-2147483648"


def test_itoa_zero():
    assert itoa(0) == "0"


@pytest.mark.parametrize("n", [0, 1, -1, 9, 10, -10, 99, 100, 12345, -98765, INT_MAX, INT_MIN])
def test_round_trip(n):
    assert atoi(itoa(n)) == n


@pytest.mark.parametrize("n", [1, 9, 10, 1000, INT_MAX])
def test_itoa_length_grows_with_sign(n):
    assert len(itoa(-n)) == len(itoa(n)) + 1
    assert itoa(-n).startswith("-")


def test_itoa_out_of_range():
    with pytest.raises(OverflowError):
        itoa(INT_MAX + 1)
    with pytest.raises(OverflowError):
        itoa(INT_MIN - 1)


def test_itoa_wrong_type():
    with pytest.raises(TypeError):
        itoa("5")
    with pytest.raises(TypeError):
        itoa(2.0)