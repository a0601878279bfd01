import pytest

from wodlib.arith import (
    gcd,
    gcd_signed,
    lcm,
    lcm_signed,
    modinverse,
    truncated_divmod,
)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (5, 3, (1, 2)),
        (5, -3, (-1, 2)),
        (-5, 3, (-1, -2)),
        (-5, -3, (1, -2)),
    ],
)
def test_truncated_divmod(a, b, expected):
    assert truncated_divmod(a, b) == expected


def test_truncated_divmod_by_zero():
    with pytest.raises(ZeroDivisionError):
        truncated_divmod(1, 0)


@pytest.mark.parametrize(
    "a, b, c",
    [(0, 0, 0), (0, 4, 4), (4, 0, 4), (2, 4, 2), (2, 3, 1), (6, 4, 2)],
)
def test_gcd(a, b, c):
    assert gcd(a, b) == c


@pytest.mark.parametrize(
    "a, b, c",
    [(0, 0, 0), (0, 4, 0), (4, 0, 0), (2, 4, 4), (2, 3, 6), (6, 4, 12)],
)
def test_lcm(a, b, c):
    assert lcm(a, b) == c


def test_gcd_rejects_negative():
    with pytest.raises(ValueError):
        gcd(-6, 4)


def test_lcm_rejects_negative():
    with pytest.raises(ValueError):
        lcm(6, -4)


@pytest.mark.parametrize(
    "a, b, c",
    [
        (0, 0, 0),
        (0, 4, 4),
        (4, 0, 4),
        (2, 4, 2),
        (2, 3, 1),
        (6, 4, 2),
        (-6, 4, 2),
        (6, -4, 2),
        (-6, -4, 2),
    ],
)
def test_gcd_signed(a, b, c):
    assert gcd_signed(a, b) == c


@pytest.mark.parametrize(
    "a, b, c",
    [
        (0, 0, 0),
        (0, 4, 0),
        (4, 0, 0),
        (2, 4, 4),
        (2, 3, 6),
        (6, 4, 12),
        (-6, 4, 12),
        (6, -4, 12),
        (-6, -4, 12),
    ],
)
def test_lcm_signed(a, b, c):
    assert lcm_signed(a, b) == c


@pytest.mark.parametrize(
    "a, n, inv",
    [
        (3, 5, 2),
        (-2, 5, 2),
        (3, -5, 2),
        (-2, -5, 2),
        (8, 5, 2),
        (1, 5, 1),
        (2, 6, None),
        (0, 3, None),
        (5, 1, None),
        (5, 0, None),
    ],
)
def test_modinverse(a, n, inv):
    assert modinverse(a, n) == inv


@pytest.mark.parametrize("a", range(1, 17))
def test_modinverse_is_inverse_mod_prime(a):
    x = modinverse(a, 17)
    assert 0 < x < 17
    assert (a * x) % 17 == 1