"""Solutions to small arithmetic problems."""

from __future__ import annotations

from collections.abc import Iterable

_DEFAULT_MIN_AGE = 200_000
_FIFA_BASE_YEAR = 2022


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _trunc_mod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def a_different_problem(pairs: Iterable[tuple[int, int]]) -> list[int]:
    """Return the absolute difference of every pair."""
    return [abs(a - b) for a, b in pairs]


def shortcut_to_what(n: int) -> int:
    """Add five, triple, then subtract ten."""
    return (n + 5) * 3 - 10


def aldur(ages: Iterable[int]) -> int:
    """Return the smallest age, never more than 200000."""
    return min((_DEFAULT_MIN_AGE, *ages))


def aliodibio(a: int, b: int, t: int) -> int:
    """Return what is left of the total after the two known parts."""
    return t - (a + b)


def bladra(v: float, a: float, t: float) -> float:
    """Distance travelled from speed ``v`` with acceleration ``a`` over ``t``."""
    return v * t + 0.5 * a * t**2


def draga_fra(n: int, m: int) -> int:
    """Return ``n`` minus ``m``."""
    return n - m


def flatbokuveisla(r: int, p: int) -> int:
    """Return the pieces left over when ``r`` are shared among ``p``."""
    return _trunc_mod(r, p)


def framtidar_fifa(i: int, y: int) -> int:
    """Return the year after ``i`` releases, one every ``y`` years from 2022."""
    return _FIFA_BASE_YEAR + _trunc_div(i, y)


def jack_o_lantern(a: int, b: int, c: int) -> int:
    """Return the number of distinct lantern designs."""
    return a * b * c


def leggja_saman(a: int, b: int) -> int:
    """Return the sum of two numbers."""
    return a + b


def metronome(n: int) -> float:
    """Return the metronome speed for a song of ``n`` ticks."""
    return n / 4.0


def n_sum(values: Iterable[int]) -> int:
    """Return the sum of the values."""
    return sum(values)


def tolvunarfraedingar(n: int) -> int:
    """Return one less than ``n``."""
    return n - 1


def two_sum(a: int, b: int) -> int:
    """Return the sum of two numbers."""
    return a + b