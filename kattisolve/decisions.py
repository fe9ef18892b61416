"""Solutions to problems that choose between fixed answers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

_DAYS_IN_MONTH = {
    1: 31,
    2: 28,
    3: 31,
    4: 30,
    5: 31,
    6: 30,
    7: 31,
    8: 31,
    9: 30,
    10: 31,
    11: 30,
    12: 31,
}


@dataclass(frozen=True)
class Gift:
    """A gift giver and how good the gift is."""

    name: str
    num: int


def barcelona(bags: Sequence[int], k: int) -> str:
    """Describe where bag ``k`` comes out on the conveyor belt."""
    if not bags:
        raise ValueError("no bags given")
    position = next((i for i, bag in enumerate(bags) if bag == k), len(bags))
    if position == 0:
        return "fyrst"
    if position == 1:
        return "naestfyrst"
    return f"{position + 1} fyrst"


def besta_gjofin(gifts: Iterable[Gift]) -> str:
    """Return the name behind the best gift; ties go to the last listed."""
    ordered = list(gifts)
    if not ordered:
        raise ValueError("no gifts given")
    return max(reversed(ordered), key=lambda gift: gift.num).name


def blandad_best(items: Sequence[str]) -> str:
    """Return the only item, or ``blandad best`` when there are several."""
    if len(items) == 1:
        return items[0]
    return "blandad best"


def dagatal(month: int) -> int:
    """Return the days in ``month`` of a common year, or -1 if no such month."""
    return _DAYS_IN_MONTH.get(month, -1)


def heysata(needle: str, haystack: str) -> str:
    """Report whether the needle is in the haystack."""
    if needle in haystack:
        return "Unnar fann hana!"
    return "Unnar fann hana ekki!"


def hradgreining(sample: str) -> str:
    """Report a sample as sick when it contains ``COV``."""
    if "COV" in sample:
        return "Veikur!"
    return "Ekki veikur!"


def kiki_boba(word: str) -> str:
    """Classify a word by its counts of ``b`` and ``k``."""
    b = word.count("b")
    k = word.count("k")
    if b > k:
        return "boba"
    if k > b:
        return "kiki"
    if b == 0:
        return "none"
    return "boki"


def millifaersla(monnei: int, fjee: int, dolla: int) -> str:
    """Name the cheapest bank; earlier banks win ties."""
    cheapest = min(monnei, fjee, dolla)
    if cheapest == monnei:
        return "Monnei"
    if cheapest == fjee:
        return "Fjee"
    return "Dolladollabilljoll"


def quadrant(x: int, y: int) -> int:
    """Return the quadrant of the point ``(x, y)``."""
    if x > 0:
        return 1 if y > 0 else 4
    return 2 if y > 0 else 3


def skak(x1: int, y1: int, x2: int, y2: int) -> int:
    """Return the rook moves needed between two squares."""
    same_line = x1 == x2 or y1 == y2
    if same_line:
        return 1
    return 2


def sort_two(a: int, b: int) -> tuple[int, int]:
    """Return the two numbers in ascending order."""
    return (b, a) if a > b else (a, b)


def storafmaeli(n: int) -> str:
    """Say whether ``n`` is a round anniversary."""
    remainder = n % 10
    if remainder == 0:
        return "Jebb"
    return "Neibb"


def take_two_stones(n: int) -> str:
    """Name the winner of the stone game with ``n`` stones."""
    remainder = n % 2
    if remainder == 0:
        return "Bob"
    return "Alice"


def takkar(a: int, b: int) -> str:
    """Compare two button counts."""
    if a < b:
        return "FAKE NEWS!"
    if a > b:
        return "MAGA!"
    return "WORLD WAR 3!"


def which_is_greater(a: int, b: int) -> int:
    """Return 1 when ``a`` is greater than ``b``, otherwise 0."""
    greater = a > b
    if greater:
        return 1
    return 0