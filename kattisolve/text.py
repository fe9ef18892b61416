"""Solutions to problems that read and write short pieces of text."""

from __future__ import annotations

from collections.abc import Iterable

_HELLO_WORLD = "Hello World!"
_HIPP_HIPP = "Hipp hipp hurra!"
_HIPP_HIPP_TIMES = 20
_TIL_HAMINGJU = "TIL HAMINGJU MED AFMAELID FORRITUNARKEPPNI FRAMHALDSSKOLANNA!"
_VELKOMIN = "VELKOMIN!"


def autori(text: str) -> str:
    """Return the capital letters A to Z of ``text``, in order."""
    return "".join(char for char in text if "A" <= char <= "Z")


def bergmal(line: str) -> str:
    """Echo the first line of the input back."""
    return line.split("\n", 1)[0]


def echo(word: str) -> str:
    """Repeat ``word`` three times, each copy followed by a space."""
    return f"{word} " * 3


def hello_world() -> str:
    """Return the classic greeting."""
    return _HELLO_WORLD


def hiphiphurra(name: str, times: int) -> list[str]:
    """Return ``times`` cheers for ``name``."""
    return [f"Hipp hipp hurra, {name}!"] * max(times, 0)


def hipp_hipp() -> list[str]:
    """Return twenty cheers."""
    return [_HIPP_HIPP] * _HIPP_HIPP_TIMES


def kvedja(name: str) -> str:
    """Sign off a letter with ``name``."""
    return f"Kvedja,\n{name}"


def leynibjonusta(text: str) -> str:
    """Return ``text`` with all whitespace removed."""
    return "".join(text.split())


def lubbi_laerir(word: str) -> str:
    """Return the first letter of ``word``."""
    if not word:
        raise ValueError("empty word")
    return word[0]


def ovissa(word: str) -> int:
    """Return the length of ``word``."""
    return len(word)


def reduplication(word: str, times: int) -> str:
    """Return ``word`` repeated ``times`` times."""
    return word * times


def takk_fyrir_mig(names: Iterable[str]) -> list[str]:
    """Return a thank-you line for every name."""
    return [f"Takk {name}" for name in names]


def telja(n: int) -> list[int]:
    """Count from one up to ``n``."""
    return list(range(1, n + 1))


def til_hamingju() -> str:
    """Return the birthday greeting for the contest."""
    return _TIL_HAMINGJU


def velkomin() -> str:
    """Return the welcome message."""
    return _VELKOMIN


def viosnuningur(word: str) -> str:
    """Return ``word`` reversed."""
    return word[::-1]