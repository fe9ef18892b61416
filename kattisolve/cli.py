"""Command line front end: read a problem's input and print its answer."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Callable, Iterator

from kattisolve import arithmetic, decisions, grids, text

_SPACE = re.compile(r"\s*")
_WORD = re.compile(r"\S+")
_INTEGER = re.compile(r"[+-]?\d+")
_REAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class _Scanner:
    """Reads whitespace separated values from a block of text."""

    def __init__(self, source: str) -> None:
        self._text = source
        self._pos = 0

    def _skip(self) -> None:
        self._pos = _SPACE.match(self._text, self._pos).end()

    def _take(self, pattern: re.Pattern[str], what: str) -> str:
        self._skip()
        match = pattern.match(self._text, self._pos)
        if match is None:
            if self._pos >= len(self._text):
                raise ValueError(f"input ended while expecting {what}")
            raise ValueError(f"expected {what} at offset {self._pos}")
        self._pos = match.end()
        return match.group()

    @property
    def rest(self) -> str:
        """Everything not read yet."""
        return self._text[self._pos :]

    def at_end(self) -> bool:
        self._skip()
        return self._pos >= len(self._text)

    def word(self) -> str:
        return self._take(_WORD, "a word")

    def char(self) -> str:
        self._skip()
        if self._pos >= len(self._text):
            raise ValueError("input ended while expecting a character")
        char = self._text[self._pos]
        self._pos += 1
        return char

    def integer(self) -> int:
        return int(self._take(_INTEGER, "an integer"))

    def real(self) -> float:
        return float(self._take(_REAL, "a number"))

    def integers(self, count: int) -> list[int]:
        return [self.integer() for _ in range(max(count, 0))]

    def words(self, count: int) -> list[str]:
        return [self.word() for _ in range(max(count, 0))]

    def chars(self, count: int) -> str:
        return "".join(self.char() for _ in range(max(count, 0)))


_Handler = Callable[[_Scanner], str]
_PROBLEMS: dict[str, _Handler] = {}


def _problem(name: str) -> Callable[[_Handler], _Handler]:
    def register(handler: _Handler) -> _Handler:
        _PROBLEMS[name] = handler
        return handler

    return register


def _real(value: float) -> str:
    """Format a float with six significant digits."""
    return f"{value:.6g}"


def _lines(items: Iterator[object] | list) -> str:
    return "".join(f"{item}\n" for item in items)


@_problem("a-different-problem")
def _a_different_problem(scan: _Scanner) -> str:
    pairs = []
    while True:
        try:
            pairs.append((scan.integer(), scan.integer()))
        except ValueError:
            break
    return _lines(arithmetic.a_different_problem(pairs))


@_problem("shortcut-to-what")
def _shortcut_to_what(scan: _Scanner) -> str:
    return str(arithmetic.shortcut_to_what(scan.integer()))


@_problem("aldur")
def _aldur(scan: _Scanner) -> str:
    return str(arithmetic.aldur(scan.integers(scan.integer())))


@_problem("aliodibio")
def _aliodibio(scan: _Scanner) -> str:
    return str(arithmetic.aliodibio(*scan.integers(3)))


@_problem("autori")
def _autori(scan: _Scanner) -> str:
    return text.autori(scan.rest)


@_problem("barcelona")
def _barcelona(scan: _Scanner) -> str:
    n, k = scan.integers(2)
    return decisions.barcelona(scan.integers(n), k)


@_problem("bergmal")
def _bergmal(scan: _Scanner) -> str:
    return text.bergmal(scan.rest)


@_problem("besta-gjofin")
def _besta_gjofin(scan: _Scanner) -> str:
    count = scan.integer()
    gifts = [decisions.Gift(scan.word(), scan.integer()) for _ in range(max(count, 0))]
    return decisions.besta_gjofin(gifts)


@_problem("bladra")
def _bladra(scan: _Scanner) -> str:
    v, a, t = scan.real(), scan.real(), scan.real()
    return _real(arithmetic.bladra(v, a, t))


@_problem("blandad-best")
def _blandad_best(scan: _Scanner) -> str:
    return decisions.blandad_best(scan.words(scan.integer()))


@_problem("dagatal")
def _dagatal(scan: _Scanner) -> str:
    return str(decisions.dagatal(scan.integer()))


@_problem("draga-fra")
def _draga_fra(scan: _Scanner) -> str:
    return str(arithmetic.draga_fra(*scan.integers(2)))


@_problem("echo")
def _echo(scan: _Scanner) -> str:
    return text.echo(scan.word())


@_problem("flatbokuveisla")
def _flatbokuveisla(scan: _Scanner) -> str:
    return str(arithmetic.flatbokuveisla(*scan.integers(2)))


@_problem("framtidar-fifa")
def _framtidar_fifa(scan: _Scanner) -> str:
    return str(arithmetic.framtidar_fifa(*scan.integers(2)))


@_problem("hakkari")
def _hakkari(scan: _Scanner) -> str:
    n, m = scan.integers(2)
    rows = [scan.chars(m) for _ in range(max(n, 0))]
    positions = grids.hakkari(rows)
    return f"{len(positions)}\n" + _lines(f"{row} {column}" for row, column in positions)


@_problem("hello-world")
def _hello_world(scan: _Scanner) -> str:
    return text.hello_world()


@_problem("heysata")
def _heysata(scan: _Scanner) -> str:
    scan.integer()
    needle = scan.char()
    return decisions.heysata(needle, scan.word())


@_problem("hiphiphurra")
def _hiphiphurra(scan: _Scanner) -> str:
    name = scan.word()
    return _lines(text.hiphiphurra(name, scan.integer()))


@_problem("hipp-hipp")
def _hipp_hipp(scan: _Scanner) -> str:
    return _lines(text.hipp_hipp())


@_problem("hradgreining")
def _hradgreining(scan: _Scanner) -> str:
    return decisions.hradgreining(scan.word())


@_problem("jack-o-lantern")
def _jack_o_lantern(scan: _Scanner) -> str:
    return str(arithmetic.jack_o_lantern(*scan.integers(3)))


@_problem("kiki-boba")
def _kiki_boba(scan: _Scanner) -> str:
    return decisions.kiki_boba(scan.word())


@_problem("kvedja")
def _kvedja(scan: _Scanner) -> str:
    return text.kvedja(scan.word())


@_problem("leggja-saman")
def _leggja_saman(scan: _Scanner) -> str:
    return str(arithmetic.leggja_saman(*scan.integers(2)))


@_problem("leynibjonusta")
def _leynibjonusta(scan: _Scanner) -> str:
    return text.leynibjonusta(scan.rest)


@_problem("lubbi-laerir")
def _lubbi_laerir(scan: _Scanner) -> str:
    return text.lubbi_laerir(scan.word())


@_problem("metronome")
def _metronome(scan: _Scanner) -> str:
    return _real(arithmetic.metronome(scan.integer()))


@_problem("millifaersla")
def _millifaersla(scan: _Scanner) -> str:
    return decisions.millifaersla(*scan.integers(3))


@_problem("n-sum")
def _n_sum(scan: _Scanner) -> str:
    return str(arithmetic.n_sum(scan.integers(scan.integer())))


@_problem("ovissa")
def _ovissa(scan: _Scanner) -> str:
    return str(text.ovissa(scan.word()))


@_problem("quadrant")
def _quadrant(scan: _Scanner) -> str:
    return str(decisions.quadrant(*scan.integers(2)))


@_problem("reduplication")
def _reduplication(scan: _Scanner) -> str:
    word = scan.word()
    return text.reduplication(word, scan.integer())


@_problem("skak")
def _skak(scan: _Scanner) -> str:
    return str(decisions.skak(*scan.integers(4)))


@_problem("sort-two")
def _sort_two(scan: _Scanner) -> str:
    low, high = decisions.sort_two(*scan.integers(2))
    return f"{low} {high}"


@_problem("storafmaeli")
def _storafmaeli(scan: _Scanner) -> str:
    return decisions.storafmaeli(scan.integer())


@_problem("take-two-stones")
def _take_two_stones(scan: _Scanner) -> str:
    return decisions.take_two_stones(scan.integer())


@_problem("takk-fyrir-mig")
def _takk_fyrir_mig(scan: _Scanner) -> str:
    return _lines(text.takk_fyrir_mig(scan.words(scan.integer())))


@_problem("takkar")
def _takkar(scan: _Scanner) -> str:
    return decisions.takkar(*scan.integers(2))


@_problem("telja")
def _telja(scan: _Scanner) -> str:
    return _lines(text.telja(scan.integer()))


@_problem("til-hamingju")
def _til_hamingju(scan: _Scanner) -> str:
    return text.til_hamingju()


@_problem("tolvunarfraedingar")
def _tolvunarfraedingar(scan: _Scanner) -> str:
    return str(arithmetic.tolvunarfraedingar(scan.integer()))


@_problem("two-sum")
def _two_sum(scan: _Scanner) -> str:
    return str(arithmetic.two_sum(*scan.integers(2)))


@_problem("umferd")
def _umferd(scan: _Scanner) -> str:
    columns, rows = scan.integers(2)
    grid = [scan.chars(columns) for _ in range(max(rows, 0))]
    return _real(grids.umferd(grid))


@_problem("velkomin")
def _velkomin(scan: _Scanner) -> str:
    return text.velkomin()


@_problem("viosnuningur")
def _viosnuningur(scan: _Scanner) -> str:
    return text.viosnuningur(scan.word())


@_problem("which-is-greater")
def _which_is_greater(scan: _Scanner) -> str:
    return str(decisions.which_is_greater(*scan.integers(2)))


def problems() -> list[str]:
    """Return the names of all problems, sorted."""
    return sorted(_PROBLEMS)


def solve(problem: str, text: str) -> str:
    """Solve ``problem`` for the given input text and return the output."""
    try:
        handler = _PROBLEMS[problem]
    except KeyError:
        raise ValueError(f"unknown problem: {problem}") from None
    return handler(_Scanner(text))


def main(argv: list[str] | None = None) -> int:
    """Read a problem's input from standard input and print the answer."""
    parser = argparse.ArgumentParser(
        prog="kattisolve", description="Solve a problem from standard input."
    )
    parser.add_argument("problem", nargs="?", choices=problems(), help="problem name")
    parser.add_argument("--list", action="store_true", help="list known problems")
    args = parser.parse_args(argv)

    if args.list:
        sys.stdout.write(_lines(problems()))
        return 0
    if args.problem is None:
        parser.error("a problem name is required")

    try:
        output = solve(args.problem, sys.stdin.read())
    except (ValueError, ZeroDivisionError) as error:
        print(f"kattisolve: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())