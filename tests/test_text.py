import pytest

from kattisolve import text


def test_autori_keeps_only_capitals():
    assert text.autori("Knuth-Morris-Pratt") == "KMP"


def test_autori_result_is_subsequence_of_capitals():
    source = "aBc De\nFgH ÉI"
    result = text.autori(source)
    assert all("A" <= c <= "Z" for c in result)
    assert result == "".join(c for c in source if c.isascii() and c.isupper())


def test_autori_no_capitals():
    assert text.autori("lower case only") == ""


def test_bergmal_returns_first_line():
    assert text.bergmal("hello there\nsecond line") == "hello there"


def test_bergmal_single_line_unchanged():
    line = "  spaces kept  "
    assert text.bergmal(line) == line


def test_echo_repeats_three_times():
    result = text.echo("Hello!")
    assert result.split() == ["Hello!"] * 3
    assert result.endswith(" ")
    assert len(result) == 3 * (len("Hello!") + 1)


def test_hello_world():
    assert text.hello_world() == "Hello World!"


def test_hiphiphurra_lines():
    lines = text.hiphiphurra("Jon", 3)
    assert lines == ["Hipp hipp hurra, Jon!"] * 3


def test_hiphiphurra_zero_times():
    assert text.hiphiphurra("Jon", 0) == []


def test_hipp_hipp_twenty_lines():
    lines = text.hipp_hipp()
    assert len(lines) == 20
    assert set(lines) == {"Hipp hipp hurra!"}


def test_kvedja():
    assert text.kvedja("Anna") == "Kvedja,\nAnna"


def test_leynibjonusta_strips_whitespace():
    result = text.leynibjonusta("a b\tc\nd  e")
    assert result == "abcde"


def test_leynibjonusta_preserves_non_space_characters():
    source = "x y z 1 2 3 !"
    result = text.leynibjonusta(source)
    assert sorted(result) == sorted(c for c in source if not c.isspace())


def test_lubbi_laerir_first_letter():
    assert text.lubbi_laerir("lubbi") == "l"


def test_lubbi_laerir_empty_raises():
    with pytest.raises(ValueError):
        text.lubbi_laerir("")


@pytest.mark.parametrize("word", ["", "a", "ovissa", "x" * 50])
def test_ovissa_is_length(word):
    assert text.ovissa(word) == len(word)


def test_reduplication():
    result = text.reduplication("ab", 4)
    assert len(result) == 8
    assert result.replace("ab", "") == ""


def test_reduplication_zero():
    assert text.reduplication("word", 0) == ""


def test_takk_fyrir_mig():
    names = ["Anna", "Bjorn"]
    assert text.takk_fyrir_mig(names) == ["Takk Anna", "Takk Bjorn"]


def test_takk_fyrir_mig_accepts_generator():
    assert text.takk_fyrir_mig(n for n in ["X"]) == ["Takk X"]


def test_telja_counts_up():
    result = text.telja(5)
    assert result == [1, 2, 3, 4, 5]


def test_telja_zero_is_empty():
    assert text.telja(0) == []


def test_til_hamingju():
    assert (
        text.til_hamingju()
        == "TIL HAMINGJU MED AFMAELID FORRITUNARKEPPNI FRAMHALDSSKOLANNA!"
    )


def test_velkomin():
    assert text.velkomin() == "VELKOMIN!"


@pytest.mark.parametrize("word", ["", "a", "abc", "racecar", "hallo"])
def test_viosnuningur_round_trip(word):
    reversed_word = text.viosnuningur(word)
    assert text.viosnuningur(reversed_word) == word
    assert len(reversed_word) == len(word)
    if word:
        assert reversed_word[0] == word[-1]