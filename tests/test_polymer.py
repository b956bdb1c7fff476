from collections import Counter

import pytest

from reefdive.polymer import element_counts, expand, parse_input, spread

RULES_TEXT = [
    "NNCB",
    "",
    "CH -> B",
    "HH -> N",
    "CB -> H",
    "NH -> C",
    "HB -> C",
    "HC -> B",
    "HN -> C",
    "NN -> C",
    "BH -> H",
    "NC -> B",
    "NB -> B",
    "BN -> B",
    "BB -> N",
    "BC -> B",
    "CC -> N",
    "CN -> C",
]


def test_parse_input():
    template, rules = parse_input(["NNCB", "", "CH -> B", "NN -> C"])
    assert template == "NNCB"
    assert rules == {"CH": "B", "NN": "C"}


def test_parse_input_empty_raises():
    with pytest.raises(ValueError):
        parse_input([])


def test_expand_inserts_between_pair():
    assert expand("NN", {"NN": "C"}) == "NCN"


def test_expand_without_rules_keeps_polymer():
    assert expand("ABCD", {}) == "ABCD"


def test_expand_grows_when_every_pair_matches():
    template, rules = parse_input(RULES_TEXT)
    polymer = template
    for _ in range(4):
        grown = expand(polymer, rules)
        assert len(grown) == 2 * len(polymer) - 1
        assert grown[::2] == polymer
        polymer = grown


def test_expand_empty_raises():
    with pytest.raises(ValueError):
        expand("", {})


@pytest.mark.parametrize("steps", [0, 1, 3, 6])
def test_pair_counting_matches_full_expansion(steps):
    template, rules = parse_input(RULES_TEXT)
    polymer = template
    for _ in range(steps):
        polymer = expand(polymer, rules)
    assert element_counts(template, rules, steps) == Counter(polymer)


def test_element_counts_total_length():
    template, rules = parse_input(RULES_TEXT)
    total = sum(element_counts(template, rules, 10).values())
    assert total == (len(template) - 1) * 2**10 + 1


def test_element_counts_empty_raises():
    with pytest.raises(ValueError):
        element_counts("", {}, 3)


def test_spread():
    assert spread({"A": 3, "B": 1}) == 2
    assert spread(Counter("AAAA")) == 0


def test_spread_empty_raises():
    with pytest.raises(ValueError):
        spread({})