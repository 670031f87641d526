"""Tests for the deterministic target selector."""

import datetime

import pytest

from scordle.config.game_settings import (
    ConfigurationError, DICTIONARY, MAX_GAME_NUMBER, TARGET_LIST, validate_word_list_integrity
)
from scordle.services.target_selector import (
    SeededRandom, TargetSelector, describe_seed, game_target, parse_game_number, today_seed
)


class TestSeededRandom:
    """Generator reset semantics."""

    def test_same_seed_same_sequence(self):
        first = SeededRandom("hello")
        second = SeededRandom("hello")
        assert [first.next() for _ in range(20)] == [second.next() for _ in range(20)]

    def test_reset_restarts_sequence(self):
        rng = SeededRandom("hello")
        before = [rng.next() for _ in range(5)]
        rng.next()
        rng.reset("hello")
        assert [rng.next() for _ in range(5)] == before

    def test_different_seeds_differ(self):
        assert [SeededRandom("a").next() for _ in range(3)] != [SeededRandom("b").next() for _ in range(3)]

    def test_values_in_unit_interval(self):
        rng = SeededRandom()
        assert rng.seed is None
        assert all(0 <= rng.next() < 1 for _ in range(100))

    def test_empty_seed_means_unseeded(self):
        assert SeededRandom("").seed is None

    def test_pick(self):
        rng = SeededRandom("pick")
        items = ["x", "y", "z"]
        assert all(rng.pick(items) in items for _ in range(50))

    def test_pick_empty(self):
        with pytest.raises(ValueError):
            SeededRandom("pick").pick([])


class TestTargetSelector:
    """Drawing targets from the word list."""

    def test_targets_have_game_length(self):
        selector = TargetSelector(SeededRandom("len"), ["ab", "abcdef", "crane", "slate"])
        assert {selector.random_target() for _ in range(50)} <= {"crane", "slate"}

    def test_placeholder_entries_are_redrawn(self):
        selector = TargetSelector(SeededRandom("star"), ["b*tch", "s*ite", "crane"])
        assert all(selector.random_target() == "crane" for _ in range(50))

    def test_no_eligible_targets_is_a_configuration_error(self):
        with pytest.raises(ConfigurationError):
            TargetSelector(SeededRandom("x"), ["abcd", "abcdef"])

    def test_only_placeholders_is_a_configuration_error(self):
        with pytest.raises(ConfigurationError):
            TargetSelector(SeededRandom("x"), ["ab*de", "*****"])

    def test_real_targets_are_dictionary_words(self):
        selector = TargetSelector(SeededRandom("dict"))
        for _ in range(200):
            target = selector.random_target()
            assert target in DICTIONARY
            assert len(target) == 5

    def test_game_number_skips_draws(self):
        selector = TargetSelector(SeededRandom("skip"))
        sequence = [selector.random_target() for _ in range(10)]
        for n in (1, 2, 5, 10):
            assert selector.target_for_game(n) == sequence[n - 1]


class TestGameTarget:
    """Two parties sharing (seed, game number) get the same word."""

    def test_independent_selectors_agree_for_every_game(self):
        first = TargetSelector(SeededRandom("20220103"))
        second = TargetSelector(SeededRandom("20220103"))
        first_sequence = [first.random_target() for _ in range(MAX_GAME_NUMBER)]
        second_sequence = [second.random_target() for _ in range(MAX_GAME_NUMBER)]
        assert first_sequence == second_sequence

        for n in (1, 2, 17, 500, MAX_GAME_NUMBER):
            assert game_target("20220103", n) == first_sequence[n - 1]

    def test_stable_across_calls(self):
        assert game_target("abc", 42) == game_target("abc", 42)


class TestParseGameNumber:
    """Game numbers from query strings."""

    @pytest.mark.parametrize("value, expected", [
        ("9999", 1), ("abc", 1), (None, 1), ("", 1), ("0", 1), ("-3", 1), ("2.5", 1),
        ("1", 1), ("42", 42), (" 7 ", 7), ("1000", 1000), ("1001", 1), (12, 12), (True, 1),
    ])
    def test_parse(self, value, expected):
        assert parse_game_number(value) == expected


class TestDescribeSeed:
    """Human-readable seeds."""

    def test_date_seed(self):
        assert describe_seed("20220103") == "Monday, January 3, 2022"

    def test_leap_day(self):
        assert describe_seed("20240229") == "Thursday, February 29, 2024"

    @pytest.mark.parametrize("seed", ["20220230", "19991231", "hello", "2022013", "20221301"])
    def test_other_seeds(self, seed):
        assert describe_seed(seed) == f"seed {seed}"

    def test_today_seed(self):
        assert today_seed(datetime.date(2024, 2, 9)) == "20240209"
        assert len(today_seed()) == 8


def test_shipped_word_lists_are_valid():
    assert validate_word_list_integrity()
    assert TARGET_LIST[-1] == "murky"


def test_integrity_check_rejects_empty_eligible_list():
    with pytest.raises(ConfigurationError):
        validate_word_list_integrity(["abcd", "b*tch"])
