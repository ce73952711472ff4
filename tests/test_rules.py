"""Unit tests for rps.game.rules"""
import itertools
import random
from collections import Counter

import pytest

from rps.game import rules
from rps.game.models import Move, Outcome
from rps.game.rules import InvariantViolation, judge, random_move

from helpers import FixedRng


def test_judge_tie():
    for m in Move:
        assert judge(m, m) == Outcome.TIE


def test_judge_win_cases():
    assert judge(Move.ROCK, Move.SCISSORS) == Outcome.WIN
    assert judge(Move.PAPER, Move.ROCK) == Outcome.WIN
    assert judge(Move.SCISSORS, Move.PAPER) == Outcome.WIN


def test_judge_lose_cases():
    assert judge(Move.SCISSORS, Move.ROCK) == Outcome.LOSE
    assert judge(Move.ROCK, Move.PAPER) == Outcome.LOSE
    assert judge(Move.PAPER, Move.SCISSORS) == Outcome.LOSE


def test_judge_antisymmetric():
    flipped = {Outcome.WIN: Outcome.LOSE, Outcome.LOSE: Outcome.WIN, Outcome.TIE: Outcome.TIE}
    for a, b in itertools.product(Move, repeat=2):
        assert judge(b, a) == flipped[judge(a, b)]


def test_beats_is_one_way():
    for a, b in itertools.product(Move, repeat=2):
        assert not (rules.beats(a, b) and rules.beats(b, a))


def test_judge_both_beat_is_fatal(monkeypatch):
    monkeypatch.setattr(rules, "beats", lambda a, b: True)
    with pytest.raises(InvariantViolation):
        judge(Move.ROCK, Move.PAPER)


def test_random_move_maps_indices():
    rng = FixedRng(0, 1, 2)
    assert [random_move(rng) for _ in range(3)] == [Move.ROCK, Move.PAPER, Move.SCISSORS]


def test_random_move_out_of_range_is_fatal():
    with pytest.raises(InvariantViolation):
        random_move(FixedRng(3))


def test_random_move_default_source():
    assert random_move() in Move


def test_random_move_roughly_uniform():
    rng = random.Random(20240601)
    counts = Counter(random_move(rng) for _ in range(3000))
    assert set(counts) == set(Move)
    for m in Move:
        assert 850 < counts[m] < 1150
