# tests/test_ranker.py
import random

import pytest

from word_suggester.core.ranker import Suggestion, SuggestionRanker


def test_keeps_everything_below_capacity():
    r = SuggestionRanker(3)
    assert r.offer("a", 1, 0)
    assert r.offer("b", 0, 0)
    assert len(r) == 2
    assert [s.word for s in r.drain_sorted()] == ["b", "a"]


def test_default_capacity_is_ten():
    r = SuggestionRanker()
    for i in range(25):
        r.offer(f"w{i}", 0, i)
    out = r.drain_sorted()
    assert len(out) == 10
    assert [s.frequency for s in out] == list(range(24, 14, -1))


def test_replaces_worst_only_when_strictly_better():
    r = SuggestionRanker(2)
    r.offer("near", 0, 1)
    r.offer("far", 2, 5)
    # tied with the worst entry -> rejected
    assert not r.offer("tie", 2, 5)
    # same distance, higher frequency -> replaces "far"
    assert r.offer("better", 2, 6)
    assert [s.word for s in r.drain_sorted()] == ["near", "better"]
    # closer beats anything at distance 2
    assert r.offer("closer", 1, 0)
    assert [s.word for s in r.drain_sorted()] == ["near", "closer"]


def test_worst_prefers_lowest_frequency_on_equal_distance():
    r = SuggestionRanker(3)
    r.offer("a", 1, 5)
    r.offer("b", 1, 2)
    r.offer("c", 0, 0)
    r.offer("d", 1, 3)
    assert sorted(s.word for s in r.drain_sorted()) == ["a", "c", "d"]


def test_drain_sorted_has_no_side_effects():
    r = SuggestionRanker(4)
    r.offer_many([("x", 1, 1), ("y", 0, 2)])
    first = r.drain_sorted()
    assert r.drain_sorted() == first
    assert len(r) == 2


def test_ranking_order_holds_for_random_input():
    rng = random.Random(7)
    r = SuggestionRanker(10)
    for i in range(200):
        r.offer(f"w{i}", rng.randint(0, 3), rng.randint(0, 50))
    out = r.drain_sorted()
    assert len(out) <= 10
    for a, b in zip(out, out[1:]):
        assert a.distance <= b.distance
        if a.distance == b.distance:
            assert a.frequency >= b.frequency


def test_beats():
    assert Suggestion("a", 0, 0).beats(Suggestion("b", 1, 9))
    assert Suggestion("a", 1, 3).beats(Suggestion("b", 1, 2))
    assert not Suggestion("a", 1, 2).beats(Suggestion("b", 1, 2))


@pytest.mark.parametrize("capacity", [0, -1])
def test_invalid_capacity(capacity):
    with pytest.raises(ValueError):
        SuggestionRanker(capacity)
