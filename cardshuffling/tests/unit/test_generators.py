"""
洗牌生成器的单元测试.

测试均匀随机洗牌和经验洗牌重放的确定性、合法性与重放准确性.
"""

import random

import pytest

from cardshuffling.core.comparators import DeckDifference, SpearmanRankCompare
from cardshuffling.core.deck import Deck
from cardshuffling.core.generators import EmpiricalAlgorithmShuffle, RandomShuffle, ShuffleGenerator
from cardshuffling.core.shuffles import EmpiricalShuffle, ShuffleType, derive_permutation
from cardshuffling.tests.helpers import cut, riffle_once


@pytest.mark.unit
class TestRandomShuffle:
    """均匀随机洗牌测试."""

    def test_is_generator(self, rng):
        assert isinstance(RandomShuffle(rng), ShuffleGenerator)
        assert RandomShuffle(rng).name == "random"

    def test_origin_is_canonical(self, rng):
        trial = RandomShuffle(rng).next_trial()
        assert trial.origin == Deck.canonical()
        assert isinstance(trial.result, Deck)

    def test_same_seed_same_trials(self):
        """相同种子产出相同的试验序列."""
        first = RandomShuffle(random.Random(123))
        second = RandomShuffle(random.Random(123))
        for _ in range(20):
            assert first.next_trial() == second.next_trial()

    def test_different_seeds_differ(self):
        first = RandomShuffle(random.Random(1)).next_trial()
        second = RandomShuffle(random.Random(2)).next_trial()
        assert first.result != second.result

    def test_trials_are_independent(self, rng):
        generator = RandomShuffle(rng)
        results = {generator.next_trial().result for _ in range(50)}
        assert len(results) == 50


@pytest.mark.unit
class TestEmpiricalAlgorithmShuffle:
    """经验洗牌重放测试."""

    def test_single_shuffle_replayed_exactly(self, riffle_pool, rng):
        """池中只有一次洗牌时，每次试验都精确重放同一排列."""
        expected = riffle_pool[0].permutation
        generator = EmpiricalAlgorithmShuffle(riffle_pool, rng)

        spearman = SpearmanRankCompare()
        difference = DeckDifference()
        reference = riffle_pool[0]
        for _ in range(25):
            trial = generator.next_trial()
            assert derive_permutation(trial.origin, trial.result) == expected
            assert spearman.compare(trial.origin, trial.result) == \
                spearman.compare(reference.origin, reference.result)
            assert difference.compare(trial.origin, trial.result) == 50

    def test_replays_onto_fresh_canonical_deck(self, rng):
        """重放的是位置映射，与记录时的原牌组无关."""
        start = cut(Deck.canonical(), 7)
        shuffle = EmpiricalShuffle("riffle", start, riffle_once(start))

        trial = EmpiricalAlgorithmShuffle([shuffle], rng).next_trial()

        assert trial.origin == Deck.canonical()
        assert trial.result == riffle_once(Deck.canonical())

    def test_filter_by_type(self, canonical_deck, rng):
        riffle = EmpiricalShuffle("riffle", canonical_deck, riffle_once(canonical_deck))
        overhand = EmpiricalShuffle("overhand", canonical_deck, cut(canonical_deck, 20))

        generator = EmpiricalAlgorithmShuffle([riffle, overhand], rng, ShuffleType.OVERHAND)

        assert generator.pool_size == 1
        assert generator.name == "empirical_overhand"
        for _ in range(10):
            assert generator.next_trial().result == cut(canonical_deck, 20)

    def test_unfiltered_pool_uses_all(self, canonical_deck, rng):
        riffle = EmpiricalShuffle("riffle", canonical_deck, riffle_once(canonical_deck))
        overhand = EmpiricalShuffle("overhand", canonical_deck, cut(canonical_deck, 20))

        generator = EmpiricalAlgorithmShuffle([riffle, overhand], rng)
        results = {generator.next_trial().result for _ in range(100)}

        assert generator.name == "empirical"
        assert results == {riffle.result, overhand.result}

    def test_empty_pool_rejected(self, rng, riffle_pool):
        with pytest.raises(ValueError):
            EmpiricalAlgorithmShuffle([], rng)
        with pytest.raises(ValueError):
            EmpiricalAlgorithmShuffle(riffle_pool, rng, ShuffleType.TABLE)

    def test_same_seed_same_choices(self, canonical_deck):
        pool = [EmpiricalShuffle("riffle", canonical_deck, cut(canonical_deck, at)) for at in range(1, 9)]
        first = EmpiricalAlgorithmShuffle(pool, random.Random(99))
        second = EmpiricalAlgorithmShuffle(pool, random.Random(99))
        assert [first.next_trial() for _ in range(30)] == [second.next_trial() for _ in range(30)]
