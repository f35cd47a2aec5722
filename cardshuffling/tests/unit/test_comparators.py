"""
排名比较器的单元测试.

测试每个比较器在恒等洗牌、反转、完美鸽尾洗牌等已知排列上的得分，
以及对非法输入的快速失败.
"""

import pytest

from cardshuffling.core.comparators import (
    BridgeHandCompare, BridgeHandValue, DeckDifference, RankComparator, SpearmanRankCompare,
    deal_hands, default_comparators, hand_values, high_card_points,
)
from cardshuffling.core.deck import Card, Deck, MalformedDeckError, Rank, Suit, CANONICAL_CARDS
from cardshuffling.core.shuffles import derive_permutation, fixed_points
from cardshuffling.tests.helpers import cut, riffle_once, swap


@pytest.mark.unit
class TestSpearmanRankCompare:
    """Spearman比较器测试."""

    def test_identity_is_one(self, canonical_deck):
        assert SpearmanRankCompare().compare(canonical_deck, canonical_deck) == 1.0

    def test_reverse_is_minus_one(self, canonical_deck, reversed_deck):
        assert SpearmanRankCompare().compare(canonical_deck, reversed_deck) == pytest.approx(-1.0)

    def test_single_swap_stays_high(self, canonical_deck):
        score = SpearmanRankCompare().compare(canonical_deck, swap(canonical_deck, 0, 1))
        assert 0.99 < score < 1.0

    def test_range(self, canonical_deck, rng):
        cards = list(CANONICAL_CARDS)
        for _ in range(50):
            rng.shuffle(cards)
            score = SpearmanRankCompare().compare(canonical_deck, cards)
            assert -1.0 <= score <= 1.0

    def test_symmetric(self, canonical_deck):
        riffled = riffle_once(canonical_deck)
        comparator = SpearmanRankCompare()
        assert comparator.compare(canonical_deck, riffled) == pytest.approx(
            comparator.compare(riffled, canonical_deck))


@pytest.mark.unit
class TestDeckDifference:
    """位置差异比较器测试."""

    def test_identity_is_zero(self, canonical_deck):
        assert DeckDifference().compare(canonical_deck, canonical_deck) == 0

    def test_swap_moves_two_cards(self, canonical_deck):
        assert DeckDifference().compare(canonical_deck, swap(canonical_deck, 3, 40)) == 2

    def test_reverse_moves_everything(self, canonical_deck, reversed_deck):
        assert DeckDifference().compare(canonical_deck, reversed_deck) == 52

    @pytest.mark.parametrize("at", [0, 1, 13, 26, 51])
    def test_equals_52_minus_fixed_points(self, canonical_deck, at):
        result = riffle_once(cut(canonical_deck, at))
        expected = 52 - fixed_points(derive_permutation(canonical_deck, result))
        assert DeckDifference().compare(canonical_deck, result) == expected


@pytest.mark.unit
class TestBridgeHands:
    """桥牌手牌比较器测试."""

    def test_deal_round_robin(self, canonical_deck):
        hands = deal_hands(canonical_deck)
        assert len(hands) == 4
        assert all(len(hand) == 13 for hand in hands)
        assert hands[1][0] == canonical_deck[1]
        assert hands[3][12] == canonical_deck[51]

    def test_high_card_points(self):
        hand = [Card(Suit.SPADES, Rank.ACE), Card(Suit.HEARTS, Rank.KING),
                Card(Suit.CLUBS, Rank.QUEEN), Card(Suit.DIAMONDS, Rank.JACK),
                Card(Suit.DIAMONDS, Rank.TEN)]
        assert high_card_points(hand) == 10

    def test_hand_values_total_forty(self, canonical_deck, rng):
        """整副牌共40大牌点，无论如何分配."""
        assert int(hand_values(canonical_deck).sum()) == 40
        cards = list(CANONICAL_CARDS)
        rng.shuffle(cards)
        assert int(hand_values(cards).sum()) == 40

    def test_compare_identity(self, canonical_deck):
        assert BridgeHandCompare().compare(canonical_deck, canonical_deck) == 52

    def test_compare_shift_by_one_seat(self, canonical_deck):
        """整体移动一个位置后每张牌都换了座位."""
        assert BridgeHandCompare().compare(canonical_deck, cut(canonical_deck, 1)) == 0

    def test_compare_shift_by_four(self, canonical_deck):
        """整体移动四个位置后每张牌仍在原座位."""
        assert BridgeHandCompare().compare(canonical_deck, cut(canonical_deck, 4)) == 52

    def test_value_identity(self, canonical_deck):
        assert BridgeHandValue().compare(canonical_deck, canonical_deck) == 0

    def test_value_swap_between_seats(self, canonical_deck):
        """把一张A与一张2交换到不同座位，两个座位各变化4点."""
        ace_position = canonical_deck.index(Card(Suit.DIAMONDS, Rank.ACE))
        two_position = canonical_deck.index(Card(Suit.HEARTS, Rank.TWO))
        assert ace_position % 4 != two_position % 4
        result = swap(canonical_deck, ace_position, two_position)
        assert BridgeHandValue().compare(canonical_deck, result) == 8


@pytest.mark.unit
class TestComparatorContract:
    """所有比较器共同遵守的约定."""

    def test_default_comparators(self):
        comparators = default_comparators()
        assert [c.name for c in comparators] == [
            "spearman", "deck_difference", "bridge_hand_compare", "bridge_hand_value"]
        assert all(isinstance(c, RankComparator) for c in comparators)

    @pytest.mark.parametrize("comparator", default_comparators(), ids=lambda c: c.name)
    def test_returns_float(self, comparator, canonical_deck, reversed_deck):
        assert isinstance(comparator.compare(canonical_deck, reversed_deck), float)

    @pytest.mark.parametrize("comparator", default_comparators(), ids=lambda c: c.name)
    def test_accepts_card_lists(self, comparator, canonical_deck):
        riffled = riffle_once(canonical_deck)
        assert comparator.compare(list(canonical_deck), list(riffled)) == \
            comparator.compare(canonical_deck, riffled)

    @pytest.mark.parametrize("comparator", default_comparators(), ids=lambda c: c.name)
    def test_malformed_input_fails_fast(self, comparator, canonical_deck):
        duplicated = list(CANONICAL_CARDS)
        duplicated[10] = duplicated[11]
        with pytest.raises(MalformedDeckError):
            comparator.compare(canonical_deck, duplicated)
        with pytest.raises(MalformedDeckError):
            comparator.compare(list(CANONICAL_CARDS[:13]), canonical_deck)

    def test_custom_comparator(self, canonical_deck):
        """新增比较器只需实现_score."""

        class TopCardMoved(RankComparator):
            name = "top_card_moved"

            def _score(self, origin, result):
                return origin[0] != result[0]

        comparator = TopCardMoved()
        assert comparator.compare(canonical_deck, canonical_deck) == 0.0
        assert comparator.compare(canonical_deck, Deck(reversed(CANONICAL_CARDS))) == 1.0
