"""
Test Configuration - pytest配置文件

提供测试共用的fixture：标准牌组、可复现的随机数生成器、
示例牌组状态和经验洗牌池。
"""

import random
from typing import List

import pytest

from cardshuffling.core.deck import Deck, CANONICAL_CARDS
from cardshuffling.core.shuffles import EmpiricalShuffle, ShuffleState
from cardshuffling.tests.helpers import riffle_once, cut


@pytest.fixture
def canonical_deck() -> Deck:
    """新牌顺序的牌组"""
    return Deck.canonical()


@pytest.fixture
def reversed_deck() -> Deck:
    return Deck(reversed(CANONICAL_CARDS))


@pytest.fixture
def rng() -> random.Random:
    """固定种子的随机数生成器"""
    return random.Random(20240101)


@pytest.fixture
def sample_states(canonical_deck) -> List[ShuffleState]:
    """示例牌组状态: 两次鸽尾洗牌之后一次桌面搓洗"""
    first = canonical_deck
    second = riffle_once(first)
    third = riffle_once(second)
    fourth = cut(third, 17)
    return [
        ShuffleState("riffle 0", 1, first),
        ShuffleState("riffle 1", 2, second),
        ShuffleState("Riffle 2", 3, third),
        ShuffleState("table wash", 4, fourth),
    ]


@pytest.fixture
def riffle_pool(canonical_deck) -> List[EmpiricalShuffle]:
    """只含一次完美鸽尾洗牌的经验洗牌池"""
    return [EmpiricalShuffle("riffle", canonical_deck, riffle_once(canonical_deck))]


def pytest_configure(config):
    """pytest配置"""
    config.addinivalue_line(
        "markers", "property_test: 标记基于属性的测试"
    )
    config.addinivalue_line(
        "markers", "integration: 标记集成测试"
    )
    config.addinivalue_line(
        "markers", "unit: 标记单元测试"
    )
