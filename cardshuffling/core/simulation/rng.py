"""可复现的随机数流."""

import hashlib
import random
from typing import Union

__all__ = ['seeded_random']


def seeded_random(seed: Union[int, str], salt: str = "") -> random.Random:
    """
    由种子和盐派生独立的随机数生成器.

    同一 (seed, salt) 总是得到同一序列，不同的盐得到互不相关的序列，
    可为每次运行或每次试验各派生一条随机数流.

    Args:
        seed: 基础种子
        salt: 区分不同随机数流的后缀，如运行名称或试验编号

    Returns:
        random.Random: 新的随机数生成器
    """
    digest = hashlib.sha256(f"{seed}:{salt}".encode('utf-8')).hexdigest()
    return random.Random(int(digest, 16) & ((1 << 63) - 1))
