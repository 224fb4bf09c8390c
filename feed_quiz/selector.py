"""
selector.py
======================

次に出題する動物を選ぶ。

ポリシー（直前と同じ動物を避ける）:
- 最大 max_attempts 回（既定 6 回）ランダムに候補を引く
- 直前の動物 ID と異なる最初の候補を採用
- 全部かぶった場合（1 頭しかいない場合を含む）は最初に引いた候補を採用

厳密な「連続なし」は保証しない。動物が数頭以上いれば連続はほぼ起きない。
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from .errors import NoAnimalsAvailable
from .models import Animal

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 6


class AnimalSelector:
    """
    rng は randrange(n) を持つ乱数源（通常は random.Random）。
    テストでは決定的な乱数源を渡す。
    """

    def __init__(self, rng, max_attempts: int = DEFAULT_MAX_ATTEMPTS):
        if max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        self.rng = rng
        self.max_attempts = max_attempts

    def pick(
        self,
        animals: Sequence[Animal],
        last_animal_id: Optional[Any] = None,
    ) -> Animal:
        if not animals:
            raise NoAnimalsAvailable()

        first: Optional[Animal] = None
        for _ in range(self.max_attempts):
            candidate = animals[self.rng.randrange(len(animals))]
            if first is None:
                first = candidate
            if candidate.id != last_animal_id:
                return candidate

        logger.debug(
            "All %d draws matched last animal %r; repeating %r",
            self.max_attempts, last_animal_id, first.id,
        )
        return first
