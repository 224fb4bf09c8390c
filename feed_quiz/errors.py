"""
errors.py
======================

コアが呼び出し側へ返す例外をまとめたモジュール。

- NoAnimalsAvailable    : 動物データが空（ラウンドを開始できない）
- NoValidFoodsForAnimal : 動物の diet が空・解析不能
- InvalidState          : 操作の順序違反（未出題のまま回答など）

いずれもセッション状態を壊さない。失敗した操作の前の状態がそのまま残る。
"""

from __future__ import annotations

from typing import Any, Optional


class FeedQuizError(Exception):
    """feed_quiz の全例外の基底クラス。"""


class NoAnimalsAvailable(FeedQuizError):
    def __init__(self, message: str = "No animals available in the dataset."):
        super().__init__(message)


class NoValidFoodsForAnimal(FeedQuizError):
    def __init__(self, animal: Optional[Any] = None):
        self.animal = animal
        name = getattr(animal, "name", None) or "unknown animal"
        super().__init__(f"No valid foods for {name}.")


class InvalidState(FeedQuizError):
    def __init__(self, operation: str, phase: Any):
        self.operation = operation
        self.phase = phase
        label = getattr(phase, "value", phase)
        super().__init__(f"{operation}() is not allowed in phase '{label}'.")
