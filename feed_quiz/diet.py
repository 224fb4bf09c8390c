"""
diet.py
======================

動物の diet 文字列（例: "grass, hay"）を食べ物名のリストへ変換する。

- parse_diet()      : 1 頭分の diet を正規化
- all_known_foods() : データセット全体から食べ物の全集合を作る

食べ物名は「前後の空白を除去し、先頭 1 文字だけ大文字」にそろえる。
UI 側の画像テーブルのキーと一致させるため、この規則は変えないこと。
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from .models import Animal


def _capitalize_first(word: str) -> str:
    # str.capitalize() は 2 文字目以降を小文字化するので使わない
    return word[:1].upper() + word[1:]


def parse_diet(raw: Optional[str]) -> List[str]:
    """
    カンマ区切りの diet を食べ物名のリストにする。

    順序は保持し、重複もそのまま残す。空文字・None は空リスト。
    """
    if not raw:
        return []

    foods: List[str] = []
    for fragment in raw.split(","):
        fragment = fragment.strip()
        if not fragment:
            continue
        foods.append(_capitalize_first(fragment))
    return foods


def all_known_foods(animals: Iterable[Animal]) -> List[str]:
    """
    全動物の diet に現れる食べ物名を、初出順・重複なしで返す。

    データセットが変わったら呼び直すこと（ここではキャッシュしない）。
    """
    seen = {}
    for animal in animals:
        for food in parse_diet(animal.diet):
            seen.setdefault(food, None)
    return list(seen)
