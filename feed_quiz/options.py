"""
options.py
======================

正解 1 つとハズレ（distractor）から選択肢を組み立てる。

手順:
1. 動物の食べ物リストから正解をランダムに 1 つ選ぶ
2. 全食べ物からその動物の食べ物「すべて」を除いたものをハズレ候補とする
   （正解だけを除くのではない。ハズレが実は正解、という事態を防ぐ）
3. ハズレ候補を一様シャッフルし、最大 distractor_count 件を採用
   足りない場合は少ないまま（重複や水増しはしない）
4. 正解 + ハズレをシャッフルして表示順にする

シャッフルは random.Random.shuffle（Fisher–Yates）を使う。
比較関数にランダム値を返すソートは一様な並びにならないので使わないこと。
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from .errors import NoValidFoodsForAnimal

DEFAULT_DISTRACTOR_COUNT = 3
# 正解を含めて最大 4 択
MAX_DISTRACTORS = 3


def build_options(
    valid_foods: Sequence[str],
    all_foods: Sequence[str],
    rng,
    distractor_count: int = DEFAULT_DISTRACTOR_COUNT,
    animal=None,
) -> Tuple[str, List[str]]:
    """
    (正解, 表示順の選択肢リスト) を返す。

    valid_foods が空なら NoValidFoodsForAnimal。animal はエラー表示用。
    distractor_count は 0〜MAX_DISTRACTORS に丸める。
    """
    if not valid_foods:
        raise NoValidFoodsForAnimal(animal)

    correct = valid_foods[rng.randrange(len(valid_foods))]

    excluded = set(valid_foods)
    pool: List[str] = []
    for food in all_foods:
        if food not in excluded and food not in pool:
            pool.append(food)

    rng.shuffle(pool)
    distractors = pool[:min(max(distractor_count, 0), MAX_DISTRACTORS)]

    options = [correct] + distractors
    rng.shuffle(options)
    return correct, options
