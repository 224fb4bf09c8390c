"""
engine.py
======================

ラウンドの進行（状態遷移）と正誤判定を担当する。

状態:
    IDLE ──start_round──▶ ROUND_ACTIVE ──submit_answer──▶ ROUND_ANSWERED
                                ▲                               │
                                └────────── start_round ────────┘
    reset() はどの状態からでも呼べる（IDLE に戻して即 start_round）。

Session は呼び出し側が持ち、各操作に渡す。エンジン自身は
ゲーム状態を持たないので、1 つのエンジンを複数セッションで共有できる。
"""

from __future__ import annotations

import logging
import random
from typing import Optional, Sequence

from .diet import all_known_foods, parse_diet
from .errors import InvalidState
from .models import (
    Animal,
    AnswerResult,
    Phase,
    RoundSnapshot,
    RoundState,
    Session,
)
from .options import DEFAULT_DISTRACTOR_COUNT, build_options
from .selector import DEFAULT_MAX_ATTEMPTS, AnimalSelector

logger = logging.getLogger(__name__)


class RoundEngine:
    """
    主な操作:
    - start_round(session): 新しいラウンドを作る
    - submit_answer(session, food): 回答を判定する
    - reset(session): 0 ラウンド・0 点に戻し、すぐ次のラウンドを作る
    """

    def __init__(
        self,
        animals: Sequence[Animal],
        rng: Optional[random.Random] = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        distractor_count: int = DEFAULT_DISTRACTOR_COUNT,
    ):
        # animals は差し替え可能。食べ物の全集合は毎ラウンド計算し直す
        self.animals = animals
        self.rng = rng if rng is not None else random.Random()
        self.selector = AnimalSelector(self.rng, max_attempts=max_attempts)
        self.distractor_count = distractor_count

    # ------------------------------------------------------------
    # ラウンド開始
    # ------------------------------------------------------------
    def start_round(self, session: Session) -> RoundSnapshot:
        """
        新しいラウンドを作り、表示用スナップショットを返す。

        IDLE / ROUND_ANSWERED からのみ有効。
        動物選択・選択肢生成が失敗した場合は例外を送出し、
        session には一切手を加えない。
        """
        if session.phase == Phase.ROUND_ACTIVE:
            raise InvalidState("start_round", session.phase)

        animal = self.selector.pick(self.animals, session.last_animal_id)
        correct, options = build_options(
            parse_diet(animal.diet),
            all_known_foods(self.animals),
            self.rng,
            distractor_count=self.distractor_count,
            animal=animal,
        )

        state = RoundState(animal=animal, correct_food=correct, options=options)
        session._begin_round(state)
        logger.info(
            "Round %d: %s (options=%s)", session.round, animal.name, options
        )
        return self.snapshot(session)

    # ------------------------------------------------------------
    # 回答
    # ------------------------------------------------------------
    def submit_answer(self, session: Session, food: str) -> AnswerResult:
        """
        回答を判定する。ROUND_ACTIVE 以外では InvalidState。

        選択肢にない食べ物が渡された場合は単に不正解として扱う。
        """
        state = session.current
        if session.phase != Phase.ROUND_ACTIVE or state is None:
            raise InvalidState("submit_answer", session.phase)

        is_correct = food == state.correct_food
        session._mark_answered(is_correct)
        logger.info(
            "Round %d answered: %s -> %s (%s), score=%d",
            session.round,
            state.animal.name,
            food,
            "correct" if is_correct else "wrong",
            session.score,
        )
        return AnswerResult(
            is_correct=is_correct,
            correct_food=state.correct_food,
            animal_name=state.animal.name,
        )

    # ------------------------------------------------------------
    # リセット
    # ------------------------------------------------------------
    def reset(self, session: Session) -> RoundSnapshot:
        """
        セッションを初期化してすぐに新しいラウンドを始める。

        データが空などで start_round が失敗した場合、
        session は round 0 / score 0 の IDLE 状態で残る。
        """
        session._clear()
        logger.info("Session reset")
        return self.start_round(session)

    # ------------------------------------------------------------
    # 表示用
    # ------------------------------------------------------------
    def snapshot(self, session: Session) -> RoundSnapshot:
        """現在のラウンドのスナップショット。ラウンドがなければ InvalidState。"""
        state = session.current
        if state is None:
            raise InvalidState("snapshot", session.phase)
        return RoundSnapshot(
            animal_name=state.animal.name,
            animal_image=state.animal.image,
            options=tuple(state.options),
        )
