"""
models.py
======================

ゲームで扱うデータ型。

- Animal        : 外部データセットの 1 レコード（コアは読むだけ）
- RoundState    : 1 ラウンド分の出題内容
- Session       : ラウンド数・スコア・直前の動物を保持するセッション
- RoundSnapshot / AnswerResult / SessionStats : UI 側へ渡す読み取り専用の値

Session はモジュール変数ではなく呼び出し側が所有する値であり、
RoundEngine の各操作に明示的に渡される。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Tuple


@dataclass(frozen=True)
class Animal:
    id: Any
    name: str
    image: str = ""
    diet: str = ""


class Phase(str, Enum):
    IDLE = "idle"
    ROUND_ACTIVE = "round_active"
    ROUND_ANSWERED = "round_answered"


@dataclass
class RoundState:
    """
    1 ラウンドの出題内容。

    correct_food は必ず options に含まれ、options に重複はなく、最大 4 件。
    answered は回答時に一度だけ True になる。
    """

    animal: Animal
    correct_food: str
    options: List[str] = field(default_factory=list)
    answered: bool = False


@dataclass(frozen=True)
class RoundSnapshot:
    animal_name: str
    animal_image: str
    options: Tuple[str, ...]


@dataclass(frozen=True)
class AnswerResult:
    is_correct: bool
    correct_food: str
    animal_name: str


@dataclass(frozen=True)
class SessionStats:
    round: int
    score: int


class Session:
    """
    1 回のプレイ（リセットまで）の累積状態。

    round / score / last_animal_id は読み取り専用。
    変更は RoundEngine からのみ、アンダースコア付きメソッド経由で行う。
    """

    def __init__(self) -> None:
        self._round = 0
        self._score = 0
        self._last_animal_id: Optional[Any] = None
        self._current: Optional[RoundState] = None
        self._phase = Phase.IDLE

    # ------------------------------------------------------------
    # 読み取り専用プロパティ
    # ------------------------------------------------------------
    @property
    def round(self) -> int:
        return self._round

    @property
    def score(self) -> int:
        return self._score

    @property
    def last_animal_id(self) -> Optional[Any]:
        return self._last_animal_id

    @property
    def current(self) -> Optional[RoundState]:
        return self._current

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def stats(self) -> SessionStats:
        return SessionStats(round=self._round, score=self._score)

    # ------------------------------------------------------------
    # RoundEngine 専用の更新メソッド
    # ------------------------------------------------------------
    def _begin_round(self, state: RoundState) -> None:
        self._round += 1
        self._last_animal_id = state.animal.id
        self._current = state
        self._phase = Phase.ROUND_ACTIVE

    def _mark_answered(self, is_correct: bool) -> None:
        if self._current is not None:
            self._current.answered = True
        if is_correct:
            self._score += 1
        self._phase = Phase.ROUND_ANSWERED

    def _clear(self) -> None:
        self._round = 0
        self._score = 0
        self._last_animal_id = None
        self._current = None
        self._phase = Phase.IDLE

    def __repr__(self) -> str:
        return (
            f"Session(round={self._round}, score={self._score}, "
            f"phase={self._phase.value}, last_animal_id={self._last_animal_id!r})"
        )
