"""
feed_quiz パッケージ
======================

「Feed the Animals」クイズのゲームロジックを提供する。

主な役割:
- 設定管理（config）
- 動物データの読み込み（animal_bank）
- diet 文字列の解析・食べ物の全集合（diet）
- 直前と同じ動物を避ける出題選択（selector）
- 正解 + ハズレの選択肢生成（options）
- ラウンド進行と正誤判定（engine）
- UI コンポーネント（ui）※ Streamlit 依存のためここでは import しない

app.py は Streamlit UI のみを担当し、内部ロジックはすべて本パッケージから呼ぶ。
"""

from .config import AppConfig
from .animal_bank import load_animals
from .diet import parse_diet, all_known_foods
from .selector import AnimalSelector
from .options import build_options
from .engine import RoundEngine
from .errors import (
    FeedQuizError,
    NoAnimalsAvailable,
    NoValidFoodsForAnimal,
    InvalidState,
)
from .models import (
    Animal,
    AnswerResult,
    Phase,
    RoundSnapshot,
    RoundState,
    Session,
    SessionStats,
)

__all__ = [
    "AppConfig",
    "load_animals",
    "parse_diet",
    "all_known_foods",
    "AnimalSelector",
    "build_options",
    "RoundEngine",
    "FeedQuizError",
    "NoAnimalsAvailable",
    "NoValidFoodsForAnimal",
    "InvalidState",
    "Animal",
    "AnswerResult",
    "Phase",
    "RoundSnapshot",
    "RoundState",
    "Session",
    "SessionStats",
]
