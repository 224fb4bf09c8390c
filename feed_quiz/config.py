"""
config.py
=========

アプリ全体で利用する設定値を一元管理する。
データファイルのパス、ゲームのパラメータ、UI、ログ設定を
すべてこのクラスを通じて取得する。

ルートの config.toml（任意）で上書きできる:

    [app]
    title = "Feed the Animals"
    default_theme = "light"

    [game]
    animals_path = "bank/animals.json"
    max_attempts = 6
    distractor_count = 3
    seed = 42            # 省略時は毎回ランダム

    [logging]
    level = "INFO"
    file = "feed_quiz.log"
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional
import logging
import os

import toml

from .options import DEFAULT_DISTRACTOR_COUNT, MAX_DISTRACTORS
from .selector import DEFAULT_MAX_ATTEMPTS

# ------------------------------------------------------------
# 基本パス定義
# ------------------------------------------------------------

ROOT_DIR = Path(__file__).resolve().parent.parent
BANK_DIR = ROOT_DIR / "bank"

logger = logging.getLogger(__name__)


# ------------------------------------------------------------
# AppConfig
# ------------------------------------------------------------

@dataclass
class AppConfig:
    """
    アプリ設定クラス。

    - 動物データのパス
    - 出題パラメータ（再抽選回数・ハズレの数・乱数シード）
    - UI（タイトル・テーマ）
    - ログレベル（環境変数 FEED_QUIZ_LOG_LEVEL が優先）
    """

    # ---------- ファイルパス ----------
    animals_path: Path = BANK_DIR / "animals.json"

    # ---------- 出題設定 ----------
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    distractor_count: int = DEFAULT_DISTRACTOR_COUNT
    seed: Optional[int] = None

    # ---------- UI ----------
    title: str = "Feed the Animals"
    default_theme: str = "light"

    # ---------- ログ ----------
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # ============================================================
    # 初期化処理
    # ============================================================

    def __post_init__(self):
        self.animals_path = Path(self.animals_path)
        self.log_level = self._load_log_level()
        self._check_game_settings()

    # ============================================================
    # 読み込み
    # ============================================================

    @classmethod
    def load(cls, path="config.toml") -> "AppConfig":
        """
        config.toml を読み込んで AppConfig を作る。
        ファイルが無い・壊れている場合は既定値。
        """
        data = cls.read_toml(Path(path))
        app = _table(data, "app")
        game = _table(data, "game")
        log = _table(data, "logging")

        kwargs: Dict[str, Any] = {}
        if "animals_path" in game:
            kwargs["animals_path"] = _resolve(game["animals_path"])
        for key in ("max_attempts", "distractor_count", "seed"):
            if key in game:
                try:
                    kwargs[key] = int(game[key])
                except (TypeError, ValueError):
                    logger.warning("Ignoring invalid [game].%s = %r", key, game[key])
        if isinstance(app.get("title"), str):
            kwargs["title"] = app["title"]
        if isinstance(app.get("default_theme"), str):
            kwargs["default_theme"] = app["default_theme"]
        if isinstance(log.get("level"), str):
            kwargs["log_level"] = log["level"]
        if isinstance(log.get("file"), str):
            kwargs["log_file"] = log["file"]

        return cls(**kwargs)

    # ============================================================
    # 内部関数
    # ============================================================

    def _check_game_settings(self) -> None:
        # 範囲外の値は既定値に戻す（画面を落とさない）
        if self.max_attempts < 1:
            logger.warning(
                "max_attempts = %r must be >= 1; using %d",
                self.max_attempts, DEFAULT_MAX_ATTEMPTS,
            )
            self.max_attempts = DEFAULT_MAX_ATTEMPTS
        if not 0 <= self.distractor_count <= MAX_DISTRACTORS:
            clamped = min(max(self.distractor_count, 0), MAX_DISTRACTORS)
            logger.warning(
                "distractor_count = %r must be 0..%d; using %d",
                self.distractor_count, MAX_DISTRACTORS, clamped,
            )
            self.distractor_count = clamped

    def _load_log_level(self) -> str:
        level = os.environ.get("FEED_QUIZ_LOG_LEVEL") or self.log_level
        return str(level).upper()

    @property
    def log_level_value(self) -> int:
        """logging モジュールの数値レベル。不明な名前は INFO。"""
        value = logging.getLevelName(self.log_level)
        return value if isinstance(value, int) else logging.INFO

    @staticmethod
    def read_toml(path: Path) -> Dict[str, Any]:
        if not path.exists():
            return {}
        try:
            return toml.load(str(path))
        except (toml.TomlDecodeError, OSError) as e:
            logger.warning("Could not read %s: %s", path, e)
            return {}


def _table(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = data.get(name)
    return value if isinstance(value, dict) else {}


def _resolve(value) -> Path:
    # 相対パスはリポジトリルート基準
    p = Path(value)
    return p if p.is_absolute() else ROOT_DIR / p
