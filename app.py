"""
app.py
======================

「Feed the Animals」クイズ（Streamlit）エントリーポイント。

特徴:
- 動物を 1 頭表示し、何を食べるかを最大 4 択で答える
- 直前と同じ動物をなるべく避けて出題（AnimalSelector）
- ラウンド数・スコアの表示、次へ / リセット
- ゲームロジックは feed_quiz.engine.RoundEngine、描画は feed_quiz.ui に分離

前提:
- bank/animals.json に動物データが格納されている
- config.toml があれば読み込む（無くても既定値で動く）
  別の設定ファイルは環境変数 FEED_QUIZ_CONFIG で指定できる

起動:
    streamlit run app.py
"""

from __future__ import annotations

import logging
import os
import random
from typing import Any, Dict, Optional

import streamlit as st

from feed_quiz.animal_bank import load_animals
from feed_quiz.config import AppConfig
from feed_quiz.engine import RoundEngine
from feed_quiz.errors import (
    FeedQuizError,
    NoAnimalsAvailable,
    NoValidFoodsForAnimal,
)
from feed_quiz.logging_config import setup_logging
from feed_quiz.models import Session
from feed_quiz.ui import RESET_MESSAGE, render_feed_page

logger = logging.getLogger("feed_quiz.app")


# ----------------------------------------------------------------------
#  アプリ設定読み込み
# ----------------------------------------------------------------------
def load_app_config() -> AppConfig:
    """設定ファイルを一度だけ読み込み、セッションに保持する。"""
    if "app_config" not in st.session_state:
        cfg = AppConfig.load(os.environ.get("FEED_QUIZ_CONFIG", "config.toml"))
        setup_logging(cfg.log_level_value, cfg.log_file)
        st.session_state["app_config"] = cfg
    return st.session_state["app_config"]


# ----------------------------------------------------------------------
#  RoundEngine / Session のラッパー
# ----------------------------------------------------------------------
def get_engine(cfg: AppConfig) -> RoundEngine:
    """RoundEngine をセッションに保持して返す。"""
    if "engine" not in st.session_state:
        try:
            animals = load_animals(cfg.animals_path)
        except (FileNotFoundError, ValueError) as e:
            logger.error("Could not load animals: %s", e)
            animals = []
        st.session_state["engine"] = RoundEngine(
            animals,
            rng=random.Random(cfg.seed),
            max_attempts=cfg.max_attempts,
            distractor_count=cfg.distractor_count,
        )
    return st.session_state["engine"]


def get_session() -> Session:
    if "feed_session" not in st.session_state:
        st.session_state["feed_session"] = Session()
    return st.session_state["feed_session"]


def describe_error(error: FeedQuizError) -> str:
    """コアの例外を画面表示用の文言にする。"""
    if isinstance(error, NoAnimalsAvailable):
        return "No animals found."
    if isinstance(error, NoValidFoodsForAnimal):
        name = getattr(error.animal, "name", "this animal")
        return f"No food data for {name}."
    return str(error)


def run_safely(action) -> Optional[str]:
    """
    エンジン操作を実行し、失敗時はエラーメッセージを返す。
    失敗してもセッションは操作前の状態のまま。
    """
    try:
        action()
    except FeedQuizError as e:
        logger.warning("Engine operation failed: %s", e)
        return describe_error(e)
    return None


# ----------------------------------------------------------------------
#  ページ: ゲーム
# ----------------------------------------------------------------------
def render_game_page(cfg: AppConfig) -> None:
    engine = get_engine(cfg)
    session = get_session()

    # まだラウンドが無ければ最初のラウンドを作る
    if session.current is None and "feed_error" not in st.session_state:
        error = run_safely(lambda: engine.start_round(session))
        if error:
            st.session_state["feed_error"] = error

    error = st.session_state.get("feed_error")
    if error:
        st.error(error)

    snapshot = engine.snapshot(session) if session.current is not None else None
    answered = session.current is not None and session.current.answered

    ui_result = render_feed_page(
        snapshot,
        session.stats,
        answered=answered,
        result=st.session_state.get("feed_result"),
        message=st.session_state.get("feed_message", ""),
        title=cfg.title,
        default_theme=cfg.default_theme,
    )

    if ui_result["selected_food"] is not None and not answered:
        st.session_state["feed_result"] = engine.submit_answer(
            session, ui_result["selected_food"]
        )
        st.session_state["feed_message"] = ""
        st.rerun()

    elif ui_result["clicked_next"]:
        st.session_state["feed_result"] = None
        st.session_state["feed_message"] = ""
        st.session_state["feed_error"] = run_safely(lambda: engine.start_round(session))
        st.rerun()

    elif ui_result["clicked_reset"]:
        st.session_state["feed_result"] = None
        st.session_state["feed_message"] = RESET_MESSAGE
        st.session_state["feed_error"] = run_safely(lambda: engine.reset(session))
        st.rerun()


# ----------------------------------------------------------------------
#  メイン
# ----------------------------------------------------------------------
def page_settings(cfg: AppConfig) -> Dict[str, Any]:
    """st.set_page_config に渡す値。タブのタイトルも設定に従う。"""
    return {
        "page_title": cfg.title,
        "page_icon": "🐄",
        "layout": "centered",
    }


def main() -> None:
    # set_page_config より前に画面要素を出さないこと
    cfg = load_app_config()
    st.set_page_config(**page_settings(cfg))
    render_game_page(cfg)


if __name__ == "__main__":
    main()
