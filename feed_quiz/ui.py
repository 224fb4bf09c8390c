"""
ui.py
======================

Streamlit ベースの UI コンポーネントをまとめたモジュール。

責務:
- スマートフォン向けのレイアウトとスタイル（テーマ切替つき）
- 動物カード・食べ物の選択肢・結果メッセージの描画
- ナビゲーションボタン（次へ / リセット）
- 食べ物名 → 画像パスの対応表

ここでは「見た目」と「ユーザー操作の入力」だけを扱い、
出題・判定のロジックは RoundEngine（app.py から呼ぶ）に任せる。

戻り値として「何が押されたか」「どの食べ物が選ばれたか」を返す。
"""

from __future__ import annotations

import html
from pathlib import Path
from typing import Any, Dict, Optional

import streamlit as st

from .models import AnswerResult, RoundSnapshot, SessionStats

# ----------------------------------------------------------------------
#  食べ物画像（表示名 → assets/food 内のパス）
# ----------------------------------------------------------------------

FOOD_IMAGES: Dict[str, str] = {
    "Grass": "assets/food/grass.png",
    "Hay": "assets/food/hay.png",
    "Silage": "assets/food/silage.png",
    "Grains": "assets/food/grains.png",
    "Seeds": "assets/food/seeds.png",
    "Worms": "assets/food/worms.png",
    "Pellets": "assets/food/pellets.png",
    "Corn": "assets/food/corn.png",
    "Vegetables": "assets/food/vegetables.png",
}

DEFAULT_FOOD = "Grass"


def food_image_for(food: str) -> str:
    """食べ物の画像パス。表にない名前は Grass の画像で代用する。"""
    return FOOD_IMAGES.get(food, FOOD_IMAGES[DEFAULT_FOOD])


# ----------------------------------------------------------------------
#  メッセージ
# ----------------------------------------------------------------------

RESET_MESSAGE = "Game reset. Let's play again!"


def result_message(result: Optional[AnswerResult]) -> str:
    if result is None:
        return ""
    if result.is_correct:
        return f"Correct! {result.animal_name} eats {result.correct_food}."
    return f"Oops! {result.animal_name} prefers {result.correct_food}."


def stats_label(stats: SessionStats) -> str:
    return f"Round: {stats.round} · Score: {stats.score}"


# ----------------------------------------------------------------------
#  テーマ定義
# ----------------------------------------------------------------------

THEMES: Dict[str, Dict[str, str]] = {
    "light": {
        "bg": "#fffdf7",
        "text": "#2b2118",
        "surface": "#f4efe3",
        "border": "#d8cfbd",
        "primary": "#2e8b57",
        "correct": "#34c759",
        "incorrect": "#ff3b30",
    },
    "dark": {
        "bg": "#121212",
        "text": "#f5f5f7",
        "surface": "#1f1f1f",
        "border": "#3a3a3c",
        "primary": "#4cc38a",
        "correct": "#30d158",
        "incorrect": "#ff453a",
    },
}


def _generate_css(theme: Dict[str, str]) -> str:
    """テーマに応じたグローバル CSS を生成する。"""

    return f"""
    <style>
    html, body {{
        background: {theme['bg']};
        color: {theme['text']};
        -webkit-text-size-adjust: 100%;
        touch-action: manipulation;
    }}

    .feed-header {{
        display: flex;
        justify-content: space-between;
        align-items: center;
        gap: 0.5rem;
        margin-bottom: 0.5rem;
    }}

    .feed-title {{
        font-weight: 600;
        font-size: 1.3rem;
    }}

    .feed-stats {{
        padding: 0.1rem 0.6rem;
        border-radius: 999px;
        border: 1px solid {theme['border']};
        font-size: 0.85rem;
        white-space: nowrap;
    }}

    .feed-animal-name {{
        text-align: center;
        font-size: 1.4rem;
        font-weight: 600;
        margin: 0.4rem 0 0.1rem 0;
    }}

    .feed-prompt {{
        text-align: center;
        color: {theme['text']}aa;
        margin-bottom: 0.75rem;
    }}

    .feed-result {{
        padding: 0.8rem;
        border-radius: 10px;
        background: {theme['surface']};
        border: 1px solid {theme['border']};
        text-align: center;
        font-size: 1.05rem;
        margin: 0.5rem 0;
    }}

    .feed-result-correct {{
        border-color: {theme['correct']};
        background: {theme['correct']}22;
    }}

    .feed-result-incorrect {{
        border-color: {theme['incorrect']};
        background: {theme['incorrect']}22;
    }}

    .feed-safe-bottom {{
        height: 80px;
    }}
    </style>
    """


def _ensure_theme(default: str = "light") -> str:
    """セッションに theme キーを用意し、現在のテーマキーを返す。"""
    theme_key = st.session_state.get("theme", default)
    if theme_key not in THEMES:
        theme_key = "light"
    st.session_state["theme"] = theme_key
    return theme_key


def _render_theme_selector(theme_key: str) -> str:
    options = list(THEMES.keys())
    idx = options.index(theme_key) if theme_key in options else 0
    selected = st.radio(
        "Theme",
        options,
        index=idx,
        horizontal=True,
        label_visibility="collapsed",
        format_func=lambda k: k.capitalize(),
    )
    st.session_state["theme"] = selected
    return selected


def _render_image(path: str, caption: Optional[str] = None) -> None:
    # 画像ファイルが無い環境でも画面が壊れないようにする
    if path and (path.startswith(("http://", "https://")) or Path(path).exists()):
        st.image(path, caption=caption, use_container_width=True)


# ----------------------------------------------------------------------
#  公開 API: ゲーム画面の描画
# ----------------------------------------------------------------------
def render_feed_page(
    snapshot: Optional[RoundSnapshot],
    stats: SessionStats,
    *,
    answered: bool = False,
    result: Optional[AnswerResult] = None,
    message: str = "",
    title: str = "Feed the Animals",
    default_theme: str = "light",
) -> Dict[str, Any]:
    """
    ゲーム画面全体を描画し、ユーザー操作の結果を返す。

    引数:
        snapshot:
            RoundEngine.start_round() / snapshot() の戻り値。
            None の場合は動物カードと選択肢を出さない（データ無しなど）。
        stats:
            Session.stats
        answered:
            回答済みなら True。選択肢ボタンを無効化し「次へ」を有効化する。
        result:
            直前の回答結果（あれば結果メッセージを表示）。
        message:
            result が無いときに表示する文言（リセット直後など）。

    戻り値:
        {
          "selected_food": Optional[str],   # 新たに押された食べ物 (なければ None)
          "clicked_next": bool,
          "clicked_reset": bool,
          "theme": str,
        }
    """
    theme_key = _ensure_theme(default_theme)
    theme = THEMES[theme_key]
    st.markdown(_generate_css(theme), unsafe_allow_html=True)

    selected_food: Optional[str] = None
    clicked_next = False
    clicked_reset = False

    # ----------------------------------------
    # ヘッダー
    # ----------------------------------------
    col_left, col_right = st.columns([2.2, 1.8])
    with col_left:
        st.markdown(
            "<div class='feed-header'>"
            f"<div class='feed-title'>{html.escape(title)}</div>"
            f"<div class='feed-stats'>{stats_label(stats)}</div>"
            "</div>",
            unsafe_allow_html=True,
        )
    with col_right:
        _render_theme_selector(theme_key)

    # ----------------------------------------
    # 動物カード + 選択肢
    # ----------------------------------------
    if snapshot is not None:
        _render_image(snapshot.animal_image)
        st.markdown(
            f"<div class='feed-animal-name'>{html.escape(snapshot.animal_name)}</div>"
            "<div class='feed-prompt'>What does this animal eat?</div>",
            unsafe_allow_html=True,
        )

        cols = st.columns(2)
        for idx, food in enumerate(snapshot.options):
            with cols[idx % 2]:
                _render_image(food_image_for(food))
                if st.button(
                    food,
                    key=f"feed_option_{idx}_{food}",
                    disabled=answered,
                    use_container_width=True,
                ):
                    selected_food = food

    # ----------------------------------------
    # 結果メッセージ
    # ----------------------------------------
    text = result_message(result) or message
    if text:
        extra = ""
        if result is not None:
            extra = " feed-result-correct" if result.is_correct else " feed-result-incorrect"
        st.markdown(
            f"<div class='feed-result{extra}' role='status'>{html.escape(text)}</div>",
            unsafe_allow_html=True,
        )

    # ----------------------------------------
    # ナビゲーション
    # ----------------------------------------
    col_next, col_reset = st.columns(2)
    with col_next:
        if st.button(
            "Next ▶",
            key="feed_next",
            disabled=not answered,
            type="primary",
            use_container_width=True,
        ):
            clicked_next = True
    with col_reset:
        if st.button("Reset", key="feed_reset", use_container_width=True):
            clicked_reset = True

    st.markdown("<div class='feed-safe-bottom'></div>", unsafe_allow_html=True)

    return {
        "selected_food": selected_food,
        "clicked_next": clicked_next,
        "clicked_reset": clicked_reset,
        "theme": st.session_state.get("theme", theme_key),
    }
