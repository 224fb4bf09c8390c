"""
animal_bank.py
===========================

動物データ（JSON）を読み込み、Animal のリストを返すモジュール。

受け付ける形式:
- [ {...}, {...} ]                 レコードの配列
- { "animals": [ {...}, ... ] }     animals キーの下に配列

1 レコードの例:
    {"id": 1, "name": "Cow", "image": "assets/animals/cow.png", "diet": "grass, hay"}

imageRef / dietRaw というキー名も受け付ける。
壊れたレコード（id や name がない等）はスキップし、警告ログを出す。
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from .models import Animal

logger = logging.getLogger(__name__)


# ----------------------------------------------------------------------
#  1 レコード → Animal
# ----------------------------------------------------------------------
def animal_from_dict(data: Dict[str, Any]) -> Animal:
    """
    dict から Animal を作る。必須キーが欠けていれば ValueError。
    """
    if not isinstance(data, dict):
        raise ValueError(f"animal record must be an object, got {type(data).__name__}")

    animal_id = data.get("id")
    name = data.get("name")
    if animal_id is None or animal_id == "":
        raise ValueError("animal record has no id")
    if not isinstance(name, str) or not name.strip():
        raise ValueError(f"animal {animal_id!r} has no name")

    image = data.get("image", data.get("imageRef", ""))
    diet = data.get("diet", data.get("dietRaw", ""))

    return Animal(
        id=animal_id,
        name=name.strip(),
        image=image if isinstance(image, str) else "",
        diet=diet if isinstance(diet, str) else "",
    )


# ----------------------------------------------------------------------
#  ファイル読み込み
# ----------------------------------------------------------------------
def parse_animals(payload: Any) -> List[Animal]:
    """JSON をデコードした値から Animal のリストを作る（壊れた要素は除外）。"""
    if isinstance(payload, dict):
        payload = payload.get("animals", [])
    if not isinstance(payload, list):
        raise ValueError("animal data must be a list or an object with 'animals'")

    animals: List[Animal] = []
    for pos, record in enumerate(payload):
        try:
            animals.append(animal_from_dict(record))
        except ValueError as e:
            logger.warning("Skipping animal record #%d: %s", pos, e)
    return animals


def load_animals(path: Union[str, Path]) -> List[Animal]:
    """
    animals.json を読み込む。

    ファイルが無ければ FileNotFoundError。
    空のデータセットはここではエラーにしない（出題時に NoAnimalsAvailable）。
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Animal data not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        payload = json.load(f)

    animals = parse_animals(payload)
    logger.info("Loaded %d animals from %s", len(animals), path)
    return animals
