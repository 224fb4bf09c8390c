import pytest

from feed_quiz.models import Animal


class ScriptedRandom:
    """
    決定的な乱数源。randrange は values を順番に返し（n で剰余）、
    使い切ったら 0 を返す。shuffle は reverse=True のとき反転、それ以外は何もしない。
    """

    def __init__(self, values=None, reverse=False):
        self.values = list(values or [])
        self.reverse = reverse
        self.randrange_calls = 0
        self.shuffle_calls = 0

    def randrange(self, n):
        self.randrange_calls += 1
        value = self.values.pop(0) if self.values else 0
        return value % n

    def shuffle(self, items):
        self.shuffle_calls += 1
        if self.reverse:
            items.reverse()


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def farm():
    return [
        Animal(id="cow", name="Cow", image="cow.png", diet="grass, hay"),
        Animal(id="chicken", name="Chicken", image="chicken.png", diet="seeds, worms"),
        Animal(id="pig", name="Pig", image="pig.png", diet="corn, vegetables"),
        Animal(id="rabbit", name="Rabbit", image="rabbit.png", diet="hay, pellets"),
    ]


@pytest.fixture
def lion():
    return Animal(id=1, name="Lion", image="lion.png", diet="Meat")
