import random

import pytest

from feed_quiz.diet import parse_diet
from feed_quiz.engine import RoundEngine
from feed_quiz.errors import InvalidState, NoAnimalsAvailable, NoValidFoodsForAnimal
from feed_quiz.models import Animal, Phase, Session


def test_single_lion_round(scripted, lion):
    engine = RoundEngine([lion], rng=scripted())
    session = Session()

    snapshot = engine.start_round(session)

    assert snapshot.animal_name == "Lion"
    assert snapshot.animal_image == "lion.png"
    assert snapshot.options == ("Meat",)
    assert session.current.correct_food == "Meat"
    assert session.phase == Phase.ROUND_ACTIVE
    assert session.round == 1

    result = engine.submit_answer(session, "Meat")

    assert result.is_correct is True
    assert result.correct_food == "Meat"
    assert result.animal_name == "Lion"
    assert session.score == 1
    assert session.current.answered is True
    assert session.phase == Phase.ROUND_ANSWERED


def test_empty_dataset_leaves_session_untouched(scripted):
    engine = RoundEngine([], rng=scripted())
    session = Session()

    with pytest.raises(NoAnimalsAvailable):
        engine.start_round(session)

    assert session.stats.round == 0
    assert session.stats.score == 0
    assert session.phase == Phase.IDLE
    assert session.current is None


def test_failed_start_keeps_previous_round(scripted, lion):
    engine = RoundEngine([lion], rng=scripted())
    session = Session()
    engine.start_round(session)
    engine.submit_answer(session, "Meat")
    previous = session.current

    engine.animals = []
    with pytest.raises(NoAnimalsAvailable):
        engine.start_round(session)

    assert session.round == 1
    assert session.score == 1
    assert session.phase == Phase.ROUND_ANSWERED
    assert session.current is previous
    assert session.last_animal_id == lion.id


def test_animal_without_diet_raises_and_keeps_state(scripted):
    ghost = Animal(id="ghost", name="Ghost", diet=" , ")
    engine = RoundEngine([ghost], rng=scripted())
    session = Session()

    with pytest.raises(NoValidFoodsForAnimal) as excinfo:
        engine.start_round(session)

    assert excinfo.value.animal is ghost
    assert session.round == 0
    assert session.last_animal_id is None
    assert session.phase == Phase.IDLE


def test_wrong_answer_counts_round_but_not_score(scripted, farm):
    engine = RoundEngine(farm, rng=scripted())
    session = Session()
    engine.start_round(session)
    wrong = next(f for f in session.current.options if f != session.current.correct_food)

    result = engine.submit_answer(session, wrong)

    assert result.is_correct is False
    assert result.correct_food == session.current.correct_food
    assert session.stats.round == 1
    assert session.stats.score == 0


def test_unknown_food_is_just_wrong(scripted, lion):
    engine = RoundEngine([lion], rng=scripted())
    session = Session()
    engine.start_round(session)

    assert engine.submit_answer(session, "Pizza").is_correct is False
    assert session.score == 0


def test_submit_before_start_is_invalid(scripted, lion):
    engine = RoundEngine([lion], rng=scripted())
    session = Session()

    with pytest.raises(InvalidState) as excinfo:
        engine.submit_answer(session, "Meat")

    assert excinfo.value.operation == "submit_answer"
    assert excinfo.value.phase == Phase.IDLE


def test_second_submit_is_invalid_and_does_not_score_twice(scripted, lion):
    engine = RoundEngine([lion], rng=scripted())
    session = Session()
    engine.start_round(session)
    engine.submit_answer(session, "Meat")

    with pytest.raises(InvalidState):
        engine.submit_answer(session, "Meat")

    assert session.score == 1


def test_start_while_round_active_is_invalid(scripted, lion):
    engine = RoundEngine([lion], rng=scripted())
    session = Session()
    engine.start_round(session)

    with pytest.raises(InvalidState):
        engine.start_round(session)

    assert session.round == 1


def test_snapshot_without_round_is_invalid(scripted, lion):
    engine = RoundEngine([lion], rng=scripted())
    with pytest.raises(InvalidState):
        engine.snapshot(Session())


def test_reset_starts_fresh_round(scripted, lion):
    engine = RoundEngine([lion], rng=scripted())
    session = Session()
    for _ in range(3):
        engine.start_round(session)
        engine.submit_answer(session, "Meat")
    assert session.stats.score == 3

    snapshot = engine.reset(session)

    assert snapshot.options == ("Meat",)
    assert session.score == 0
    assert session.round == 1
    assert session.phase == Phase.ROUND_ACTIVE


def test_reset_is_allowed_mid_round(scripted, lion):
    engine = RoundEngine([lion], rng=scripted())
    session = Session()
    engine.start_round(session)

    engine.reset(session)

    assert session.round == 1
    assert session.phase == Phase.ROUND_ACTIVE


def test_reset_with_empty_dataset_leaves_cleared_session(scripted, lion):
    engine = RoundEngine([lion], rng=scripted())
    session = Session()
    engine.start_round(session)
    engine.submit_answer(session, "Meat")

    engine.animals = []
    with pytest.raises(NoAnimalsAvailable):
        engine.reset(session)

    assert session.round == 0
    assert session.score == 0
    assert session.last_animal_id is None
    assert session.phase == Phase.IDLE


def test_session_counters_are_read_only():
    session = Session()
    with pytest.raises(AttributeError):
        session.round = 5
    with pytest.raises(AttributeError):
        session.score = 5


def test_food_universe_follows_dataset_changes(scripted, lion):
    engine = RoundEngine([lion], rng=scripted())
    session = Session()
    engine.start_round(session)
    engine.submit_answer(session, "Meat")

    engine.animals = [lion, Animal(id=2, name="Zebra", diet="grass")]
    snapshot = engine.start_round(session)

    # every draw hits the lion again, so the fallback repeats it
    assert snapshot.animal_name == "Lion"
    assert snapshot.options == ("Meat", "Grass")


def test_sessions_sharing_an_engine_are_independent(scripted, lion):
    engine = RoundEngine([lion], rng=scripted())
    first, second = Session(), Session()

    engine.start_round(first)
    engine.submit_answer(first, "Meat")
    engine.start_round(second)

    assert first.stats.score == 1
    assert second.stats.score == 0
    assert second.phase == Phase.ROUND_ACTIVE


def test_no_immediate_repeats_over_many_rounds():
    animals = [
        Animal(id=i, name=f"Animal {i}", diet=f"food{i}, shared")
        for i in range(10)
    ]
    engine = RoundEngine(animals, rng=random.Random(7))
    session = Session()

    previous = None
    for _ in range(200):
        engine.start_round(session)
        assert session.current.animal.id != previous
        previous = session.current.animal.id
        engine.submit_answer(session, session.current.correct_food)


def test_round_properties_over_random_play():
    animals = [
        Animal(id="cow", name="Cow", diet="grass, hay, silage"),
        Animal(id="hen", name="Hen", diet="seeds, worms, corn"),
        Animal(id="pig", name="Pig", diet="corn, vegetables"),
        Animal(id="rabbit", name="Rabbit", diet="hay, pellets, vegetables"),
        Animal(id="duck", name="Duck", diet="seeds"),
    ]
    rng = random.Random(99)
    engine = RoundEngine(animals, rng=rng)
    session = Session()

    last_score = 0
    correct_answers = 0
    for n in range(1, 151):
        snapshot = engine.start_round(session)
        state = session.current
        diet = parse_diet(state.animal.diet)

        assert len(snapshot.options) <= 4
        assert len(set(snapshot.options)) == len(snapshot.options)
        assert snapshot.options.count(state.correct_food) == 1
        assert all(f not in diet for f in snapshot.options if f != state.correct_food)

        choice = rng.choice(snapshot.options)
        result = engine.submit_answer(session, choice)
        if result.is_correct:
            correct_answers += 1

        assert session.round == n
        assert session.score >= last_score
        assert session.score == correct_answers
        last_score = session.score
