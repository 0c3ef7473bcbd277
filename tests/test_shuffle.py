import random
from collections import Counter

from document import parse_quiz
from shuffle import build_option_orders, shuffle_options


def test_shuffle_is_a_permutation() -> None:
    rng = random.Random(7)
    for size in range(0, 8):
        options = [f"option {index}" for index in range(size)] + ["dup", "dup"]
        shuffled = shuffle_options(options, rng)
        assert len(shuffled) == len(options)
        assert Counter(shuffled) == Counter(options)


def test_shuffle_does_not_modify_input() -> None:
    options = ["A", "B", "C", "D"]
    shuffle_options(options, random.Random(1))
    assert options == ["A", "B", "C", "D"]


def test_shuffle_is_reproducible_with_seed() -> None:
    options = list("ABCDEFG")
    assert shuffle_options(options, random.Random(3)) == shuffle_options(
        options, random.Random(3)
    )


def test_shuffle_reaches_every_ordering() -> None:
    rng = random.Random(11)
    seen = {tuple(shuffle_options(["A", "B", "C"], rng)) for _ in range(600)}
    assert len(seen) == 6


def test_only_multiple_choice_questions_with_options_are_shuffled(quiz_document) -> None:
    quiz_document["quiz"].append(
        {"id": 6, "type": "Multiple Choice", "question": "No options here", "answer": ["x"]}
    )
    quiz_document["quiz"].append(
        {
            "id": 7,
            "type": "Short-Answer Questions",
            "question": "Options on a non-choice question",
            "options": ["a", "b"],
            "answer": "a",
        }
    )
    orders = build_option_orders(parse_quiz(quiz_document), random.Random(5))
    assert set(orders) == {1, 2}
    assert sorted(orders[1]) == sorted(["Berlin", "Paris", "Madrid", "Rome"])
