from __future__ import annotations

import random
from typing import Dict, List, Sequence

from models import MULTIPLE_CHOICE, Quiz


def shuffle_options(
    options: Sequence[str],
    rng: random.Random | None = None,
) -> List[str]:
    """Return a uniformly shuffled copy of ``options`` (Fisher-Yates)."""
    rng = rng or random
    shuffled = list(options)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randrange(i + 1)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def build_option_orders(
    quiz: Quiz,
    rng: random.Random | None = None,
) -> Dict[int, List[str]]:
    """Shuffle the options of every multiple choice question, keyed by question id."""
    orders: Dict[int, List[str]] = {}
    for question in quiz:
        if question.type == MULTIPLE_CHOICE and question.options is not None:
            orders[question.id] = shuffle_options(question.options, rng)
    return orders
