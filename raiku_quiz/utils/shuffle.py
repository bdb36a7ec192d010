# shuffle.py
import random
from typing import MutableSequence, TypeVar

T = TypeVar("T")

def fisher_yates_shuffle(items: MutableSequence[T], rng: random.Random | None = None) -> MutableSequence[T]:
    """
    Uniform in-place permutation (Fisher-Yates / Knuth).
    Returns the same sequence so calls can be chained.
    """
    rng = rng or random
    for i in range(len(items) - 1, 0, -1):
        j = rng.randint(0, i)
        items[i], items[j] = items[j], items[i]
    return items
