from __future__ import annotations
from typing import Iterable, Sequence, Tuple

from kbqa.ingest.models import Answer


def rank(answers: Iterable[Answer]) -> Tuple[Answer, ...]:
    """Order answers by descending upvotes. Stable, so ties keep their input order.

    Downvotes never affect the order.
    """
    return tuple(sorted(answers, key=lambda a: a.upvotes, reverse=True))


def is_ranked(answers: Sequence[Answer]) -> bool:
    return all(answers[i].upvotes >= answers[i + 1].upvotes for i in range(len(answers) - 1))
