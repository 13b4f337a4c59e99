from __future__ import annotations
import logging
from typing import Union

from kbqa.core.outcome import Outcome, Reason
from kbqa.ingest.models import Corpus, VoteDirection
from kbqa.ranking.engine import rank

logger = logging.getLogger(__name__)


def apply_vote(
    corpus: Corpus,
    question_id: int,
    answer_id: int,
    direction: Union[VoteDirection, str],
) -> Outcome:
    """
    Add one vote to a single answer and re-rank that question's answers.

    Returns a new corpus on success; the input corpus is never mutated and
    every other question is carried over by reference. Unknown ids or an
    unknown direction give a rejected Outcome holding the input corpus.
    """
    try:
        direction = VoteDirection(direction)
    except ValueError:
        logger.info("vote rejected: unknown direction %r", direction)
        return Outcome.rejected(corpus, Reason.INVALID_DIRECTION)

    question = corpus.get(question_id)
    if question is None:
        logger.info("vote rejected: question %s not found", question_id)
        return Outcome.rejected(corpus, Reason.QUESTION_NOT_FOUND)

    target = question.find_answer(answer_id)
    if target is None:
        logger.info("vote rejected: answer %s not found on question %s", answer_id, question_id)
        return Outcome.rejected(corpus, Reason.ANSWER_NOT_FOUND)

    if direction is VoteDirection.UP:
        voted = target.model_copy(update={"upvotes": target.upvotes + 1})
    else:
        voted = target.model_copy(update={"downvotes": target.downvotes + 1})

    answers = [voted if a is target else a for a in question.answers]
    updated = question.model_copy(update={"answers": rank(answers)})

    new_corpus = dict(corpus)
    new_corpus[question_id] = updated
    logger.debug("%s on answer %s (question %s)", direction.value, answer_id, question_id)
    return Outcome.applied(new_corpus)
