from __future__ import annotations
import logging
from datetime import datetime, timezone
from typing import Optional

from kbqa.core.outcome import Outcome, Reason
from kbqa.ingest.models import Answer, Corpus

logger = logging.getLogger(__name__)


def next_answer_id(corpus: Corpus) -> int:
    """One past the largest answer id anywhere in the corpus."""
    return max((a.id for q in corpus.values() for a in q.answers), default=0) + 1


def submit_answer(
    corpus: Corpus,
    question_id: int,
    body: str,
    author: str,
    *,
    now: Optional[datetime] = None,
) -> Outcome:
    """
    Append a new zero-vote answer at the tail of one question's answers.

    The tail is already its rank position (0 upvotes, stable order), so no
    re-sort happens here. Body is stored as given; whitespace-only bodies
    are rejected.
    """
    question = corpus.get(question_id)
    if question is None:
        logger.info("answer rejected: question %s not found", question_id)
        return Outcome.rejected(corpus, Reason.QUESTION_NOT_FOUND)
    if not (body or "").strip():
        logger.info("answer rejected: empty body for question %s", question_id)
        return Outcome.rejected(corpus, Reason.EMPTY_BODY)

    answer = Answer(
        id=next_answer_id(corpus),
        body=body,
        author=author,
        upvotes=0,
        downvotes=0,
        created_at=now or datetime.now(timezone.utc),
    )
    new_corpus = dict(corpus)
    new_corpus[question_id] = question.model_copy(update={"answers": question.answers + (answer,)})
    logger.debug("answer %s added to question %s by %s", answer.id, question_id, author)
    return Outcome.applied(new_corpus)
