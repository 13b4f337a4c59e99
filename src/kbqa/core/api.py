"""
Operations exposed to the presentation layer.

None of these raise for unknown ids or bad input; mutating calls return an
Outcome whose ``corpus`` is the new source of truth.
"""
from __future__ import annotations
from typing import Optional, Union

from kbqa.bank.submission import submit_answer as _submit
from kbqa.core.outcome import Outcome
from kbqa.ingest.models import Corpus, Question, VoteDirection
from kbqa.ranking.ledger import apply_vote
from kbqa.retrieval.matcher import match


def search(corpus: Corpus, query: str) -> Optional[Question]:
    return match(corpus, query)


def vote(
    corpus: Corpus,
    question_id: int,
    answer_id: int,
    direction: Union[VoteDirection, str],
) -> Outcome:
    return apply_vote(corpus, question_id, answer_id, direction)


def submit_answer(corpus: Corpus, question_id: int, body: str, author: str) -> Outcome:
    return _submit(corpus, question_id, body, author)
