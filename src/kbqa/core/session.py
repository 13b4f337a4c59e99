"""
Q&A session: the one owner of a corpus, its current selection and the
answer draft.

State machine:
    IDLE      -- search hit         --> SELECTED
    SELECTED  -- search miss        --> IDLE
    SELECTED  -- vote / submission  --> SELECTED (selection re-read from corpus)

Only the selected question's id is stored. ``selected`` looks it up in the
current corpus on every read, so the view can never go stale after a vote
or a new answer.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional, Union

from kbqa.bank.submission import submit_answer as _submit_answer
from kbqa.core.outcome import Outcome, Reason
from kbqa.ingest.models import Corpus, Question, VoteDirection
from kbqa.ranking.ledger import apply_vote
from kbqa.retrieval.matcher import match
from kbqa.utils.config import settings

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    IDLE = "idle"
    SELECTED = "selected"


class QASession:
    def __init__(self, corpus: Corpus, author: Optional[str] = None):
        self._corpus: Corpus = dict(corpus)
        self.author = author or settings.AUTHOR
        self.query: str = ""
        self.draft: str = ""
        self._selected_id: Optional[int] = None

    @property
    def corpus(self) -> Corpus:
        return self._corpus

    @property
    def selected(self) -> Optional[Question]:
        if self._selected_id is None:
            return None
        return self._corpus.get(self._selected_id)

    @property
    def state(self) -> SessionState:
        return SessionState.SELECTED if self.selected is not None else SessionState.IDLE

    def questions(self) -> List[Question]:
        """All questions in default display order."""
        return list(self._corpus.values())

    def search(self, query: str) -> Optional[Question]:
        self.query = query
        found = match(self._corpus, query)
        self._selected_id = found.id if found is not None else None
        logger.debug("search %r -> %s", query, self._selected_id)
        return found

    def vote(
        self,
        question_id: int,
        answer_id: int,
        direction: Union[VoteDirection, str],
    ) -> Outcome:
        outcome = apply_vote(self._corpus, question_id, answer_id, direction)
        self._corpus = outcome.corpus
        return outcome

    def submit_answer(self, body: Optional[str] = None) -> Outcome:
        """Submit ``body`` (default: the draft) against the selected question.

        The draft is cleared only when the answer was actually added.
        """
        if self._selected_id is None:
            logger.info("answer rejected: no question selected")
            return Outcome.rejected(self._corpus, Reason.NO_SELECTION)

        text = self.draft if body is None else body
        outcome = _submit_answer(self._corpus, self._selected_id, text, self.author)
        self._corpus = outcome.corpus
        if outcome.mutated:
            self.draft = ""
        return outcome
