"""
Result value returned by every mutating operation.

Rejections are values, not exceptions: callers check ``ok`` / ``mutated``
and always get a usable corpus back.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from kbqa.ingest.models import Corpus


class Reason(str, Enum):
    QUESTION_NOT_FOUND = "question_not_found"
    ANSWER_NOT_FOUND = "answer_not_found"
    EMPTY_BODY = "empty_body"
    INVALID_DIRECTION = "invalid_direction"
    NO_SELECTION = "no_selection"
    UNSUPPORTED_COMMAND = "unsupported_command"


@dataclass(frozen=True)
class Outcome:
    corpus: Corpus
    mutated: bool
    reason: Optional[Reason] = None

    @property
    def ok(self) -> bool:
        return self.reason is None

    @classmethod
    def applied(cls, corpus: Corpus) -> "Outcome":
        return cls(corpus=corpus, mutated=True)

    @classmethod
    def rejected(cls, corpus: Corpus, reason: Reason) -> "Outcome":
        return cls(corpus=corpus, mutated=False, reason=reason)
