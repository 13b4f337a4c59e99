from __future__ import annotations
from datetime import datetime
from enum import Enum
from typing import Dict, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field


class VoteDirection(str, Enum):
    UP = "upvote"
    DOWN = "downvote"


class Answer(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    body: str
    author: str
    upvotes: int = Field(0, ge=0)
    downvotes: int = Field(0, ge=0)
    is_accepted: bool = False
    created_at: Optional[datetime] = None   # only set for answers submitted at runtime


class Question(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="stable id, unique within the corpus")
    title: str
    body: str
    author: str
    upvotes: int = Field(0, ge=0)
    downvotes: int = Field(0, ge=0)
    tags: Tuple[str, ...] = ()
    is_resolved: bool = False
    # kept in rank order: descending upvotes, ties in prior order
    answers: Tuple[Answer, ...] = ()

    def find_answer(self, answer_id: int) -> Optional[Answer]:
        for a in self.answers:
            if a.id == answer_id:
                return a
        return None


# question id -> Question; dict order is corpus order
Corpus = Dict[int, Question]
