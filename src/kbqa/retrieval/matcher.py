"""
Query Matcher: picks at most one question for a free-text query.

Policy is first match wins. Questions are scanned in corpus order and the
first one whose title or body contains the query (case-insensitive) is
returned. There is no scoring; an empty query therefore matches the first
question of a non-empty corpus.
"""
from __future__ import annotations
from typing import Optional

from kbqa.ingest.models import Corpus, Question


def normalize(text: str) -> str:
    return (text or "").lower()


def matches(question: Question, query: str) -> bool:
    q = normalize(query)
    return q in normalize(question.title) or q in normalize(question.body)


def match(corpus: Corpus, query: str) -> Optional[Question]:
    for question in corpus.values():
        if matches(question, query):
            return question
    return None
