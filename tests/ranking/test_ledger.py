"""
Tests for ranking.ledger.apply_vote

Covers vote monotonicity, re-ranking after a vote, rejections for unknown
ids / direction, and the tie-breaking walkthrough on answers [1:5, 2:5, 3:10].
"""

import copy

import pytest

from kbqa.core.outcome import Reason
from kbqa.ingest.models import Question, VoteDirection
from kbqa.ranking.engine import is_ranked
from kbqa.ranking.ledger import apply_vote


def _ids(question):
    return [a.id for a in question.answers]


def test_seeded_order_is_ranked(tie_corpus):
    assert _ids(tie_corpus[100]) == [3, 1, 2]


def test_tie_breaking_walkthrough(tie_corpus):
    out = apply_vote(tie_corpus, 100, 1, VoteDirection.UP)
    assert out.ok and out.mutated
    q = out.corpus[100]
    assert _ids(q) == [3, 1, 2]
    assert q.find_answer(1).upvotes == 6
    assert q.find_answer(2).upvotes == 5

    out = apply_vote(out.corpus, 100, 2, VoteDirection.UP)
    q = out.corpus[100]
    assert _ids(q) == [3, 1, 2]
    assert q.find_answer(1).upvotes == q.find_answer(2).upvotes == 6


@pytest.mark.parametrize("direction, field, other", [
    (VoteDirection.UP, "upvotes", "downvotes"),
    (VoteDirection.DOWN, "downvotes", "upvotes"),
    ("upvote", "upvotes", "downvotes"),
    ("downvote", "downvotes", "upvotes"),
])
def test_vote_increments_exactly_one_counter(seed_corpus, direction, field, other):
    before = seed_corpus[4].find_answer(9)
    out = apply_vote(seed_corpus, 4, 9, direction)
    after = out.corpus[4].find_answer(9)
    assert getattr(after, field) == getattr(before, field) + 1
    assert getattr(after, other) == getattr(before, other)


def test_vote_leaves_other_answers_and_questions_alone(seed_corpus):
    out = apply_vote(seed_corpus, 1, 2, VoteDirection.DOWN)
    for qid, q in seed_corpus.items():
        if qid != 1:
            assert out.corpus[qid] == q
    for a in seed_corpus[1].answers:
        if a.id != 2:
            assert out.corpus[1].find_answer(a.id) == a


def test_upvote_promotes_answer(seed_corpus):
    # question 2: [4:25, 5:18]
    corpus = seed_corpus
    for _ in range(8):
        corpus = apply_vote(corpus, 2, 5, VoteDirection.UP).corpus
    assert _ids(corpus[2]) == [5, 4]
    assert is_ranked(corpus[2].answers)


def test_downvotes_never_reorder(seed_corpus):
    corpus = seed_corpus
    for _ in range(100):
        corpus = apply_vote(corpus, 3, 6, VoteDirection.DOWN).corpus
    assert _ids(corpus[3]) == [6, 7]


def test_input_corpus_not_mutated(seed_corpus):
    snapshot = copy.deepcopy(seed_corpus)
    apply_vote(seed_corpus, 1, 1, VoteDirection.UP)
    assert seed_corpus == snapshot


def test_unknown_question_is_rejected_noop(seed_corpus):
    snapshot = copy.deepcopy(seed_corpus)
    out = apply_vote(seed_corpus, 999, 1, VoteDirection.UP)
    assert not out.mutated
    assert out.reason is Reason.QUESTION_NOT_FOUND
    assert out.corpus == snapshot


def test_unknown_answer_is_rejected_noop(seed_corpus):
    # answer 4 exists, but on question 2
    out = apply_vote(seed_corpus, 1, 4, VoteDirection.UP)
    assert out.reason is Reason.ANSWER_NOT_FOUND
    assert out.corpus == seed_corpus


def test_unknown_direction_is_rejected(seed_corpus):
    out = apply_vote(seed_corpus, 1, 1, "sideways")
    assert out.reason is Reason.INVALID_DIRECTION
    assert not out.mutated


def test_vote_replaces_only_the_found_answer(answer_factory):
    # hand-built corpus, skipping the seed-time id check
    q = Question(id=1, title="t", body="b", author="a", answers=(
        answer_factory(7, 3, body="first"),
        answer_factory(7, 1, body="second"),
    ))
    out = apply_vote({1: q}, 1, 7, VoteDirection.UP)
    answers = out.corpus[1].answers
    assert [a.body for a in answers] == ["first", "second"]
    assert [a.upvotes for a in answers] == [4, 1]
