"""
Tests for ingest.seed

- build_corpus(): ranking at seed time, duplicate ids
- load_corpus(): JSON list / {"questions": [...]} files, built-in fallback
"""

import json

import pytest
from pydantic import ValidationError

from kbqa.bank.question_bank import SEED_QUESTIONS
from kbqa.ingest.seed import build_corpus, default_corpus, load_corpus
from kbqa.ranking.engine import is_ranked


def _seed_dict(qid, answers):
    return {"id": qid, "title": f"Q{qid}", "body": "b", "author": "a", "answers": answers}


def test_default_corpus_matches_builtin_seed():
    corpus = default_corpus()
    assert list(corpus) == [q["id"] for q in SEED_QUESTIONS]
    assert all(is_ranked(q.answers) for q in corpus.values())


def test_build_corpus_ranks_unsorted_answers():
    corpus = build_corpus([_seed_dict(1, [
        {"id": 1, "body": "x", "author": "a", "upvotes": 1},
        {"id": 2, "body": "y", "author": "a", "upvotes": 9},
    ])])
    assert [a.id for a in corpus[1].answers] == [2, 1]


def test_build_corpus_rejects_duplicate_ids():
    with pytest.raises(ValueError, match="duplicate question id"):
        build_corpus([_seed_dict(1, []), _seed_dict(1, [])])


def test_negative_votes_fail_validation():
    with pytest.raises(ValidationError):
        build_corpus([_seed_dict(1, [{"id": 1, "body": "x", "author": "a", "upvotes": -1}])])


def test_load_corpus_from_list_file(tmp_path):
    path = tmp_path / "seed.json"
    path.write_text(json.dumps([_seed_dict(10, []), _seed_dict(11, [])]), encoding="utf-8")
    corpus = load_corpus(path)
    assert list(corpus) == [10, 11]


def test_load_corpus_from_wrapped_file(tmp_path):
    path = tmp_path / "seed.json"
    path.write_text(json.dumps({"questions": [_seed_dict(3, [])]}), encoding="utf-8")
    assert list(load_corpus(str(path))) == [3]


def test_load_corpus_falls_back_to_builtin(monkeypatch):
    from kbqa.utils.config import settings
    monkeypatch.setattr(settings, "SEED_PATH", "")
    assert load_corpus() == default_corpus()


def test_load_corpus_uses_configured_path(monkeypatch, tmp_path):
    from kbqa.utils.config import settings
    path = tmp_path / "seed.json"
    path.write_text(json.dumps([_seed_dict(77, [])]), encoding="utf-8")
    monkeypatch.setattr(settings, "SEED_PATH", str(path))
    assert list(load_corpus()) == [77]


def test_build_corpus_rejects_repeated_answer_id_in_one_question():
    with pytest.raises(ValueError, match="duplicate answer id"):
        build_corpus([_seed_dict(1, [
            {"id": 7, "body": "first", "author": "a", "upvotes": 3},
            {"id": 7, "body": "second", "author": "a", "upvotes": 1},
        ])])


def test_build_corpus_rejects_answer_id_shared_across_questions():
    with pytest.raises(ValueError, match="duplicate answer id"):
        build_corpus([
            _seed_dict(1, [{"id": 5, "body": "x", "author": "a"}]),
            _seed_dict(2, [{"id": 5, "body": "y", "author": "a"}]),
        ])


def test_seed_flags_survive_loading():
    d = _seed_dict(1, [{"id": 1, "body": "x", "author": "a", "is_accepted": True}])
    d["is_resolved"] = True
    q = build_corpus([d])[1]
    assert q.is_resolved
    assert q.answers[0].is_accepted
