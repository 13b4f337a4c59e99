import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Union

from kbqa.bank.question_bank import SEED_QUESTIONS
from kbqa.ingest.models import Corpus, Question
from kbqa.ranking.engine import rank
from kbqa.utils.config import settings

logger = logging.getLogger(__name__)

# normalize -> rank -> corpus


def normalize_question(d: Union[Question, Dict[str, Any]]) -> Question:
    if isinstance(d, Question):
        return d
    return Question(**d)


def build_corpus(items: Iterable[Union[Question, Dict[str, Any]]]) -> Corpus:
    """Build a corpus keyed by question id, answers ranked once up front.

    Raises ValueError on a duplicate question id, or on an answer id used
    twice anywhere in the corpus.
    """
    corpus: Corpus = {}
    answer_ids = set()
    for d in items:
        q = normalize_question(d)
        if q.id in corpus:
            raise ValueError(f"duplicate question id in seed data: {q.id}")
        for a in q.answers:
            if a.id in answer_ids:
                raise ValueError(f"duplicate answer id in seed data: {a.id} (question {q.id})")
            answer_ids.add(a.id)
        corpus[q.id] = q.model_copy(update={"answers": rank(q.answers)})
    return corpus


def default_corpus() -> Corpus:
    return build_corpus(SEED_QUESTIONS)


def load_corpus(path: Optional[Union[str, Path]] = None) -> Corpus:
    """
    Load a seed corpus from a JSON file holding a list of questions
    (or ``{"questions": [...]}``). Falls back to the built-in seed when no
    path is given and KBQA_SEED_PATH is unset.
    """
    path = path or settings.SEED_PATH
    if not path:
        return default_corpus()

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("questions", [])
    corpus = build_corpus(data)
    logger.info("loaded %d questions from %s", len(corpus), path)
    return corpus
