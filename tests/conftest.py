import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import kbqa
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from kbqa.ingest.models import Answer, Question
from kbqa.ingest.seed import build_corpus, default_corpus


def make_answer(id, upvotes=0, downvotes=0, body=None, author="tester"):
    return Answer(id=id, body=body or f"answer {id}", author=author,
                  upvotes=upvotes, downvotes=downvotes)


# Common test fixtures
@pytest.fixture
def answer_factory():
    """Build Answer objects with a default body/author."""
    return make_answer


@pytest.fixture
def tie_corpus():
    """One question, answers [1:5, 2:5, 3:10] as seeded (unranked)."""
    q = Question(
        id=100,
        title="Tie breaking",
        body="Which answer wins?",
        author="asker",
        answers=(make_answer(1, 5), make_answer(2, 5), make_answer(3, 10)),
    )
    return build_corpus([q])


@pytest.fixture
def seed_corpus():
    return default_corpus()
