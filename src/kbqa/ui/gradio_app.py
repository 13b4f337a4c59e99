# src/kbqa/ui/gradio_app.py
from __future__ import annotations
import logging
from html import escape as _esc
from typing import Optional

import gradio as gr

from kbqa.core.outcome import Outcome, Reason
from kbqa.core.session import QASession
from kbqa.ingest.models import VoteDirection
from kbqa.ingest.seed import load_corpus
from kbqa.ui.render import render_question_html, answer_choices
from kbqa.utils.config import settings
from kbqa.utils.logging_utils import configure_logging

logger = logging.getLogger(__name__)

REASON_MESSAGES = {
    Reason.QUESTION_NOT_FOUND: "That question is no longer available.",
    Reason.ANSWER_NOT_FOUND: "That answer is no longer available.",
    Reason.EMPTY_BODY: "Write something before submitting.",
    Reason.INVALID_DIRECTION: "Unknown vote.",
    Reason.NO_SELECTION: "Search for a question first.",
    Reason.UNSUPPORTED_COMMAND: "Not supported here.",
}

# ---------- helpers ----------
def _new_session() -> QASession:
    return QASession(load_corpus(), author=settings.AUTHOR)

def _ensure_session(session: Optional[QASession]):
    """Return (session, error_html). Seed loading can fail on a bad KBQA_SEED_PATH."""
    if session is not None:
        return session, None
    try:
        return _new_session(), None
    except (OSError, ValueError) as e:
        logger.exception("failed to load seed corpus")
        return None, f"<em>Failed to load questions: {_esc(str(e))}</em>"

def _status(outcome: Outcome, done: str) -> str:
    if outcome.ok:
        return done
    return f"_{REASON_MESSAGES.get(outcome.reason, outcome.reason.value)}_"

def _view(session: QASession):
    q = session.selected
    return render_question_html(q), gr.update(choices=answer_choices(q), value=None)

# ---------- events ----------
def on_search(session: Optional[QASession], query: str):
    session, err = _ensure_session(session)
    if err:
        return session, err, gr.update(), ""
    found = session.search(query or "")
    html, choices = _view(session)
    status = "" if found else "_No matching question._"
    return session, html, choices, status

def on_vote(session: Optional[QASession], answer_id, direction: str):
    if session is None or session.selected is None:
        return session, gr.update(), gr.update(), f"_{REASON_MESSAGES[Reason.NO_SELECTION]}_"
    if answer_id is None:
        return session, gr.update(), gr.update(), "_Pick an answer to vote on._"
    outcome = session.vote(session.selected.id, int(answer_id), direction)
    html, choices = _view(session)
    return session, html, choices, _status(outcome, "Vote recorded.")

def on_submit(session: Optional[QASession], draft: str):
    session, err = _ensure_session(session)
    if err:
        return session, err, gr.update(), draft, ""
    session.draft = draft or ""
    outcome = session.submit_answer()
    html, choices = _view(session)
    # draft stays in the textbox when nothing was added
    return session, html, choices, session.draft, _status(outcome, "Answer added.")

# ---------- UI ----------
def build_ui():
    with gr.Blocks(title="Internal Knowledge Base") as demo:
        gr.Markdown("## Q&A · Internal Knowledge Base")

        state = gr.State(value=None)  # QASession per browser session

        with gr.Row():
            query_in = gr.Textbox(
                label="Search",
                placeholder="Search for 'java', 'deployment', 'database' or 'api'...",
                scale=4,
            )
            search_btn = gr.Button("Search", variant="primary", scale=1)

        status_md = gr.Markdown("")
        question_html = gr.HTML(render_question_html(None))

        with gr.Row():
            answer_dd = gr.Dropdown(choices=[], label="Answer", scale=4)
            up_btn = gr.Button("👍 Upvote", scale=1)
            down_btn = gr.Button("👎 Downvote", scale=1)

        draft_in = gr.Textbox(label="Your answer", lines=4, placeholder="Write your answer...")
        submit_btn = gr.Button("Submit Answer", variant="secondary")

        # Wire events
        search_btn.click(
            on_search,
            inputs=[state, query_in],
            outputs=[state, question_html, answer_dd, status_md],
        )
        query_in.submit(
            on_search,
            inputs=[state, query_in],
            outputs=[state, question_html, answer_dd, status_md],
        )
        up_btn.click(
            lambda s, a: on_vote(s, a, VoteDirection.UP.value),
            inputs=[state, answer_dd],
            outputs=[state, question_html, answer_dd, status_md],
        )
        down_btn.click(
            lambda s, a: on_vote(s, a, VoteDirection.DOWN.value),
            inputs=[state, answer_dd],
            outputs=[state, question_html, answer_dd, status_md],
        )
        submit_btn.click(
            on_submit,
            inputs=[state, draft_in],
            outputs=[state, question_html, answer_dd, draft_in, status_md],
        )

    return demo

def main():
    configure_logging()
    print(f"[cfg] seed={settings.SEED_PATH or 'built-in'}, author={settings.AUTHOR}")
    demo = build_ui()
    demo.queue(default_concurrency_limit=settings.UI_CONCURRENCY).launch()

if __name__ == "__main__":
    main()
