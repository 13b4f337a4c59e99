# src/kbqa/ui/render.py
from __future__ import annotations
from html import escape as _esc
from typing import List, Optional

import markdown as _md
import bleach

from kbqa.ingest.models import Answer, Question

_ALLOWED_TAGS = bleach.sanitizer.ALLOWED_TAGS.union({
    "p","pre","code","blockquote","hr","br",
    "h1","h2","h3","h4","h5","h6","ul","ol","li",
    "table","thead","tbody","tr","th","td","em","strong","a","span","div"
})
_ALLOWED_ATTRS = {
    **bleach.sanitizer.ALLOWED_ATTRIBUTES,
    "a": ["href","title","target","rel"],
    "span": ["class"],
    "div": ["class"],
    "code": ["class"],
    "pre": ["class"],
}

_CSS = """
<style>
.qcard{margin:12px 0;border:1px solid #333;border-radius:12px;padding:12px}
.qtitle{font-weight:600;font-size:17px}
.qmeta{font-size:12px;opacity:.85;margin-bottom:8px}
.acard{border-left:4px solid #16a34a;padding:4px 0 4px 12px;margin:10px 0}
.ahead{display:flex;justify-content:space-between;font-size:12px;opacity:.85}
.tag{display:inline-block;padding:2px 8px;margin:2px;border-radius:999px;border:1px solid #444;font-size:12px}
.badge{display:inline-block;padding:1px 6px;margin-left:6px;border-radius:4px;background:#16a34a;color:#fff;font-size:11px}
</style>
"""

EMPTY_SELECTION_HTML = "<em>Search for a question to see answers and contribute.</em>"


def md_to_html(text: str) -> str:
    html = _md.markdown(text or "", extensions=["fenced_code", "tables"])
    return bleach.clean(html, tags=_ALLOWED_TAGS, attributes=_ALLOWED_ATTRS, strip=True)


def _render_answer(a: Answer) -> str:
    accepted = '<span class="badge">✓ Accepted</span>' if a.is_accepted else ""
    return (
        '<div class="acard">'
        f'{md_to_html(a.body)}'
        f'<div class="ahead"><span>#{a.id} · Answered by {_esc(a.author)}{accepted}</span>'
        f'<span>👍 {a.upvotes} · 👎 {a.downvotes}</span></div>'
        '</div>'
    )


def render_question_html(q: Optional[Question]) -> str:
    if q is None:
        return EMPTY_SELECTION_HTML
    tags = "".join(f'<span class="tag">{_esc(t)}</span>' for t in q.tags)
    resolved = '<span class="badge">Resolved</span>' if q.is_resolved else ""
    parts = [_CSS, '<div class="qcard">']
    parts.append(f'<div class="qtitle">{_esc(q.title)}{resolved}</div>')
    parts.append(f'<div class="qmeta">Asked by {_esc(q.author)} {tags}</div>')
    parts.append(md_to_html(q.body))
    if q.answers:
        parts.append(f"<h4>Answers ({len(q.answers)})</h4>")
        parts.extend(_render_answer(a) for a in q.answers)
    else:
        parts.append("<em>No answers yet.</em>")
    parts.append("</div>")
    return "\n".join(parts)


def answer_choices(q: Optional[Question]) -> List[tuple]:
    """(label, answer id) pairs for the vote dropdown, in rank order."""
    if q is None:
        return []
    out = []
    for a in q.answers:
        first = (a.body.strip().splitlines() or [""])[0]
        if len(first) > 60:
            first = first[:57] + "..."
        out.append((f"#{a.id} ({a.upvotes}↑) {first}", a.id))
    return out
