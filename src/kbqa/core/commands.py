"""
Chat-style slash commands routed onto a QASession.

    /search <query>   select a question
    /answer <body>    answer the selected question
    /ask ...          recognised but rejected (the corpus is fixed)

Plain text with no known command is searched, like the search box.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from kbqa.core.outcome import Outcome, Reason
from kbqa.core.session import QASession
from kbqa.ingest.models import Question

logger = logging.getLogger(__name__)


class Command(str, Enum):
    ASK = "/ask"
    ANSWER = "/answer"
    SEARCH = "/search"


@dataclass(frozen=True)
class CommandResult:
    command: Command
    argument: str
    selected: Optional[Question]
    outcome: Optional[Outcome] = None   # set for commands that try to mutate


def parse_command(text: str) -> Tuple[Command, str]:
    """Split off a leading command word.

    The argument is everything after the first space following the command,
    passed through untrimmed, the same way plain text reaches the search.
    """
    text = text or ""
    head, _, rest = text.lstrip().partition(" ")
    try:
        command = Command(head.lower())
    except ValueError:
        return Command.SEARCH, text
    return command, rest


def run_command(session: QASession, text: str) -> CommandResult:
    command, arg = parse_command(text)

    if command is Command.SEARCH:
        found = session.search(arg)
        return CommandResult(command, arg, found)

    if command is Command.ANSWER:
        outcome = session.submit_answer(arg)
        return CommandResult(command, arg, session.selected, outcome)

    logger.info("command %s not supported", command.value)
    return CommandResult(
        command, arg, session.selected,
        Outcome.rejected(session.corpus, Reason.UNSUPPORTED_COMMAND),
    )
