"""Safe-mode confirmation gate.

Before a batch of deletions proceeds in safe mode, the gate shows a
capped preview of the batch and asks a single yes/no question. The
answer comes from a decision provider, so tests can script it.
"""

import logging
from collections.abc import Iterable, Sequence
from typing import Protocol

from rich.console import Console

from cleanpath.cleaner.models import Candidate, CandidateKind
from cleanpath.cleaner.transcript import Transcript

logger = logging.getLogger(__name__)

_HEADERS: dict[CandidateKind, str] = {
    CandidateKind.FILE: "Files to be deleted:",
    CandidateKind.DIRECTORY: "Directories to be deleted (including all files and child folders):",
}

_NOUNS: dict[CandidateKind, str] = {
    CandidateKind.FILE: "files",
    CandidateKind.DIRECTORY: "directories",
}


class DecisionProvider(Protocol):
    """Source of answers to confirmation prompts."""

    def ask(self, prompt: str) -> str:
        """Return the raw answer to ``prompt``."""
        ...


class ConsoleDecisions:
    """Reads answers interactively from the console.

    Blocks until a line is entered. End of input counts as a decline.
    """

    def __init__(self, console: Console) -> None:
        self._console = console

    def ask(self, prompt: str) -> str:
        try:
            return self._console.input(f"[prompt]{prompt}[/]")
        except EOFError:
            return ""


class ScriptedDecisions:
    """Replays a fixed sequence of answers.

    Once the script is exhausted every further prompt is declined.

    Attributes:
        prompts: Prompts asked so far, in order.
    """

    def __init__(self, answers: Iterable[str] = ()) -> None:
        self._answers = list(answers)
        self.prompts: list[str] = []

    def ask(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._answers:
            return ""
        return self._answers.pop(0)


def is_affirmative(answer: str | None) -> bool:
    """Only ``y`` (any case, surrounding whitespace ignored) proceeds."""
    return answer is not None and answer.strip().lower() == "y"


class ConfirmationGate:
    """Previews a batch and asks whether to delete all of it.

    Args:
        decisions: Provider answering the yes/no question.
        transcript: Sink for the preview, prompt and answer.
    """

    def __init__(self, decisions: DecisionProvider, transcript: Transcript) -> None:
        self._decisions = decisions
        self._transcript = transcript

    def confirm(self, candidates: Sequence[Candidate], limit: int, kind: CandidateKind) -> bool:
        """Ask whether the whole batch may be deleted.

        At most ``limit`` candidates are previewed, in selection order. The
        answer applies to every candidate in the batch, previewed or not.

        Args:
            candidates: The pending batch.
            limit: Maximum number of candidates to preview.
            kind: Whether the batch holds files or directories.

        Returns:
            True to delete the whole batch, False to skip it.
        """
        shown = candidates[: max(limit, 0)]

        self._transcript.line(_HEADERS[kind], style="bold_header")
        for candidate in shown:
            self._transcript.line(candidate.path, style="preview")
        hidden = len(candidates) - len(shown)
        if hidden > 0:
            self._transcript.line(f"... and {hidden} more", style="muted")

        prompt = f"Continue to delete these {_NOUNS[kind]}? (Y/N): "
        answer = self._decisions.ask(prompt)
        self._transcript.note(f"{prompt}{answer}")

        proceed = is_affirmative(answer)
        if not proceed:
            self._transcript.line(
                f"Skipped {len(candidates)} {_NOUNS[kind]}.",
                style="warning",
            )
        logger.debug("Safe-mode answer %r for %d %s", answer, len(candidates), _NOUNS[kind])
        return proceed
