"""
Data model for one test attempt on the client side.

SessionIdentity travels unchanged for the whole attempt; QuestionView is
rebuilt from the backend payload on every load and holds the only mutable
per-question state (selected answer, mark flag).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

OPTION_LETTERS = ("A", "B", "C", "D")

QUESTION_FALLBACK_TEXT = "Question not available"


class Action(str, Enum):
    """Status-update actions, values are the wire strings."""
    ANSWER = "answer"
    MARK = "mark"
    SKIP = "skip"


class Direction(str, Enum):
    PREVIOUS = "previous"
    NEXT = "next"
    SKIP = "skip"
    SUBMIT = "submit"


class Phase(str, Enum):
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"
    CONFIRM_SUBMIT = "confirm_submit"
    SUBMITTING = "submitting"
    TERMINATED = "terminated"


@dataclass(frozen=True)
class SessionIdentity:
    test_id: int
    user_id: str
    test_name: str
    duration_minutes: int
    db_file: str


def _normalize_letter(value: Any) -> Optional[str]:
    if value is None:
        return None
    letter = str(value).strip().upper()
    return letter if letter in OPTION_LETTERS else None


@dataclass
class QuestionView:
    q_num: int
    total: int
    prompt: str
    image: Optional[str] = None
    options: dict[str, str] = field(default_factory=dict)
    selected_answer: Optional[str] = None
    is_marked: bool = False

    @classmethod
    def from_payload(cls, payload: dict, requested_num: int) -> "QuestionView":
        """
        Build the view-state from a ``singleQuestion`` response.

        Missing ``q_num`` falls back to the number that was requested,
        missing ``total`` to 0 and missing ``is_marked`` to False.
        """
        if not isinstance(payload, dict):
            raise ValueError(f"unexpected question payload: {type(payload).__name__}")
        question = payload.get("question") or {}
        if not isinstance(question, dict):
            raise ValueError(f"unexpected question body: {type(question).__name__}")
        prompt = question.get("question")
        options = {
            letter: _text(question.get(f"option_{letter.lower()}"))
            for letter in OPTION_LETTERS
        }
        return cls(
            q_num=int(payload.get("q_num") or requested_num),
            total=int(payload.get("total") or 0),
            prompt=str(prompt) if prompt is not None else QUESTION_FALLBACK_TEXT,
            image=question.get("images") or None,
            options=options,
            selected_answer=_normalize_letter(payload.get("user_answer")),
            is_marked=bool(payload.get("is_marked") or False),
        )

    @property
    def is_last(self) -> bool:
        return self.q_num == self.total

    def visible_options(self) -> list[tuple[str, str]]:
        """Options with non-empty text, in A..D order."""
        return [
            (letter, self.options.get(letter, ""))
            for letter in OPTION_LETTERS
            if self.options.get(letter)
        ]


def _text(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass(frozen=True)
class SubmitResult:
    test_id: int
    user_id: str
    scores: Any


@dataclass(frozen=True)
class ReviewEntry:
    q_num: int
    user_answer: Optional[str] = None
    is_marked: bool = False
    status: str = ""

    @classmethod
    def from_payload(cls, payload: dict) -> "ReviewEntry":
        answer = _normalize_letter(payload.get("user_answer"))
        marked = bool(payload.get("is_marked") or False)
        status = payload.get("status") or ("answered" if answer else "unanswered")
        return cls(
            q_num=int(payload.get("q_num") or payload.get("question_id") or 0),
            user_answer=answer,
            is_marked=marked,
            status=str(status),
        )
