"""
Question session controller.

One long-lived object per test attempt. Every user intent (load, answer,
mark, navigate, submit, tick) is a method that mutates the controller and
then calls ``on_change`` so the host can re-render.

Lifecycle
---------
    loading → ready ⇄ ready → confirm_submit → submitting → terminated
    loading → error                 (no retry; input ignored, clock keeps running)
    confirm_submit → ready          (user chose "Continue")
    submitting → ready | error      (submit failed; user stays on the question)

Status updates (answer / mark / skip) are fire-and-forget: they run on a
small thread pool, are never awaited, and their failures are only logged.
The optimistic local change is never rolled back.
"""
from __future__ import annotations

import logging
import weakref
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Optional

import requests

from quiz_session import api_client
from quiz_session.api_client import APIError
from quiz_session.config import config
from quiz_session.models import (
    OPTION_LETTERS,
    Action,
    Direction,
    Phase,
    QuestionView,
    ReviewEntry,
    SessionIdentity,
    SubmitResult,
)
from quiz_session.timer import Countdown

log = logging.getLogger(__name__)

LOAD_FAILED_MESSAGE = "Failed to load question"
NETWORK_ERROR_TEMPLATE = "Network error: {exc}"
TIME_UP_NOTICE = "Time is up! Submitting test automatically."
SUBMIT_FAILED_MESSAGE = "Could not submit the test: {exc}"

_TRANSPORT_ERRORS = (requests.RequestException, ValueError)


class QuestionSessionController:
    def __init__(
        self,
        identity: SessionIdentity,
        question_num: int = 1,
        remaining_seconds: int = 0,
        api=api_client,
        on_change: Optional[Callable[["QuestionSessionController"], None]] = None,
        executor: Optional[ThreadPoolExecutor] = None,
    ):
        self.identity = identity
        self.api = api
        self.on_change = on_change

        self.phase = Phase.LOADING
        self.question: Optional[QuestionView] = None
        self.error: Optional[str] = None
        self.notice: Optional[str] = None
        self.submit_error: Optional[str] = None
        self.result: Optional[SubmitResult] = None

        self.countdown = Countdown.for_session(remaining_seconds, identity.duration_minutes)

        self._initial_num = max(1, int(question_num))
        self.load_count = 0
        self._auto_submitted = False
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=max(1, config.STATUS_WORKERS),
            thread_name_prefix="question-status",
        )
        # sessions dropped without teardown() still release their worker threads
        self._release_pool = weakref.finalize(
            self, _shutdown_pool, self._executor, self._owns_executor
        )

    # ── Read-only helpers ────────────────────────────────────────────────────

    @property
    def remaining_seconds(self) -> int:
        return self.countdown.remaining

    @property
    def current_num(self) -> int:
        return self.question.q_num if self.question else self._initial_num

    @property
    def is_terminated(self) -> bool:
        return self.phase == Phase.TERMINATED

    def primary_direction(self) -> Direction:
        """What the big bottom button does for the current question."""
        if self.question is None or self.question.selected_answer is None:
            return Direction.SKIP
        return Direction.SUBMIT if self.question.is_last else Direction.NEXT

    def primary_label(self) -> str:
        if self.question is not None and self.question.is_last:
            return "Submit Test"
        direction = self.primary_direction()
        return "Next →" if direction == Direction.NEXT else "Skip"

    # ── Loading ──────────────────────────────────────────────────────────────

    def start(self) -> None:
        self.load(self._initial_num)

    def load(self, question_num: int) -> None:
        """Fetch one question and replace local state with the server's view."""
        self.phase = Phase.LOADING
        self.error = None
        self._changed()

        try:
            payload = self.api.get_single_question(
                self.identity.test_id, question_num, self.identity.db_file
            )
            question = QuestionView.from_payload(payload, question_num)
        except APIError as exc:
            log.warning(
                "Loading question %s of test %s failed: HTTP %s",
                question_num, self.identity.test_id, exc.status_code,
            )
            self._fail(LOAD_FAILED_MESSAGE)
            return
        except _TRANSPORT_ERRORS as exc:
            log.warning("Loading question %s failed: %s", question_num, exc)
            self._fail(NETWORK_ERROR_TEMPLATE.format(exc=exc))
            return

        self.question = question
        self.load_count += 1
        self.phase = Phase.READY
        self._changed()

    def _fail(self, message: str) -> None:
        self.question = None
        self.error = message
        self.phase = Phase.ERROR
        self._changed()

    # ── Status updates (fire-and-forget) ─────────────────────────────────────

    def record_action(self, action: Action | str, answer: Optional[str] = None) -> Optional[Future]:
        action = Action(action)
        if self.question is None:
            return None
        try:
            future = self._executor.submit(
                self.api.post_question_status,
                self.identity.test_id,
                self.identity.db_file,
                self.question.q_num,
                action.value,
                answer,
            )
        except RuntimeError as exc:
            # pool already shut down by teardown()
            log.warning("Status update %s dropped: %s", action.value, exc)
            return None
        future.add_done_callback(_log_status_failure)
        return future

    def select_answer(self, letter: str) -> None:
        letter = str(letter).strip().upper()
        if letter not in OPTION_LETTERS:
            raise ValueError(f"unknown option {letter!r}, expected one of {OPTION_LETTERS}")
        if self.phase != Phase.READY or self.question is None:
            return
        self.question.selected_answer = letter
        self._changed()
        self.record_action(Action.ANSWER, answer=letter)

    def toggle_mark(self) -> None:
        if self.phase != Phase.READY or self.question is None:
            return
        self.question.is_marked = not self.question.is_marked
        self._changed()
        self.record_action(Action.MARK)

    # ── Navigation ───────────────────────────────────────────────────────────

    def navigate(self, direction: Direction | str) -> None:
        direction = Direction(direction)
        if self.phase != Phase.READY or self.question is None:
            return

        current = self.question.q_num
        if direction == Direction.SKIP and self.question.selected_answer is None:
            self.record_action(Action.SKIP)

        if direction == Direction.SUBMIT or (
            self.question.is_last and direction != Direction.PREVIOUS
        ):
            self.request_submit()
            return

        target = current
        if direction in (Direction.NEXT, Direction.SKIP):
            target = current + 1
        elif direction == Direction.PREVIOUS and current > 1:
            target = current - 1
        self.load(target)

    def open_question(self, question_num: int) -> None:
        """Jump straight to a question, e.g. from the review list."""
        if self.phase in (Phase.SUBMITTING, Phase.TERMINATED):
            return
        self.load(max(1, int(question_num)))

    def fetch_review(self) -> list[ReviewEntry]:
        rows = self.api.get_review(
            self.identity.test_id, self.identity.user_id, self.identity.db_file
        )
        return [ReviewEntry.from_payload(row) for row in rows]

    # ── Submission ───────────────────────────────────────────────────────────

    def request_submit(self) -> None:
        if self.phase != Phase.READY:
            return
        self.phase = Phase.CONFIRM_SUBMIT
        self._changed()

    def dismiss_submit(self) -> None:
        if self.phase != Phase.CONFIRM_SUBMIT:
            return
        self.phase = Phase.READY
        self._changed()

    def confirm_submit(self) -> None:
        if self.phase != Phase.CONFIRM_SUBMIT:
            return
        self.submit()

    def submit(self) -> None:
        if self.phase in (Phase.SUBMITTING, Phase.TERMINATED):
            return

        self.countdown.cancel()
        self.submit_error = None
        self.phase = Phase.SUBMITTING
        self._changed()

        try:
            data = self.api.submit_test(self.identity.test_id, self.identity.db_file)
        except (APIError, *_TRANSPORT_ERRORS) as exc:
            log.error("Submitting test %s failed: %s", self.identity.test_id, exc)
            self.submit_error = SUBMIT_FAILED_MESSAGE.format(exc=exc)
            self.phase = Phase.READY if self.question is not None else Phase.ERROR
            self.countdown.resume()
            self._changed()
            return

        scores = data.get("scores") if isinstance(data, dict) else None
        self.result = SubmitResult(
            test_id=self.identity.test_id,
            user_id=self.identity.user_id,
            scores=scores,
        )
        self.phase = Phase.TERMINATED
        log.info("Test %s submitted for user %s", self.identity.test_id, self.identity.user_id)
        self._changed()

    # ── Clock ────────────────────────────────────────────────────────────────

    def tick(self) -> None:
        if not self.countdown.running:
            return
        expired = self.countdown.tick()
        self._changed()
        if not expired or self._auto_submitted:
            return

        self._auto_submitted = True
        self.notice = TIME_UP_NOTICE
        log.info("Time is up for test %s, submitting", self.identity.test_id)
        self._changed()
        self.submit()

    # ── Teardown ─────────────────────────────────────────────────────────────

    def teardown(self) -> None:
        """Stop the clock and release the pool; in-flight requests finish on their own."""
        self.countdown.cancel()
        self._release_pool()

    def _changed(self) -> None:
        if self.on_change is not None:
            self.on_change(self)


def _shutdown_pool(executor, owned: bool) -> None:
    if owned:
        executor.shutdown(wait=False)


def _log_status_failure(future: Future) -> None:
    exc = future.exception()
    if exc is not None:
        log.warning("Status update failed: %s", exc)
