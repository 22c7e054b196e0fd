from concurrent.futures import Future

import pytest
import requests

from quiz_session.api_client import APIError
from quiz_session.models import SessionIdentity
from quiz_session.session_controller import QuestionSessionController


class InlineExecutor:
    """Runs submitted work immediately so status updates are deterministic."""

    def __init__(self):
        self.shut_down = False

    def submit(self, fn, *args, **kwargs):
        if self.shut_down:
            raise RuntimeError("cannot schedule new futures after shutdown")
        future = Future()
        try:
            future.set_result(fn(*args, **kwargs))
        except Exception as exc:
            future.set_exception(exc)
        return future

    def shutdown(self, wait=True):
        self.shut_down = True


def question_payload(num: int, total: int, user_answer=None, is_marked=False, image=None) -> dict:
    return {
        "q_num": num,
        "total": total,
        "user_answer": user_answer,
        "is_marked": is_marked,
        "question": {
            "question": f"Question {num}?",
            "images": image,
            "option_a": f"{num}-a",
            "option_b": f"{num}-b",
            "option_c": f"{num}-c",
            "option_d": f"{num}-d",
        },
    }


class FakeApi:
    def __init__(self, total: int = 3, answers=None, marked=()):
        self.total = total
        self.answers = dict(answers or {})
        self.marked = set(marked)
        self.load_calls = []
        self.status_calls = []
        self.submit_calls = 0
        self.load_error = None
        self.status_error = None
        self.submit_error = None
        self.scores = {"correct": 2, "wrong": 1, "score": 66.7}
        self.review_rows = []

    def get_single_question(self, test_id, question_num, db_file):
        self.load_calls.append(question_num)
        if self.load_error is not None:
            raise self.load_error
        return question_payload(
            question_num,
            self.total,
            user_answer=self.answers.get(question_num),
            is_marked=question_num in self.marked,
        )

    def post_question_status(self, test_id, db_file, question_id, action, answer=None):
        self.status_calls.append((question_id, action, answer))
        if self.status_error is not None:
            raise self.status_error

    def submit_test(self, test_id, db_file):
        self.submit_calls += 1
        if self.submit_error is not None:
            raise self.submit_error
        return {"scores": self.scores}

    def get_review(self, test_id, user_id, db_file):
        return self.review_rows


@pytest.fixture
def identity() -> SessionIdentity:
    return SessionIdentity(
        test_id=7,
        user_id="student-1",
        test_name="Mock Test",
        duration_minutes=30,
        db_file="bank.db",
    )


@pytest.fixture
def fake_api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def make_controller(identity, fake_api):
    def _make(**kwargs) -> QuestionSessionController:
        kwargs.setdefault("api", fake_api)
        kwargs.setdefault("executor", InlineExecutor())
        return QuestionSessionController(identity, **kwargs)

    return _make


@pytest.fixture
def http_404() -> APIError:
    return APIError("not found", 404)


@pytest.fixture
def connection_error() -> requests.ConnectionError:
    return requests.ConnectionError("connection refused")


@pytest.fixture
def inline_executor() -> InlineExecutor:
    return InlineExecutor()
