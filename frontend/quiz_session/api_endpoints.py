"""
Backend routes used by the question screen.

Endpoints
---------
GET   /api/tests/<test_id>/questions/<question_num>   – one question + user state
POST  /api/tests/<test_id>/question-status            – record answer / mark / skip
POST  /api/tests/<test_id>/submit                     – finish the attempt, get scores
GET   /api/tests/<test_id>/review                     – per-question summary

The storage handle is passed as the ``db_file`` query parameter on every call.
"""
from __future__ import annotations

from urllib.parse import quote

from quiz_session.config import config


def _url(path: str, base_url: str | None = None) -> str:
    return f"{(base_url or config.API_BASE_URL).rstrip('/')}{path}"


def _seg(value) -> str:
    return quote(str(value), safe="")


def single_question(test_id: int, question_num: int, base_url: str | None = None) -> str:
    return _url(f"/api/tests/{_seg(test_id)}/questions/{int(question_num)}", base_url)


def question_status(test_id: int, base_url: str | None = None) -> str:
    return _url(f"/api/tests/{_seg(test_id)}/question-status", base_url)


def submit_test(test_id: int, base_url: str | None = None) -> str:
    return _url(f"/api/tests/{_seg(test_id)}/submit", base_url)


def review(test_id: int, base_url: str | None = None) -> str:
    return _url(f"/api/tests/{_seg(test_id)}/review", base_url)
