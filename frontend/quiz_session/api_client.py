"""
api_client.py — single HTTP client for all question-screen → backend calls.
Reads API_BASE_URL / API_TOKEN from config (.env, falls back to localhost:5000).
Transport failures propagate as requests.RequestException; non-2xx responses
raise APIError.
"""
from __future__ import annotations

import requests

from quiz_session import api_endpoints
from quiz_session.config import config


class APIError(Exception):
    def __init__(self, message: str, status_code: int = 0):
        super().__init__(message)
        self.status_code = status_code


def _headers(token: str | None = None) -> dict:
    h = {"Content-Type": "application/json"}
    token = token if token is not None else config.API_TOKEN
    if token:
        h["Authorization"] = f"Bearer {token}"
    return h


def _raise(resp: requests.Response) -> None:
    if not resp.ok:
        try:
            body = resp.json()
            msg = body.get("error") or body.get("detail") or resp.text
        except Exception:
            msg = resp.text
        raise APIError(msg or f"HTTP {resp.status_code}", resp.status_code)


# ── Question screen ──────────────────────────────────────────────────────────

def get_single_question(test_id: int, question_num: int, db_file: str) -> dict:
    resp = requests.get(
        api_endpoints.single_question(test_id, question_num),
        params={"db_file": db_file},
        headers=_headers(),
        timeout=config.REQUEST_TIMEOUT,
    )
    _raise(resp)
    return resp.json()


def post_question_status(
    test_id: int,
    db_file: str,
    question_id: int,
    action: str,
    answer: str | None = None,
) -> None:
    body = {"question_id": question_id, "action": action}
    if answer is not None:
        body["answer"] = answer
    resp = requests.post(
        api_endpoints.question_status(test_id),
        params={"db_file": db_file},
        json=body,
        headers=_headers(),
        timeout=config.REQUEST_TIMEOUT,
    )
    _raise(resp)


def submit_test(test_id: int, db_file: str) -> dict:
    resp = requests.post(
        api_endpoints.submit_test(test_id),
        params={"db_file": db_file},
        headers=_headers(),
        timeout=config.SUBMIT_TIMEOUT,
    )
    _raise(resp)
    return resp.json()


# ── Review list ──────────────────────────────────────────────────────────────

def get_review(test_id: int, user_id: str, db_file: str) -> list[dict]:
    resp = requests.get(
        api_endpoints.review(test_id),
        params={"user_id": user_id, "db_file": db_file},
        headers=_headers(),
        timeout=config.SUBMIT_TIMEOUT,
    )
    _raise(resp)
    data = resp.json()
    if isinstance(data, dict):
        data = data.get("questions") or []
    return list(data)
