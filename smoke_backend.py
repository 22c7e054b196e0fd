"""
Manual smoke check of the quiz backend routes the question screen relies on.

Requires a running backend (API_BASE_URL from .env, default localhost:5000).
Run from project root (after `pip install -e .`):
    python smoke_backend.py --test-id 1 --user-id u1 --db-file bank.db [--submit]

Exercises every route end-to-end with plain requests, so a broken backend is
visible without starting the Streamlit app. Exits 1 on the first unexpected
status code.
"""

import argparse
import json
import sys

import requests

from quiz_session import api_endpoints
from quiz_session.config import config
from quiz_session.images import decode_question_image


def hdr(label: str) -> None:
    print(f"\n── {label} " + "─" * max(4, 56 - len(label)))


def check(resp: requests.Response, *expected) -> requests.Response:
    """Stop the run unless the response status is one of *expected*."""
    if resp.status_code in expected:
        return resp
    print(f"FAIL  {resp.request.method if resp.request else '?'} {resp.url}")
    print(f"      wanted {'/'.join(map(str, expected))}, backend said {resp.status_code}")
    try:
        detail = json.dumps(resp.json(), indent=2)
    except ValueError:
        detail = resp.text[:600]
    print(detail)
    sys.exit(1)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Smoke-test the quiz backend")
    parser.add_argument("--test-id", type=int, required=True)
    parser.add_argument("--user-id", required=True)
    parser.add_argument("--db-file", required=True, help="Storage handle of the question bank")
    parser.add_argument("--question", type=int, default=1, help="Question number to exercise")
    parser.add_argument("--submit", action="store_true", help="Also submit the test (ends the attempt)")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    params = {"db_file": args.db_file}
    print(f"Backend: {config.API_BASE_URL}")

    # ── GET single question ──────────────────────────────────────────────────
    hdr(f"GET question {args.question}")
    r = requests.get(api_endpoints.single_question(args.test_id, args.question),
                     params=params, timeout=config.REQUEST_TIMEOUT)
    check(r, 200)
    data = r.json()
    assert "question" in data, "missing question"
    assert "total" in data, "missing total"
    question = data["question"]
    for key in ("question", "option_a", "option_b", "option_c", "option_d"):
        assert key in question, f"missing question.{key}"
    image_ok = decode_question_image(question.get("images"))
    print(f"OK  q_num={data.get('q_num')}  total={data['total']}")
    print(f"    user_answer={data.get('user_answer')}  is_marked={data.get('is_marked')}")
    print(f"    image={'decoded' if image_ok else 'none/placeholder'}")

    # ── POST question status ────────────────────────────────────────────────
    status_url = api_endpoints.question_status(args.test_id)
    for body in (
        {"question_id": args.question, "action": "answer", "answer": "A"},
        {"question_id": args.question, "action": "mark"},
    ):
        hdr(f"POST question-status action={body['action']}")
        r = requests.post(status_url, params=params, json=body, timeout=config.REQUEST_TIMEOUT)
        check(r, 200, 201, 204)
        print(f"OK  status={r.status_code}")

    # ── Answer persisted? ───────────────────────────────────────────────────
    hdr("GET question again – answer should be persisted")
    r = requests.get(api_endpoints.single_question(args.test_id, args.question),
                     params=params, timeout=config.REQUEST_TIMEOUT)
    check(r, 200)
    print(f"OK  user_answer={r.json().get('user_answer')}  is_marked={r.json().get('is_marked')}")

    # ── GET review ──────────────────────────────────────────────────────────
    hdr("GET review list")
    r = requests.get(api_endpoints.review(args.test_id),
                     params={"user_id": args.user_id, **params},
                     timeout=config.SUBMIT_TIMEOUT)
    check(r, 200, 404)
    if r.status_code == 404:
        print("SKIP  backend has no review route")
    else:
        rows = r.json()
        rows = rows.get("questions", []) if isinstance(rows, dict) else rows
        print(f"OK  {len(rows)} questions listed")

    # ── POST submit ─────────────────────────────────────────────────────────
    if args.submit:
        hdr("POST submit")
        r = requests.post(api_endpoints.submit_test(args.test_id),
                          params=params, timeout=config.SUBMIT_TIMEOUT)
        check(r, 200)
        assert "scores" in r.json(), "missing scores"
        print(f"OK  scores={json.dumps(r.json()['scores'])}")

    hdr("ALL CHECKS PASSED")


if __name__ == "__main__":
    main()
