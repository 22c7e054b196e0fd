"""
quiz_session — client-side test-taking session for the quiz backend.

Public API
----------
    QuestionSessionController   – drives one test attempt, question by question
    SessionIdentity             – immutable {test_id, user_id, ...} tuple
    Direction, Action, Phase    – navigation / status-update / lifecycle enums
    APIError                    – raised by api_client on non-2xx responses
"""
from quiz_session.api_client import APIError
from quiz_session.models import Action, Direction, Phase, SessionIdentity
from quiz_session.session_controller import QuestionSessionController

__all__ = [
    "APIError",
    "Action",
    "Direction",
    "Phase",
    "QuestionSessionController",
    "SessionIdentity",
]
