"""
clock.py — countdown widget shared by every page an attempt can be on.
The fragment reruns every tick period, catches the controller up on elapsed
seconds and forces a full rerun when a tick changes the phase (time-up submit),
so the host page can move on to Results.
"""
import time

import streamlit as st

from quiz_session.config import config
from quiz_session.timer import due_ticks, format_time

_PERIOD = max(1, config.TICK_SECONDS)


def catch_up_ticks(quiz) -> None:
    ticks, anchor = due_ticks(st.session_state.get("last_tick"), time.monotonic(), _PERIOD)
    for _ in range(ticks):
        quiz.tick()
    st.session_state["last_tick"] = anchor


@st.fragment(run_every=_PERIOD)
def clock(quiz) -> None:
    phase_before = quiz.phase
    catch_up_ticks(quiz)
    st.markdown(
        f"<div class='top-bar' style='text-align:right'>{format_time(quiz.remaining_seconds)}</div>",
        unsafe_allow_html=True,
    )
    if quiz.phase != phase_before:
        st.rerun()
