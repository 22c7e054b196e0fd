"""2_Review.py — Review list: every question with its answer / mark state."""
import requests
import streamlit as st

from components.clock import clock
from quiz_session import APIError

st.set_page_config(page_title="Review", page_icon="📋", layout="centered")

# ── Session guard ──────────────────────────────────────────────────────────
quiz = st.session_state.get("quiz")
if quiz is None:
    st.warning("No test in progress.")
    st.page_link("Home.py", label="👉 Start a test")
    st.stop()

if quiz.is_terminated:
    st.switch_page("pages/3_Results.py")

st.markdown(
    "<style>.top-bar { background: rgba(0, 0, 0, 0.9); color: #FFFFFF; "
    "border-radius: 8px; padding: 0.6rem 1rem; font-weight: 600; }</style>",
    unsafe_allow_html=True,
)

# Time keeps running while the list is open; a time-up submit reruns into Results.
col_title, col_clock = st.columns([3, 1])
with col_title:
    st.title("📋 Review")
    st.caption(quiz.identity.test_name)
with col_clock:
    clock(quiz)

if quiz.submit_error:
    st.warning(quiz.submit_error)

try:
    entries = quiz.fetch_review()
except APIError as e:
    st.error(str(e))
    st.stop()
except requests.RequestException as e:
    st.error(f"Network error: {e}")
    st.stop()

if not entries:
    st.info("No questions to review yet.")

for entry in entries:
    answer = entry.user_answer or "—"
    flag = " ★" if entry.is_marked else ""
    col_label, col_go = st.columns([4, 1])
    col_label.markdown(f"**Q{entry.q_num}**{flag} · {entry.status} · answer: {answer}")
    if col_go.button("Open", key=f"review_{entry.q_num}", use_container_width=True):
        quiz.open_question(entry.q_num)
        st.switch_page("pages/1_Take_Test.py")

st.divider()
st.page_link("pages/1_Take_Test.py", label="← Back to question")
