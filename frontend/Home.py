"""
Home.py — Entry point of the quiz client Streamlit app.
Collects the session identity, starts a QuestionSessionController and
hands over to the question screen. Shows the running attempt if there is one.
"""
import streamlit as st

from quiz_session import QuestionSessionController, SessionIdentity
from quiz_session.logging_setup import setup_console_logging
from quiz_session.timer import format_time

setup_console_logging()

st.set_page_config(
    page_title="Quiz",
    page_icon="📝",
    layout="centered",
)

# ── Custom CSS ─────────────────────────────────────────────────────────────────
st.markdown(
    """
    <style>
    .stApp { background-color: #F5F6FA; }
    div.stButton > button, div.stFormSubmitButton > button {
        background: #003087;
        color: #FFFFFF;
        border: none;
        border-radius: 8px;
        padding: 0.55rem 1.2rem;
        font-weight: 500;
    }
    </style>
    """,
    unsafe_allow_html=True,
)

quiz = st.session_state.get("quiz")

# ── Attempt already running ───────────────────────────────────────────────────
if quiz is not None and not quiz.is_terminated:
    st.markdown(f"## 📝 {quiz.identity.test_name}")
    st.info(
        f"Attempt in progress: question {quiz.current_num}, "
        f"{format_time(quiz.remaining_seconds)} left."
    )
    col1, col2 = st.columns(2)
    with col1:
        if st.button("Resume Test", use_container_width=True):
            st.switch_page("pages/1_Take_Test.py")
    with col2:
        if st.button("Abandon Attempt", use_container_width=True):
            quiz.teardown()
            st.session_state.pop("quiz", None)
            st.rerun()
    st.stop()

# ── Launcher ──────────────────────────────────────────────────────────────────
st.markdown("## 📝 Start a Test")

with st.form("start_form"):
    test_id = st.number_input("Test ID", min_value=1, step=1, value=1)
    user_id = st.text_input("User ID")
    test_name = st.text_input("Test name", placeholder="Mock Test 1")
    duration = st.number_input("Duration (minutes)", min_value=1, step=1, value=60)
    db_file = st.text_input("Question bank (db file)")
    start_at = st.number_input("Start at question", min_value=1, step=1, value=1)
    submitted = st.form_submit_button("Start Test")

if submitted:
    if not user_id.strip() or not db_file.strip():
        st.error("User ID and question bank are required.")
    else:
        previous = st.session_state.pop("quiz", None)
        if previous is not None:
            previous.teardown()
        identity = SessionIdentity(
            test_id=int(test_id),
            user_id=user_id.strip(),
            test_name=test_name.strip() or f"Test {int(test_id)}",
            duration_minutes=int(duration),
            db_file=db_file.strip(),
        )
        quiz = QuestionSessionController(identity, question_num=int(start_at))
        st.session_state["quiz"] = quiz
        st.session_state.pop("last_tick", None)
        quiz.start()
        st.switch_page("pages/1_Take_Test.py")
