"""3_Results.py — Scores returned by the backend after submission."""
import streamlit as st

st.set_page_config(page_title="Results", page_icon="🏁", layout="centered")

quiz = st.session_state.get("quiz")
if quiz is None or quiz.result is None:
    st.warning("No submitted test to show.")
    st.page_link("Home.py", label="👉 Start a test")
    st.stop()

result = quiz.result
if quiz.notice:
    st.warning(quiz.notice, icon="⏰")

st.title("🏁 Test Submitted")
st.caption(f"{quiz.identity.test_name} · test {result.test_id} · user {result.user_id}")

scores = result.scores
if isinstance(scores, dict):
    scalars = {k: v for k, v in scores.items() if isinstance(v, (int, float, str))}
    nested = {k: v for k, v in scores.items() if k not in scalars}
    cols = st.columns(max(1, min(4, len(scalars))))
    for i, (name, value) in enumerate(scalars.items()):
        cols[i % len(cols)].metric(str(name).replace("_", " ").title(), value)
    if nested:
        st.json(nested)
elif isinstance(scores, list):
    st.dataframe(scores, use_container_width=True)
elif scores is not None:
    st.metric("Score", scores)
else:
    st.info("The backend did not return scores.")

if st.button("Start another test"):
    quiz.teardown()
    st.session_state.pop("quiz", None)
    st.session_state.pop("last_tick", None)
    st.switch_page("Home.py")
