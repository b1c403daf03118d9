"""
Results screen — metrics, transcript, feedback explanation, rating.
"""

import streamlit as st

from src.core.models import FeedbackRating
from src.services.session import SessionController, feedback_explanation


def _metric_tile(label: str, value: str) -> None:
    with st.container(border=True):
        st.caption(label)
        st.markdown(f"### {value}")


def render_results(controller: SessionController) -> None:
    """Render the results of the finished session."""
    state = controller.state
    analysis = state.analysis

    st.title("Recording Complete!")

    st.subheader("General metrics")
    _metric_tile("Question statements", str(analysis.question_count))
    _metric_tile("Talking time", f"{analysis.talking_time_percentage}%")
    _metric_tile("Check for understanding", str(analysis.check_understanding_count))

    st.write(f"Transcript: {state.transcript}")

    with st.container(border=True):
        st.subheader("Feedback Explanation")
        st.write(feedback_explanation(state))
        st.caption("Rate this feedback:")
        col_up, col_down = st.columns(2)
        with col_up:
            if st.button("\U0001f44d", use_container_width=True):
                st.toast(controller.rate_feedback(FeedbackRating.positive))
        with col_down:
            if st.button("\U0001f44e", use_container_width=True):
                st.toast(controller.rate_feedback(FeedbackRating.negative))

    if st.button("Finish", type="primary", use_container_width=True):
        controller.reset()
        st.rerun()
