import logging

import streamlit as st

from review_engine.config import setup_logging
from review_engine.session import ReviewSession

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)

THEME_CSS = {
    "dark": "<style>.stApp { background-color: #0e1117; color: #fafafa; }</style>",
    "light": "<style>.stApp { background-color: #ffffff; color: #262730; }</style>",
}

#  Streamlit Page Config
st.set_page_config(page_title="DebugGPT", layout="wide")

if "review" not in st.session_state:
    st.session_state.review = ReviewSession()
session: ReviewSession = st.session_state.review

st.markdown(THEME_CSS[session.theme], unsafe_allow_html=True)

# --- Header ---
col_title, col_theme = st.columns([6, 1])
with col_title:
    st.markdown("## DebugGPT")
with col_theme:
    if st.button("☀️" if session.theme == "dark" else "🌙"):
        session.toggle_theme()
        st.rerun()

# --- Editor ---
session.code = st.text_area("Code", value=session.code, height=400, placeholder="Paste your code here...")

label = "Analyzing..." if session.is_analyzing else "Analyze Code"
if st.button(label, type="primary", disabled=not session.can_analyze()):
    session.analyze()
    with st.spinner("Analyzing..."):
        session.wait()
    logger.info("UI: analysis delivered (findings=%d, tips=%d)", len(session.findings), len(session.tips))

# --- Results ---
if session.language is not None:
    st.markdown(f"**Detected Language:** {session.language.value}")

if session.findings:
    st.markdown(f"### Issues Found ({len(session.findings)})")
    for finding in session.findings:
        with st.container(border=True):
            st.markdown(f"**Line {finding.line_number}: [{finding.severity.upper()}]**")
            if finding.snippet:
                st.code(finding.snippet)
            st.write(finding.message)
            st.markdown(f"*Suggestion:* {finding.suggestion}")

if session.tips:
    st.markdown(f"### Tips & Suggestions ({len(session.tips)})")
    for tip in session.tips:
        st.markdown(f"- {tip}")
