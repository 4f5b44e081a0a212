# app.py
# Run with: streamlit run app.py
import streamlit as st

from algorithms.similarity import get_similarity_ratings
from utils.config import settings
from utils.logger import logger
from utils.text_io import rank_labels, read_files_as_candidates, split_candidates

st.set_page_config(page_title="Similar String", layout="wide")
st.title("Similar String")
st.caption("LCS-based similarity: lcs(a, b) / max(len(a), len(b)). Compared code point by code point.")

target = st.text_input("Target", value="fight")
block = st.text_area("Candidates (one per line)", value="fill\nnight\nride", height=180)
uploads = st.file_uploader("...or upload .txt files (each file is one candidate)", type=["txt"], accept_multiple_files=True)

candidates = split_candidates(block)
labels = list(candidates)
file_texts, file_names = read_files_as_candidates(uploads)
candidates += file_texts
labels += file_names

if len(candidates) > settings.MAX_CANDIDATES:
    st.warning(f"Only the first {settings.MAX_CANDIDATES} candidates are scored.")
    candidates = candidates[:settings.MAX_CANDIDATES]
    labels = labels[:settings.MAX_CANDIDATES]

if st.button("Compare", type="primary"):
    ratings = get_similarity_ratings(target, candidates)
    if ratings is None:
        st.info("No candidates to compare.")
    else:
        rows = rank_labels(labels, ratings)
        best_label, best_ratio = rows[0]
        logger.info("streamlit: {} candidates, best ratio {:.4f}", len(candidates), best_ratio)
        st.metric("Best match", best_label[:80], f"{best_ratio:.{settings.SCORE_DIGITS}f}")
        st.dataframe(
            [{"candidate": label[:120], "similarity": round(r, settings.SCORE_DIGITS)} for label, r in rows],
            use_container_width=True,
        )
