# streamlit_app.py — Tarotka UI: spreads, AI readings, journal and insights
# Run:  streamlit run streamlit_app.py

from __future__ import annotations

import os
import sys
from typing import Any, Dict, List

import streamlit as st

# Ensure repo root is importable when run from a checkout
REPO_ROOT = os.path.dirname(os.path.abspath(__file__))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from tarotka import tarot_core  # noqa: E402
from tarotka.insights import get_insights  # noqa: E402
from tarotka.logging_config import setup_logging  # noqa: E402
from tarotka.logic import perform_reading, save_reading  # noqa: E402
from tarotka.progress import ProgressStore  # noqa: E402
from tarotka.universe import UniverseClient  # noqa: E402


@st.cache_resource
def _store() -> ProgressStore:
    setup_logging()
    return ProgressStore()


@st.cache_resource
def _client() -> UniverseClient:
    return UniverseClient()


# -----------------------------
# Page setup
# -----------------------------
st.set_page_config(page_title="Tarotka", page_icon="🔮", layout="wide")
st.title("🔮 Tarotka")
st.caption("Vytáhni karty a nech si je vyložit.")

store = _store()

# -----------------------------
# Sidebar: progress, insights, style
# -----------------------------
record = store.record
st.sidebar.header("Tvoje cesta")
c1, c2 = st.sidebar.columns(2)
c1.metric("Série", record.streak_days)
c2.metric("Záznamy", record.journal_entries)

for insight in get_insights(record):
    st.sidebar.info(insight.text)

style = st.sidebar.radio(
    "Styl textů", options=["soft", "genz"],
    index=0 if record.user_microcopy_style == "soft" else 1, horizontal=True,
)
if style != record.user_microcopy_style:
    store.set_style(style)
    st.rerun()

if st.sidebar.button("🔥 Dnešní rituál splněn"):
    store.increase_streak()
    st.rerun()

# -----------------------------
# Main panel inputs
# -----------------------------
spreads = {s.id: s for s in tarot_core.list_spreads()}
spread_id = st.selectbox(
    "Výklad", options=list(spreads), format_func=lambda sid: f"{spreads[sid].name} ({spreads[sid].size})",
)
question = st.text_area("Tvoje otázka (nepovinné)", placeholder="Celkový výhled", height=80)

col_btn1, col_btn2 = st.columns([1, 1])
with col_btn1:
    run = st.button("🔀 Vytáhnout karty", use_container_width=True)
with col_btn2:
    clear = st.button("🧹 Vyčistit", use_container_width=True)

if clear:
    st.session_state.pop("reading_result", None)
    st.rerun()

if run:
    with st.spinner("Skládám tvůj příběh..."):
        st.session_state["reading_result"] = perform_reading(
            spread=spread_id, question=question or None, client=_client(),
        )

# -----------------------------
# Render output
# -----------------------------
result: Dict[str, Any] = st.session_state.get("reading_result")
if result:
    cards: List[Dict[str, Any]] = result["cards"]
    st.subheader(result["meta"]["spread_name"])
    if result["error"]:
        st.error(result["error"]["message"])

    cols = st.columns(min(len(cards), 4))
    for idx, (card, meaning) in enumerate(zip(cards, result["meanings"])):
        col = cols[idx % len(cols)]
        col.markdown(f"**{card['label']}** · {card['card_name_czech']} · `{card['orientation']}`")
        if os.path.isfile(card["image_path"]):
            col.image(card["image_path"], use_column_width=True)
        col.markdown(meaning)
        if col.button("📓 Uložit do deníku", key=f"save-{idx}"):
            drawn = tarot_core.DrawnCard(
                card=tarot_core.get_card(card["card_id"]),
                orientation=card["orientation"],
                label=card["label"],
            )
            save_reading(store, drawn)
            st.toast("Uloženo do deníku.")

# -----------------------------
# Journal
# -----------------------------
with st.expander("Deník"):
    for entry in reversed(record.journal_history):
        card = tarot_core.find_card(entry.card_id)
        st.markdown(f"**{card.display_name if card else entry.card_id}** · {entry.position} · {entry.date[:10]}")
        note = st.text_input("Poznámka", value=entry.note or "", key=f"note-{entry.id}")
        if note != (entry.note or ""):
            store.update_entry_note(entry.id, note)
