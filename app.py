import streamlit as st

from src.config import configure_logging, data_path
from src.utils import load_players, DatasetError
from src.logics import (
    new_game, is_finished, current_player, facts_for, progress,
    apply_guess, apply_hint, skip, summary,
)

configure_logging()


# --- 1. DATA ---
@st.cache_data
def get_players(file_path):
    return load_players(file_path)


try:
    all_players = get_players(data_path())
except DatasetError as e:
    st.error(f"Player data not found: {e}")
    st.stop()

if 'quiz' not in st.session_state:
    st.session_state.quiz = new_game(all_players)
if 'feedback' not in st.session_state:
    st.session_state.feedback = None
if 'hint' not in st.session_state:
    st.session_state.hint = ""


# --- 2. HELPER FUNCTIONS ---

def fact_tile(icon, label, value):
    st.markdown(f"""
        <div style="background-color: #1f2937; padding: 12px; border-radius: 8px; color: white;
            margin-bottom: 10px; border: 1px solid rgba(255,255,255,0.1); display: flex; align-items: center; gap: 12px;">
            <span style="font-size: 1.8em;">{icon}</span>
            <div>
                <small style="opacity: 0.8; font-size: 0.75em; display: block;">{label}</small>
                <strong style="font-size: 1em; display: block;">{value}</strong>
            </div>
        </div>
    """, unsafe_allow_html=True)

def restart():
    st.session_state.quiz = new_game(all_players)
    st.session_state.feedback = None
    st.session_state.hint = ""

def handle_guess():
    guess = st.session_state.guess_input
    state, result = apply_guess(st.session_state.quiz, all_players, guess)
    if result.ignored:
        return
    st.session_state.quiz = state
    if result.correct:
        st.session_state.feedback = ("success", f"✅ Correct! **{result.player['name']}** (+{result.bonus})")
        st.session_state.hint = ""
    elif result.near_miss:
        st.session_state.feedback = ("warning", "🔥 Close! Check the spelling or take a hint.")
    else:
        st.session_state.feedback = ("error", "❌ Not quite. Try a hint!")
    st.session_state.guess_input = ""

def handle_hint():
    st.session_state.quiz, hint = apply_hint(st.session_state.quiz, all_players)
    st.session_state.hint = hint

def handle_skip():
    st.session_state.quiz, skipped = skip(st.session_state.quiz, all_players)
    st.session_state.feedback = ("info", f"ℹ️ It was: **{skipped['name']}**")
    st.session_state.hint = ""
    st.session_state.guess_input = ""


# --- 3. UI LAYOUT ---
st.title("⚽ Footy Quiz")

quiz = st.session_state.quiz
total = len(quiz.order)

m_col1, m_col2, m_col3 = st.columns(3)
m_col1.metric("Score", quiz.score)
m_col2.metric("Streak", quiz.streak)
m_col3.metric("Player", f"{min(quiz.index + 1, total)} / {total}")
st.progress(progress(quiz))

if st.session_state.feedback:
    kind, message = st.session_state.feedback
    getattr(st, kind)(message)

if is_finished(quiz):
    final = summary(quiz)
    fact_tile("🏁", "Finished!", f"Your score: {final.score} / Max {final.max_score}")
    st.caption(f"Players: {final.answered}/{total} | Final streak: {final.streak}")

    e_col1, e_col2 = st.columns(2)
    with e_col1:
        st.button("🔄 Play again", on_click=restart, use_container_width=True)
    with e_col2:
        with st.expander("Show players"):
            for p in all_players:
                st.write(p["name"])
else:
    player = current_player(quiz, all_players)
    for icon, label, value in facts_for(player):
        fact_tile(icon, label, value)

    if st.session_state.hint:
        st.info(f"Hint: {st.session_state.hint}")

    st.text_input("Who is it?", key="guess_input", on_change=handle_guess)

    b_col1, b_col2, b_col3 = st.columns(3)
    with b_col1:
        st.button("✔️ Check", on_click=handle_guess, use_container_width=True)
    with b_col2:
        st.button("💡 Hint", on_click=handle_hint, use_container_width=True)
    with b_col3:
        st.button("⏭️ Skip", on_click=handle_skip, use_container_width=True)
