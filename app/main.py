"""
Streamlit Chat Front End for Personal Tracker

A chat-style window over the same command language as the console:
the user types a command, the bot answers in its own bubble.

DESIGN PRINCIPLES:
1. Same commands, same replies as the terminal
2. Every reply comes from the tracker, never from the page
3. User and bot are told apart by avatar and side
4. After BYE the conversation is closed

Run with:
    streamlit run app/main.py
"""

import streamlit as st

from tracker.config import get_settings
from tracker.orchestrator import Tracker, create_tracker
from tracker.services.storage import StorageError
from tracker.ui import BufferedUi


# Page configuration
st.set_page_config(
    page_title="Personal Tracker",
    page_icon="📝",
    layout="centered",
)


def get_tracker() -> Tracker:
    """Get or create this browser session's tracker."""
    if "tracker" not in st.session_state:
        settings = get_settings()
        ui = BufferedUi(bot_name=settings.bot_name)
        tracker = create_tracker(settings, ui=ui)
        tracker.ui.show_welcome()
        st.session_state.tracker = tracker
        st.session_state.history = [("assistant", ui.flush())]
    return st.session_state.tracker


def respond(tracker: Tracker, user_input: str) -> str:
    """Run one command and collect the bot's reply."""
    tracker.handle(user_input)
    return tracker.ui.flush()


def render_history(history: list[tuple[str, str]]) -> None:
    """Draw every message bubble so far."""
    settings = get_settings()
    avatars = {"user": settings.user_avatar, "assistant": settings.bot_avatar}
    for role, text in history:
        with st.chat_message(role, avatar=avatars[role]):
            st.text(text)


def main():
    """Main application entry point."""
    settings = get_settings()
    st.title(f"📝 {settings.bot_name}")
    st.caption(
        "Try: `TODO buy milk`, `DEADLINE return book /by 2024-01-01 18:00`, "
        "`EXPENSE 12.50 /dollars lunch /on 2024-01-01`, `LIST`, `BYE`"
    )

    try:
        tracker = get_tracker()
    except StorageError as e:
        st.error(f"Could not load saved data: {e}")
        st.stop()

    user_input = st.chat_input(
        "Type a command",
        disabled=tracker.finished,
    )
    if user_input:
        st.session_state.history.append(("user", user_input))
        st.session_state.history.append(("assistant", respond(tracker, user_input)))
        if tracker.finished:
            # Redraw so the chat input picks up its disabled state
            st.rerun()

    render_history(st.session_state.history)

    if tracker.finished:
        st.info("Session ended.")
        if st.button("Start over"):
            del st.session_state.tracker
            st.rerun()


if __name__ == "__main__":
    main()
