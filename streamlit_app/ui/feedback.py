"""
Standardized feedback utilities for consistent error, empty, and loading states.

Provides reusable components for displaying errors, empty states, loading
indicators and transient notifications across all views in a consistent manner.

Notifications are queued in session_state and shown as toasts by
flush_notifications(), which the app calls at the end of every run. A
notification queued right before a navigation therefore still shows up on the
view the user lands on.
"""

from contextlib import contextmanager
from typing import List, Optional

import streamlit as st

from receitas.notifications import Notification

NOTIFICATIONS_KEY = "pending_notifications"


def show_error(message: str, hint: Optional[str] = None) -> None:
    """
    Display a standardized error message with optional hint.

    Args:
        message: Main error message to display
        hint: Optional hint text to help users resolve the issue
    """
    st.error(f"⚠️ {message}")
    if hint:
        st.caption(f"💡 {hint}")


def show_empty_state(title: str, subtitle: Optional[str] = None) -> None:
    """
    Display a standardized empty state.

    Args:
        title: Main empty state title
        subtitle: Optional subtitle/description text
    """
    st.info(f"📭 **{title}**")
    if subtitle:
        st.caption(subtitle)


@contextmanager
def working_spinner(label: str = "Working…"):
    """
    Context manager wrapper for standardized loading spinners.

    Usage:
        with working_spinner("Carregando…"):
            # Do work here
            pass
    """
    with st.spinner(label):
        yield


def queue_notification(notification: Optional[Notification]) -> None:
    """Queue a notification for display as a toast (None is ignored)."""
    if notification is None:
        return
    pending: List[Notification] = st.session_state.setdefault(NOTIFICATIONS_KEY, [])
    pending.append(notification)


def flush_notifications() -> None:
    """Show and clear every queued notification."""
    pending: List[Notification] = st.session_state.pop(NOTIFICATIONS_KEY, [])
    for notification in pending:
        icon = "⚠️" if notification.is_error else "✅"
        st.toast(f"**{notification.title}**: {notification.description}", icon=icon)
