"""
UI Components Module.

This module provides layout primitives and feedback helpers shared by the
Receitas Streamlit views.
"""

from ui.feedback import flush_notifications, queue_notification, show_error, working_spinner
from ui.layout import card, page_header

__all__ = [
    "flush_notifications",
    "queue_notification",
    "show_error",
    "working_spinner",
    "card",
    "page_header",
]
