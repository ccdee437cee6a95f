"""
Layout primitives for consistent page structure.

Provides reusable components for page headers and cards.
"""

from contextlib import contextmanager

import streamlit as st


def page_header(title: str) -> None:
    """Render a consistent page header."""
    st.markdown(f"# {title}")


@contextmanager
def card():
    """
    Context manager for a bordered card container.

    Usage:
        with card():
            st.write("Card content")
    """
    with st.container(border=True):
        yield
