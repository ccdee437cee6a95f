"""
Navigation and View State Management Module.

This module wraps Streamlit's session_state and query params to provide a
clean API for the three views:

- The current navigation path ("/", "/new", "/editar/{id}") lives in the
  `path` query parameter, so the recipe identifier travels in the URL and a
  page reload lands on the same view.
- Each view keeps exactly one state object (CollectionState, CreationForm or
  EditForm) in session_state. The object is tied to the path it was created
  for and is discarded as soon as the path changes, so every visit to a view
  starts from a fresh fetch.

# NOTE: session_state lives only for the current browser session. Refreshing
    the page drops all view state; the path in the URL survives.
"""

from typing import Callable, TypeVar

import streamlit as st

from receitas.routes import COLLECTION_ROUTE

PATH_PARAM = "path"
VIEW_STATE_KEY = "view_state"
VIEW_PATH_KEY = "view_state_path"

T = TypeVar("T")


def current_path() -> str:
    """Current navigation path from the URL (defaults to the collection)."""
    path = st.query_params.get(PATH_PARAM)
    return path if path else COLLECTION_ROUTE


def get_view_state(path: str, factory: Callable[[], T]) -> T:
    """
    Get the state object of the view shown at `path`, creating it if needed.

    Args:
        path: Navigation path the state belongs to
        factory: Zero-argument callable building a fresh state object

    Returns:
        The existing state object when the path is unchanged, otherwise a new one.
    """
    if st.session_state.get(VIEW_PATH_KEY) != path or VIEW_STATE_KEY not in st.session_state:
        st.session_state[VIEW_STATE_KEY] = factory()
        st.session_state[VIEW_PATH_KEY] = path
    return st.session_state[VIEW_STATE_KEY]


def discard_view_state() -> None:
    st.session_state.pop(VIEW_STATE_KEY, None)
    st.session_state.pop(VIEW_PATH_KEY, None)


def navigate(path: str) -> None:
    """
    Switch to another view.

    Drops the current view's state, writes the new path to the URL and
    reruns the script. Does not return.
    """
    discard_view_state()
    st.query_params[PATH_PARAM] = path
    st.rerun()
