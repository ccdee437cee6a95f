"""
Backend API Client Module.

This module is the **single source of truth** for how the Streamlit views reach
the recipe collection service. Views never build URLs or call requests
directly; they receive the shared RecipeClient from get_client().

# NOTE: The client raises RecipeServiceError on any failure. Views catch it
    at the call site (through receitas.collection / receitas.forms) and report
    it with a toast, so nothing bubbles up to crash the Streamlit app.
"""

import streamlit as st

from receitas.client import RecipeClient
from receitas.config import ServiceConfig


def get_backend_url() -> str:
    """
    Get the collection service base URL.

    Returns:
        RECIPES_API_URL with trailing slash removed, or http://localhost:8000
        (the development service started with `uvicorn api.main:app`).
    """
    return ServiceConfig.get_base_url()


@st.cache_resource
def get_client() -> RecipeClient:
    """
    Build the RecipeClient once per Streamlit server process.

    The underlying requests.Session is reused across reruns and sessions.
    """
    return RecipeClient(get_backend_url(), timeout=ServiceConfig.get_timeout())
