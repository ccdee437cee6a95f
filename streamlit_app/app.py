"""
Receitas - Streamlit Frontend Main Entry Point.

This is the main Streamlit application entry point. It sets up the page
configuration and logging, then routes to one of the three views based on
the `path` query parameter:

    /              Collection View (list, details, delete)
    /new           Creation View
    /editar/{id}   Edit View

Run with:
    streamlit run streamlit_app/app.py
"""

import sys
from pathlib import Path

# Ensure the streamlit_app directory is in the Python path
# This allows imports to work regardless of how the app is run
streamlit_app_dir = Path(__file__).parent
if str(streamlit_app_dir) not in sys.path:
    sys.path.insert(0, str(streamlit_app_dir))

# Add project root to path so we can import the receitas package
project_root = streamlit_app_dir.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Import config early to load .env file before any other code accesses environment variables
from receitas.config import configure_logging

import streamlit as st

from receitas.routes import VIEW_EDIT, VIEW_NEW, parse_route
from ui.feedback import flush_notifications
from utils.state import current_path
from views import collection, creation, edit

# Maps a view name from receitas.routes to its render function
VIEW_REGISTRY = {
    VIEW_NEW: creation.view,
    VIEW_EDIT: edit.view,
}


def main() -> None:
    """Configure the page, render the view for the current path, then show queued toasts."""
    configure_logging()

    # Page configuration - must be called before any other Streamlit commands
    st.set_page_config(
        page_title="Receitas",
        page_icon="🍲",
        layout="wide",
    )

    path = current_path()
    route = parse_route(path)
    render = VIEW_REGISTRY.get(route.view, collection.view)
    render(path)

    flush_notifications()


main()
