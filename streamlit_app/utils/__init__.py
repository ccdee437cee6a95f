"""
Utility modules for the Streamlit frontend.

This package contains:
- api_client: Shared collection service client
- state: Navigation and per-view session state helpers
- ui_components: Recipe form fields and detail rendering
"""
