"""View modules for manual routing.

The app uses a small router in `app.py` driven by the `path` query parameter
instead of Streamlit's multi-page `pages/` folder, because the Edit View needs
the recipe identifier from the path. Each module exposes a `view(path)` function.
"""
