"""
Edit View ("/editar/{id}").

Loads the recipe named in the path, then lets the user replace it in full.
While the recipe is loading only a spinner is shown; if loading fails the
form is never rendered.
"""

import streamlit as st

from receitas.forms import EditForm, LoadPhase
from receitas.routes import COLLECTION_ROUTE, parse_route
from ui.feedback import queue_notification, show_error, working_spinner
from ui.layout import card, page_header
from utils.api_client import get_client
from utils.state import get_view_state, navigate
from utils.ui_components import render_recipe_fields, render_submit_button


def view(path: str) -> None:
    recipe_id = parse_route(path).recipe_id
    client = get_client()
    form = get_view_state(path, lambda: EditForm(client, recipe_id))
    key_prefix = f"edit_{id(form)}"

    if form.load_phase == LoadPhase.LOADING:
        with working_spinner("Carregando receita…"):
            queue_notification(form.initialize())

    page_header("Editar Receita")

    if form.load_phase == LoadPhase.FAILED:
        show_error(
            "Não foi possível carregar a receita.",
            hint="Verifique se a receita ainda existe e volte à lista.",
        )
        if st.button("Voltar", key=f"{key_prefix}_back_failed"):
            navigate(COLLECTION_ROUTE)
        return

    with card():
        form.update(render_recipe_fields(form, key_prefix))
        col_back, col_submit = st.columns(2)
        with col_back:
            if st.button("Voltar", key=f"{key_prefix}_back", use_container_width=True):
                navigate(COLLECTION_ROUTE)
        with col_submit:
            outcome = render_submit_button(form, key=f"{key_prefix}_submit")

    if outcome is None:
        return
    queue_notification(outcome.notification)
    if outcome.navigate_to:
        navigate(outcome.navigate_to)
