"""Creation View ("/new"): fill a draft and post it as a new recipe."""

import streamlit as st

from receitas.forms import CreationForm
from receitas.routes import COLLECTION_ROUTE
from ui.feedback import queue_notification
from ui.layout import card, page_header
from utils.api_client import get_client
from utils.state import get_view_state, navigate
from utils.ui_components import render_recipe_fields, render_submit_button


def view(path: str) -> None:
    client = get_client()
    form = get_view_state(path, lambda: CreationForm(client))
    key_prefix = f"new_{id(form)}"

    page_header("Cadastro de Receita")
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
