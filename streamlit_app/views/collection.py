"""
Collection View ("/").

Lists every recipe, shows the selected one in a detail card and runs the
two-step delete confirmation. All state changes go through CollectionState.
"""

import pandas as pd
import streamlit as st

from receitas.collection import CollectionState, DeleteFlow
from receitas.routes import NEW_ROUTE
from ui.feedback import queue_notification, show_empty_state, working_spinner
from ui.layout import card
from utils.api_client import get_client
from utils.state import get_view_state, navigate
from utils.ui_components import render_recipe_details


def _render_table(state: CollectionState) -> None:
    if not state.recipes:
        show_empty_state("Nenhuma receita encontrada.", "Cadastre a primeira receita para começar.")
        return

    df = pd.DataFrame({"Receita": [recipe.titulo for recipe in state.recipes]})
    event = st.dataframe(
        df,
        hide_index=True,
        use_container_width=True,
        on_select="rerun",
        selection_mode="single-row",
        # New key whenever the list changes so a stale row selection is dropped
        key=f"recipes_table_{state.revision}",
    )
    rows = event.selection.rows
    if rows:
        state.select_row(rows[0])


def _render_confirmation(state: CollectionState) -> None:
    with st.container(border=True):
        st.markdown("**Tem certeza que deseja excluir esta receita?**")
        st.caption(state.confirmation_text())
        col_cancel, col_confirm = st.columns(2)
        with col_cancel:
            if st.button("Cancelar", key="cancel_delete", use_container_width=True):
                state.cancel_delete()
                st.rerun()
        with col_confirm:
            if st.button("Excluir", key="confirm_delete", type="primary", use_container_width=True):
                with working_spinner("Excluindo…"):
                    queue_notification(state.confirm_delete())
                st.rerun()


def _render_detail(state: CollectionState) -> None:
    if state.active is None:
        st.write("Selecione uma receita para ver os detalhes.")
        return

    with card():
        col_title, col_edit, col_delete = st.columns([6, 1, 1])
        with col_title:
            st.markdown(f"### {state.detail_title}")
        with col_edit:
            if st.button("✏️", key="edit_recipe", help="Editar receita"):
                target = state.edit_target()
                if target:
                    navigate(target)
        with col_delete:
            if st.button(
                "🗑️",
                key="delete_recipe",
                help="Excluir receita",
                disabled=state.delete_flow != DeleteFlow.CLOSED,
            ):
                state.request_delete()
        render_recipe_details(state.active)

    if state.confirming:
        _render_confirmation(state)


def view(path: str) -> None:
    client = get_client()
    state = get_view_state(path, lambda: CollectionState(client))
    if not state.loaded:
        with working_spinner("Carregando receitas…"):
            state.load()

    col_list, col_detail = st.columns([1, 3], gap="medium")
    with col_list:
        if st.button("➕ Cadastrar Receita", key="new_recipe", use_container_width=True):
            navigate(NEW_ROUTE)
        _render_table(state)
    with col_detail:
        _render_detail(state)
