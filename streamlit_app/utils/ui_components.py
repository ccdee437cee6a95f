"""
Reusable UI Components Module.

Recipe-specific widgets shared by the views:
- render_recipe_fields: the six form inputs used by both Creation and Edit views
- render_recipe_details: labelled read-only fields of the detail card
- render_submit_button: submit control driven by the form's submit phase
"""

from typing import Any, Dict, List, Optional, Tuple

import streamlit as st

from receitas.forms import DraftForm, SubmitOutcome
from receitas.models import DIFFICULTY_CHOICES, MEAL_TYPE_CHOICES, Recipe, choice_label
from ui.feedback import working_spinner


def _choice_options(choices: List[Tuple[str, str]], current: str) -> List[str]:
    options = [value for value, _ in choices]
    # Stored records may carry a value outside the fixed choices; keep it selectable
    if current and current not in options:
        options.append(current)
    return options


def _select(label: str, placeholder: str, choices: List[Tuple[str, str]], current: str, key: str) -> str:
    options = _choice_options(choices, current)
    selected = st.selectbox(
        label,
        options=options,
        index=options.index(current) if current in options else None,
        format_func=lambda v: choice_label(choices, v),
        placeholder=placeholder,
        key=key,
    )
    return selected or ""


def _field_error(form: DraftForm, name: str) -> None:
    message = form.visible_errors.get(name)
    if message:
        st.caption(f":red[{message}]")


def render_recipe_fields(form: DraftForm, key_prefix: str) -> Dict[str, Any]:
    """
    Render the recipe inputs pre-filled from the form's draft.

    Args:
        form: CreationForm or EditForm whose draft provides the initial values
        key_prefix: Widget key prefix, unique per view state instance

    Returns:
        Mapping of field name to the current widget value.
    """
    draft = form.draft
    values: Dict[str, Any] = {}

    col_title, col_type, col_people = st.columns([2, 1, 1])
    with col_title:
        values["titulo"] = st.text_input(
            "Título",
            value=draft.get("titulo", ""),
            placeholder="Digite o título da receita",
            key=f"{key_prefix}_titulo",
        )
        _field_error(form, "titulo")
    with col_type:
        values["tipo"] = _select(
            "Tipo",
            "Selecione o tipo de refeição",
            MEAL_TYPE_CHOICES,
            draft.get("tipo", ""),
            key=f"{key_prefix}_tipo",
        )
        _field_error(form, "tipo")
    with col_people:
        values["num_pessoas"] = int(st.number_input(
            "Número de Pessoas",
            min_value=1,
            step=1,
            value=max(int(draft.get("num_pessoas") or 1), 1),
            key=f"{key_prefix}_num_pessoas",
        ))
        _field_error(form, "num_pessoas")

    values["nivel_dificuldade"] = _select(
        "Nível de Dificuldade",
        "Selecione o nível de dificuldade",
        DIFFICULTY_CHOICES,
        draft.get("nivel_dificuldade", ""),
        key=f"{key_prefix}_nivel_dificuldade",
    )
    _field_error(form, "nivel_dificuldade")

    values["lista_ingredientes"] = st.text_area(
        "Lista de Ingredientes",
        value=draft.get("lista_ingredientes", ""),
        placeholder="Digite a lista de ingredientes",
        height=120,
        key=f"{key_prefix}_lista_ingredientes",
    )
    _field_error(form, "lista_ingredientes")

    values["preparacao"] = st.text_area(
        "Preparação",
        value=draft.get("preparacao", ""),
        placeholder="Digite o modo de preparo",
        height=150,
        key=f"{key_prefix}_preparacao",
    )
    _field_error(form, "preparacao")

    return values


def render_submit_button(form: DraftForm, key: str) -> Optional[SubmitOutcome]:
    """
    Render the submit control and run the submission when clicked.

    The button is disabled while the draft is invalid. While the request is in
    flight a spinner with the form's busy label is shown.

    Returns:
        The SubmitOutcome if the button was clicked this run, else None.
    """
    clicked = st.button(
        form.submit_label,
        type="primary",
        disabled=not form.can_submit,
        use_container_width=True,
        key=key,
    )
    if not clicked:
        return None
    with working_spinner(form.busy_label):
        return form.submit()


def render_recipe_details(recipe: Recipe) -> None:
    """Render the labelled fields of the detail card."""
    rows = [
        ("Tipo de Refeição:", choice_label(MEAL_TYPE_CHOICES, recipe.tipo)),
        ("N° de Pessoas que serve:", str(recipe.num_pessoas)),
        ("Dificuldade:", choice_label(DIFFICULTY_CHOICES, recipe.nivel_dificuldade)),
    ]
    for label, value in rows:
        st.markdown(f"**{label}** {value}")

    st.markdown("**Lista de Ingredientes:**")
    st.text(recipe.lista_ingredientes)
    st.markdown("**Modo de Preparo:**")
    st.text(recipe.preparacao)
