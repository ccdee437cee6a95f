"""
Tests for the Creation and Edit View form state.

These tests verify that:
- Invalid drafts keep submit disabled and never reach the network
- Valid drafts issue exactly one request whose body matches the draft
- Both views stay on the form after a failed request
- The Edit View never populates its form when loading fails
"""

from unittest.mock import Mock

import pytest

from receitas.client import KIND_STATUS, KIND_TRANSPORT, RecipeClient, RecipeServiceError
from receitas.forms import CreationForm, DraftForm, EditForm, LoadPhase, SubmitPhase
from receitas.models import Recipe, RecipeDraft, empty_draft


@pytest.fixture
def client():
    return Mock(spec=RecipeClient)


class TestSubmitPhase:
    """Test the submit control state machine shared by both forms."""

    def test_new_form_starts_disabled(self, client):
        form = CreationForm(client)
        assert form.draft == empty_draft()
        assert form.phase == SubmitPhase.DISABLED
        assert not form.can_submit

    def test_base_form_cannot_be_instantiated(self, client):
        with pytest.raises(TypeError):
            DraftForm(client)

    def test_valid_draft_enables_submit(self, client, bolo_values):
        form = CreationForm(client)
        form.update(bolo_values)
        assert form.phase == SubmitPhase.IDLE
        assert form.can_submit
        assert form.errors == {}

    def test_field_change_revalidates(self, client, bolo_values):
        form = CreationForm(client)
        form.update(bolo_values)
        form.update_field("titulo", "")
        assert form.phase == SubmitPhase.DISABLED
        assert form.errors == {"titulo": "Título é obrigatório"}
        form.update_field("titulo", "Bolo de fubá")
        assert form.phase == SubmitPhase.IDLE

    def test_unknown_field_is_rejected(self, client):
        form = CreationForm(client)
        with pytest.raises(KeyError):
            form.update_field("calorias", 300)

    def test_only_touched_fields_show_errors(self, client):
        form = CreationForm(client)
        assert form.visible_errors == {}
        form.update_field("titulo", "x")
        form.update_field("titulo", "")
        assert form.visible_errors == {"titulo": "Título é obrigatório"}

    def test_phase_is_submitting_during_request(self, client, bolo_values):
        form = CreationForm(client)
        form.update(bolo_values)
        seen = {}

        def create(draft):
            seen["phase"] = form.phase
            seen["label"] = form.button_label
            seen["can_submit"] = form.can_submit

        client.create_recipe.side_effect = create
        form.submit()
        assert seen == {"phase": SubmitPhase.SUBMITTING, "label": "Cadastrando...", "can_submit": False}


class TestCreationForm:
    """Test cases for the Creation View."""

    @pytest.mark.parametrize("bad_field, bad_value", [
        ("titulo", ""),
        ("tipo", ""),
        ("num_pessoas", 0),
        ("nivel_dificuldade", ""),
        ("lista_ingredientes", ""),
        ("preparacao", ""),
    ])
    def test_invalid_draft_never_reaches_network(self, client, bolo_values, bad_field, bad_value):
        form = CreationForm(client)
        form.update({**bolo_values, bad_field: bad_value})
        outcome = form.submit()
        assert outcome.sent is False
        client.create_recipe.assert_not_called()

    def test_valid_draft_posts_exactly_once(self, client, bolo_values):
        form = CreationForm(client)
        form.update(bolo_values)
        outcome = form.submit()

        client.create_recipe.assert_called_once()
        sent = client.create_recipe.call_args.args[0]
        assert isinstance(sent, RecipeDraft)
        assert sent.model_dump() == bolo_values
        assert outcome.sent and outcome.succeeded

    def test_success_clears_draft_and_navigates(self, client, bolo_values):
        form = CreationForm(client)
        form.update(bolo_values)
        outcome = form.submit()

        assert form.draft == empty_draft()
        assert form.touched == set()
        assert outcome.navigate_to == "/"
        assert outcome.notification.level == "success"

    def test_failure_stays_on_form_with_draft(self, client, bolo_values):
        """Test that a failed create keeps the draft and does not navigate."""
        client.create_recipe.side_effect = RecipeServiceError("down", kind=KIND_TRANSPORT)
        form = CreationForm(client)
        form.update(bolo_values)
        outcome = form.submit()

        assert outcome.sent and not outcome.succeeded
        assert outcome.navigate_to is None
        assert outcome.notification.is_error
        assert form.draft == bolo_values
        assert form.phase == SubmitPhase.IDLE
        assert form.can_submit


class TestEditForm:
    """Test cases for the Edit View."""

    def test_starts_loading_and_cannot_submit(self, client):
        form = EditForm(client, "1")
        assert form.load_phase == LoadPhase.LOADING
        assert not form.can_submit
        assert form.submit().sent is False
        client.replace_recipe.assert_not_called()

    def test_initialize_populates_full_record(self, client, bolo_values):
        client.get_recipe.return_value = Recipe(id="1", **bolo_values)
        form = EditForm(client, "1")
        assert form.initialize() is None

        client.get_recipe.assert_called_once_with("1")
        assert form.load_phase == LoadPhase.READY
        assert form.draft == {"id": "1", **bolo_values}
        assert form.can_submit

    def test_initialize_runs_once(self, client, bolo_values):
        client.get_recipe.return_value = Recipe(id="1", **bolo_values)
        form = EditForm(client, "1")
        form.initialize()
        form.initialize()
        assert client.get_recipe.call_count == 1

    def test_not_found_never_populates_form(self, client):
        """Scenario: the server 404s; the form stays empty and the error is reported."""
        client.get_recipe.side_effect = RecipeServiceError("missing", kind=KIND_STATUS, status_code=404)
        form = EditForm(client, "1")
        notification = form.initialize()

        assert form.load_phase == LoadPhase.FAILED
        assert notification is not None and notification.is_error
        assert form.draft == empty_draft()
        assert not form.can_submit
        assert form.initialize() is None
        assert client.get_recipe.call_count == 1

    def test_submit_replaces_with_full_draft(self, client, bolo_values):
        client.get_recipe.return_value = Recipe(id="1", **bolo_values)
        form = EditForm(client, "1")
        form.initialize()
        form.update_field("num_pessoas", 12)
        outcome = form.submit()

        client.replace_recipe.assert_called_once()
        recipe_id, record = client.replace_recipe.call_args.args
        assert recipe_id == "1"
        assert record.model_dump() == {**bolo_values, "id": "1", "num_pessoas": 12}
        assert outcome.succeeded
        assert outcome.navigate_to == "/"
        assert outcome.notification.title == "Sucesso"

    def test_invalid_edit_is_blocked(self, client, bolo_values):
        client.get_recipe.return_value = Recipe(id="1", **bolo_values)
        form = EditForm(client, "1")
        form.initialize()
        form.update_field("num_pessoas", 0)
        assert form.phase == SubmitPhase.DISABLED
        assert form.submit().sent is False
        client.replace_recipe.assert_not_called()

    def test_failed_replace_stays_editable(self, client, bolo_values):
        client.get_recipe.return_value = Recipe(id="1", **bolo_values)
        client.replace_recipe.side_effect = RecipeServiceError("boom", kind=KIND_STATUS, status_code=500)
        form = EditForm(client, "1")
        form.initialize()
        form.update_field("titulo", "Bolo de laranja")
        outcome = form.submit()

        assert not outcome.succeeded
        assert outcome.navigate_to is None
        assert outcome.notification.is_error
        assert form.draft["titulo"] == "Bolo de laranja"
        assert form.phase == SubmitPhase.IDLE
