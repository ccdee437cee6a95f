"""
Tests for the Collection View state.

This module tests:
- Loading the collection (success and silent failure)
- Selecting the active recipe and the uppercased detail title
- The CLOSED -> CONFIRMING -> COMMITTING -> CLOSED delete flow
- That the local list only changes after the remote delete succeeded
"""

from unittest.mock import Mock

import pytest

from receitas.client import KIND_STATUS, KIND_TRANSPORT, RecipeClient, RecipeServiceError
from receitas.collection import CollectionState, DeleteFlow
from receitas.models import Recipe


@pytest.fixture
def recipes(bolo_values, sopa_values):
    return [Recipe(id="1", **bolo_values), Recipe(id="2", **sopa_values)]


@pytest.fixture
def client(recipes):
    mock = Mock(spec=RecipeClient)
    mock.list_recipes.return_value = list(recipes)
    return mock


@pytest.fixture
def state(client):
    s = CollectionState(client)
    s.load()
    return s


class TestLoad:
    """Test cases for loading the collection."""

    def test_load_keeps_server_order(self, state, recipes):
        assert state.loaded
        assert state.recipes == recipes
        assert state.active is None

    def test_load_failure_leaves_list_empty(self):
        client = Mock(spec=RecipeClient)
        client.list_recipes.side_effect = RecipeServiceError("down", kind=KIND_TRANSPORT)
        state = CollectionState(client)
        state.load()
        assert state.loaded
        assert state.recipes == []

    def test_load_bumps_revision(self, client):
        state = CollectionState(client)
        before = state.revision
        state.load()
        assert state.revision == before + 1


class TestSelect:
    """Test cases for selecting the active recipe."""

    def test_select_shows_title_uppercased(self, bolo_values):
        """Scenario: list returns Bolo with id 1; selecting it shows BOLO in the header."""
        client = Mock(spec=RecipeClient)
        client.list_recipes.return_value = [Recipe(id="1", **bolo_values)]
        state = CollectionState(client)
        state.load()

        assert state.select("1") is True
        assert state.active.titulo == "Bolo"
        assert state.detail_title == "BOLO"

    def test_select_unknown_id_is_a_no_op(self, state):
        state.select("2")
        assert state.select("404") is False
        assert state.active.id == "2"

    def test_select_row_uses_list_position(self, state):
        assert state.select_row(1) is True
        assert state.active.id == "2"
        assert state.select_row(5) is False
        assert state.select_row(-1) is False
        assert state.active.id == "2"

    def test_selection_is_locked_while_confirming(self, state, client):
        """Test that picking another row during the prompt does not change the delete target."""
        state.select("1")
        state.request_delete()
        assert state.select("2") is False
        assert state.select_row(1) is False
        assert state.active.id == "1"

        state.confirm_delete()
        client.delete_recipe.assert_called_once_with("1")

    def test_selection_is_locked_while_committing(self, state, client):
        seen = {}

        def delete(recipe_id):
            seen["selected"] = state.select("2")

        client.delete_recipe.side_effect = delete
        state.select("1")
        state.request_delete()
        state.confirm_delete()
        assert seen == {"selected": False}
        assert state.select("2") is True

    def test_no_detail_title_without_selection(self, state):
        assert state.detail_title is None

    def test_edit_target_points_at_active_recipe(self, state, client):
        assert state.edit_target() is None
        state.select("2")
        assert state.edit_target() == "/editar/2"
        client.delete_recipe.assert_not_called()
        assert len(state.recipes) == 2


class TestDeleteFlow:
    """Test cases for the delete confirmation flow."""

    def test_request_delete_needs_active_recipe(self, state):
        assert state.request_delete() is False
        assert state.delete_flow == DeleteFlow.CLOSED

    def test_request_delete_opens_prompt_naming_title(self, state):
        state.select("1")
        assert state.request_delete() is True
        assert state.confirming
        assert '"Bolo"' in state.confirmation_text()

    def test_cancel_closes_prompt_without_request(self, state, client):
        state.select("1")
        state.request_delete()
        state.cancel_delete()
        assert state.delete_flow == DeleteFlow.CLOSED
        assert state.active.id == "1"
        client.delete_recipe.assert_not_called()

    def test_confirm_removes_exactly_the_active_recipe(self, state, client):
        """Test that a successful delete removes one id and clears the selection."""
        state.select("1")
        state.request_delete()
        notification = state.confirm_delete()

        client.delete_recipe.assert_called_once_with("1")
        assert notification is None
        assert [r.id for r in state.recipes] == ["2"]
        assert state.active is None
        assert state.delete_flow == DeleteFlow.CLOSED

    def test_local_list_changes_only_after_remote_success(self, state, client):
        """Test that during the remote call the list is untouched and the flow is COMMITTING."""
        seen = {}

        def delete(recipe_id):
            seen["ids"] = [r.id for r in state.recipes]
            seen["flow"] = state.delete_flow

        client.delete_recipe.side_effect = delete
        state.select("2")
        state.request_delete()
        state.confirm_delete()

        assert seen == {"ids": ["1", "2"], "flow": DeleteFlow.COMMITTING}
        assert [r.id for r in state.recipes] == ["1"]

    def test_failed_delete_keeps_list_and_reports(self, state, client, recipes):
        client.delete_recipe.side_effect = RecipeServiceError("boom", kind=KIND_STATUS, status_code=500)
        state.select("1")
        state.request_delete()
        notification = state.confirm_delete()

        assert notification is not None and notification.is_error
        assert state.recipes == recipes
        assert state.active.id == "1"
        assert state.delete_flow == DeleteFlow.CLOSED

    def test_confirm_without_prompt_does_nothing(self, state, client):
        state.select("1")
        assert state.confirm_delete() is None
        client.delete_recipe.assert_not_called()
        assert len(state.recipes) == 2
