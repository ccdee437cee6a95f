"""
Collection View state.

Holds the last-loaded recipe list, the active (selected) recipe and the delete
confirmation flow. State is only changed through the named operations below;
the Streamlit page renders from it and calls these operations from its
widget handlers.

Deletion runs through three states:

    CLOSED --request_delete--> CONFIRMING --confirm_delete--> COMMITTING --> CLOSED
                               CONFIRMING --cancel_delete---> CLOSED

The local list is only changed after the remote delete has succeeded.
"""

import logging
from enum import Enum
from typing import List, Optional

from receitas import notifications
from receitas.client import RecipeClient, RecipeServiceError
from receitas.models import Recipe
from receitas.notifications import Notification
from receitas.routes import edit_route

logger = logging.getLogger(__name__)


class DeleteFlow(str, Enum):
    CLOSED = "closed"
    CONFIRMING = "confirming"
    COMMITTING = "committing"


class CollectionState:
    """Local state of the Collection View."""

    def __init__(self, client: RecipeClient):
        self.client = client
        self.recipes: List[Recipe] = []
        self.active: Optional[Recipe] = None
        self.delete_flow = DeleteFlow.CLOSED
        self.loaded = False
        # Bumped whenever the list changes so the table widget can reset its selection
        self.revision = 0

    def load(self) -> None:
        """
        Read the whole collection and keep it in server order.

        On failure the list is left empty; the failure is logged but not shown.
        """
        try:
            self.recipes = self.client.list_recipes()
        except RecipeServiceError as e:
            logger.error("Failed to load recipes: %s", e)
            self.recipes = []
        self.loaded = True
        self.revision += 1
        logger.debug("Loaded %d recipes", len(self.recipes))

    def find(self, recipe_id: str) -> Optional[Recipe]:
        for recipe in self.recipes:
            if recipe.id == recipe_id:
                return recipe
        return None

    def select(self, recipe_id: str) -> bool:
        """
        Make the recipe with this id active.

        Unknown ids leave the selection unchanged, and so does any selection
        while a delete is being confirmed or committed.
        """
        if self.delete_flow != DeleteFlow.CLOSED:
            return False
        recipe = self.find(recipe_id)
        if recipe is None:
            return False
        self.active = recipe
        return True

    def select_row(self, index: int) -> bool:
        """Select the recipe shown at this position of the list."""
        if not 0 <= index < len(self.recipes):
            return False
        return self.select(self.recipes[index].id)

    @property
    def detail_title(self) -> Optional[str]:
        """Header text of the detail card (the active title, uppercased)."""
        return self.active.titulo.upper() if self.active else None

    @property
    def confirming(self) -> bool:
        return self.delete_flow == DeleteFlow.CONFIRMING

    def request_delete(self) -> bool:
        """Open the confirmation prompt for the active recipe."""
        if self.active is None or self.delete_flow != DeleteFlow.CLOSED:
            return False
        self.delete_flow = DeleteFlow.CONFIRMING
        return True

    def cancel_delete(self) -> None:
        if self.delete_flow == DeleteFlow.CONFIRMING:
            self.delete_flow = DeleteFlow.CLOSED

    def confirmation_text(self) -> str:
        titulo = self.active.titulo if self.active else ""
        return (
            "Esta ação não pode ser desfeita. "
            f'Isso excluirá permanentemente a receita "{titulo}".'
        )

    def confirm_delete(self) -> Optional[Notification]:
        """
        Delete the active recipe on the collection service.

        On success the recipe is removed from the local list and the selection
        is cleared. On failure nothing local changes and an error notification
        is returned. The prompt is closed either way.
        """
        if self.delete_flow != DeleteFlow.CONFIRMING or self.active is None:
            self.delete_flow = DeleteFlow.CLOSED
            return None

        target = self.active
        self.delete_flow = DeleteFlow.COMMITTING
        try:
            self.client.delete_recipe(target.id)
        except RecipeServiceError as e:
            logger.error("Failed to delete recipe %s: %s", target.id, e)
            return notifications.error("Não foi possível excluir a receita. Tente novamente.")
        else:
            self.recipes = [r for r in self.recipes if r.id != target.id]
            self.active = None
            self.revision += 1
            return None
        finally:
            self.delete_flow = DeleteFlow.CLOSED

    def edit_target(self) -> Optional[str]:
        """Navigation path of the Edit View for the active recipe, if any."""
        if self.active is None:
            return None
        return edit_route(self.active.id)
