"""
In-memory recipe store backing the development collection service.

Records are kept in insertion order and identified by sequential string ids,
the way the hosted mockapi.io collection hands them out.

Note: This is a process-local, non-persistent store for local development and
tests. Records are lost when the process restarts.
"""

import threading
from typing import Dict, List, Optional

from .models import Recipe, RecipeDraft


class RecipeStore:
    """Thread-safe in-memory collection of recipes."""

    def __init__(self):
        self._records: Dict[str, Recipe] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def list(self) -> List[Recipe]:
        with self._lock:
            return list(self._records.values())

    def get(self, recipe_id: str) -> Optional[Recipe]:
        with self._lock:
            return self._records.get(recipe_id)

    def create(self, draft: RecipeDraft) -> Recipe:
        """Store a new recipe under a freshly assigned id. Any id on the input is ignored."""
        with self._lock:
            recipe_id = str(self._next_id)
            self._next_id += 1
            values = draft.model_dump(include=set(RecipeDraft.model_fields))
            recipe = Recipe(id=recipe_id, **values)
            self._records[recipe_id] = recipe
            return recipe

    def replace(self, recipe_id: str, draft: RecipeDraft) -> Optional[Recipe]:
        """
        Replace every field of an existing recipe, keeping its id and position.

        Returns:
            The updated Recipe, or None if no recipe has this id.
        """
        with self._lock:
            if recipe_id not in self._records:
                return None
            values = draft.model_dump(include=set(RecipeDraft.model_fields))
            recipe = Recipe(id=recipe_id, **values)
            self._records[recipe_id] = recipe
            return recipe

    def delete(self, recipe_id: str) -> Optional[Recipe]:
        """Remove a recipe. Returns the removed record, or None if it did not exist."""
        with self._lock:
            return self._records.pop(recipe_id, None)

    def clear(self) -> None:
        with self._lock:
            self._records.clear()
            self._next_id = 1
