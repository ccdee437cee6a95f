"""
Creation and Edit View state.

Both form views hold a draft (a plain dict of the six recipe fields, plus the
identifier when editing) that is re-validated on every change. The submit
control follows one state machine:

    IDLE <-> DISABLED      while the validator rejects / accepts the draft
    IDLE --> SUBMITTING --> IDLE (or DISABLED) once the request settles

Failure policy is the same for both views: a failed request produces an error
notification and the user stays on the form with the draft intact. Only a
successful request navigates back to the collection.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Set

from receitas import notifications
from receitas.client import RecipeClient, RecipeServiceError
from receitas.models import (
    DRAFT_FIELDS,
    DraftValidation,
    Recipe,
    RecipeDraft,
    empty_draft,
    validate_draft,
)
from receitas.notifications import Notification
from receitas.routes import COLLECTION_ROUTE

logger = logging.getLogger(__name__)


class SubmitPhase(str, Enum):
    IDLE = "idle"
    DISABLED = "disabled"
    SUBMITTING = "submitting"


class LoadPhase(str, Enum):
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


@dataclass
class SubmitOutcome:
    """What happened on submit and what the UI should do next."""
    sent: bool
    succeeded: bool = False
    navigate_to: Optional[str] = None
    notification: Optional[Notification] = None


class DraftForm(ABC):
    """Shared draft handling for the two form views."""

    submit_label = "Salvar"
    busy_label = "Salvando..."

    def __init__(self, client: RecipeClient, initial: Optional[Mapping[str, Any]] = None):
        self.client = client
        self.draft: Dict[str, Any] = dict(initial) if initial is not None else empty_draft()
        self.errors: Dict[str, str] = {}
        # Fields the user has changed; only their errors are shown
        self.touched: Set[str] = set()
        self.phase = SubmitPhase.IDLE
        self._revalidate()

    def _revalidate(self) -> DraftValidation:
        result = validate_draft(self.draft)
        self.errors = result.errors
        if self.phase != SubmitPhase.SUBMITTING:
            self.phase = SubmitPhase.IDLE if result.ok else SubmitPhase.DISABLED
        return result

    def _set(self, name: str, value: Any) -> None:
        if name not in DRAFT_FIELDS:
            raise KeyError(f"Unknown recipe field: {name}")
        if self.draft.get(name) != value:
            self.touched.add(name)
        self.draft[name] = value

    def update_field(self, name: str, value: Any) -> None:
        self._set(name, value)
        self._revalidate()

    def update(self, values: Mapping[str, Any]) -> None:
        """Apply several field changes at once (one re-validation)."""
        for name, value in values.items():
            self._set(name, value)
        self._revalidate()

    @property
    def visible_errors(self) -> Dict[str, str]:
        return {name: msg for name, msg in self.errors.items() if name in self.touched}

    @property
    def can_submit(self) -> bool:
        return self.phase == SubmitPhase.IDLE

    @property
    def button_label(self) -> str:
        return self.busy_label if self.phase == SubmitPhase.SUBMITTING else self.submit_label

    def submit(self) -> SubmitOutcome:
        """
        Send the draft if the validator accepts it.

        Returns:
            SubmitOutcome with sent=False when submission is blocked (invalid
            draft, or a request already in flight). No request is made then.
        """
        if not self.can_submit:
            return SubmitOutcome(sent=False)
        result = self._revalidate()
        if not result.ok:
            return SubmitOutcome(sent=False)

        self.phase = SubmitPhase.SUBMITTING
        try:
            return self._send(result.value)
        finally:
            self.phase = SubmitPhase.IDLE
            self._revalidate()

    @abstractmethod
    def _send(self, value: RecipeDraft) -> SubmitOutcome:
        """Issue the request for an accepted draft and report the outcome."""
        pass


class CreationForm(DraftForm):
    """Creation View: posts a new recipe to the collection service."""

    submit_label = "Cadastrar Receita"
    busy_label = "Cadastrando..."

    def _send(self, value: RecipeDraft) -> SubmitOutcome:
        try:
            self.client.create_recipe(value)
        except RecipeServiceError as e:
            logger.error("Erro ao cadastrar receita: %s", e)
            return SubmitOutcome(
                sent=True,
                notification=notifications.error("Falha ao cadastrar a receita. Tente novamente."),
            )
        self.draft = empty_draft()
        self.touched.clear()
        return SubmitOutcome(
            sent=True,
            succeeded=True,
            navigate_to=COLLECTION_ROUTE,
            notification=notifications.success("Receita cadastrada com sucesso!"),
        )


class EditForm(DraftForm):
    """
    Edit View: loads one recipe, then replaces it in full on submit.

    The form is only usable once load_phase is READY. A failed load is
    terminal for this view instance; there is no automatic retry.
    """

    submit_label = "Atualizar Receita"
    busy_label = "Atualizando..."

    def __init__(self, client: RecipeClient, recipe_id: str):
        self.recipe_id = recipe_id
        self.load_phase = LoadPhase.LOADING
        super().__init__(client)

    @property
    def can_submit(self) -> bool:
        return self.load_phase == LoadPhase.READY and super().can_submit

    def initialize(self) -> Optional[Notification]:
        """Read the recipe and populate the draft with the full record."""
        if self.load_phase != LoadPhase.LOADING:
            return None
        try:
            recipe = self.client.get_recipe(self.recipe_id)
        except RecipeServiceError as e:
            logger.error("Error fetching recipe %s: %s", self.recipe_id, e)
            self.load_phase = LoadPhase.FAILED
            return notifications.error("Falha ao carregar a receita. Tente novamente.")
        self.draft = recipe.draft_values()
        self.load_phase = LoadPhase.READY
        self._revalidate()
        return None

    def _send(self, value: RecipeDraft) -> SubmitOutcome:
        record = Recipe(id=self.draft.get("id") or self.recipe_id, **value.model_dump())
        try:
            self.client.replace_recipe(self.recipe_id, record)
        except RecipeServiceError as e:
            logger.error("Error updating recipe %s: %s", self.recipe_id, e)
            return SubmitOutcome(
                sent=True,
                notification=notifications.error("Falha ao atualizar a receita. Tente novamente."),
            )
        return SubmitOutcome(
            sent=True,
            succeeded=True,
            navigate_to=COLLECTION_ROUTE,
            notification=notifications.success("Receita atualizada com sucesso!"),
        )
