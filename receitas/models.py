"""
Recipe models and the shared record validator.

This module defines the canonical recipe schema used throughout the client.
The same pydantic models validate form drafts (before anything is sent to the
collection service) and server responses (before anything enters view state).

# NOTE: The collection service owns the identifier. RecipeDraft is the shape
    sent on create; Recipe adds the identifier and is the shape returned by
    list/get and sent on replace.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

# Wire values offered by the forms, with their display labels
MEAL_TYPE_CHOICES: List[Tuple[str, str]] = [
    ("cafe", "Café da Manhã"),
    ("almoco", "Almoço"),
    ("jantar", "Jantar"),
    ("lanche", "Lanche"),
]

DIFFICULTY_CHOICES: List[Tuple[str, str]] = [
    ("facil", "Fácil"),
    ("medio", "Médio"),
    ("dificil", "Difícil"),
]

DRAFT_FIELDS = (
    "titulo",
    "tipo",
    "num_pessoas",
    "nivel_dificuldade",
    "lista_ingredientes",
    "preparacao",
)

FIELD_MESSAGES: Dict[str, str] = {
    "titulo": "Título é obrigatório",
    "tipo": "Tipo é obrigatório",
    "num_pessoas": "Número de pessoas deve ser pelo menos 1",
    "nivel_dificuldade": "Nível de dificuldade é obrigatório",
    "lista_ingredientes": "Lista de ingredientes é obrigatória",
    "preparacao": "Preparação é obrigatória",
}

NOT_AN_INTEGER_MESSAGE = "Número de pessoas deve ser um número inteiro"

_INTEGER_ERROR_TYPES = {"int_type", "int_parsing", "int_from_float"}


class RecipeDraft(BaseModel):
    """
    Recipe fields as edited in the forms and sent on create.

    Every text field must be non-empty and num_pessoas must be an integer >= 1.
    There are no cross-field rules.
    """
    titulo: str = Field(..., min_length=1, description="Recipe title")
    tipo: str = Field(..., min_length=1, description="Meal type (cafe, almoco, jantar, lanche)")
    # Strict: "3", True and 2.0 are not a number of people
    num_pessoas: int = Field(..., ge=1, strict=True, description="Number of people served")
    nivel_dificuldade: str = Field(..., min_length=1, description="Difficulty (facil, medio, dificil)")
    lista_ingredientes: str = Field(..., min_length=1, description="Ingredient list, one per line")
    preparacao: str = Field(..., min_length=1, description="Preparation steps")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "titulo": "Bolo de cenoura",
                "tipo": "lanche",
                "num_pessoas": 8,
                "nivel_dificuldade": "facil",
                "lista_ingredientes": "3 cenouras\n4 ovos\n2 xícaras de açúcar",
                "preparacao": "Bata tudo no liquidificador e asse por 40 minutos.",
            }
        }
    )


class Recipe(RecipeDraft):
    """A persisted recipe, identified by an opaque id assigned by the collection service."""
    id: str = Field(..., min_length=1, description="Identifier assigned by the collection service")

    @field_validator("id", mode="before")
    @classmethod
    def id_as_string(cls, v: Any) -> Any:
        # Some stores hand out numeric ids; they are kept as opaque strings
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    def draft_values(self) -> Dict[str, Any]:
        """Return the record as a draft mapping, identifier included."""
        return self.model_dump()


@dataclass
class DraftValidation:
    """Result of validating a candidate draft: an accepted value or per-field errors."""
    value: Optional[RecipeDraft] = None
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.value is not None and not self.errors


def empty_draft() -> Dict[str, Any]:
    """Initial form values: empty text everywhere and one person served."""
    return {
        "titulo": "",
        "tipo": "",
        "num_pessoas": 1,
        "nivel_dificuldade": "",
        "lista_ingredientes": "",
        "preparacao": "",
    }


def _message_for(error: Dict[str, Any]) -> Optional[Tuple[str, str]]:
    loc = error.get("loc") or ()
    if not loc or loc[0] not in FIELD_MESSAGES:
        return None
    field_name = loc[0]
    if field_name == "num_pessoas" and error.get("type") in _INTEGER_ERROR_TYPES:
        return field_name, NOT_AN_INTEGER_MESSAGE
    return field_name, FIELD_MESSAGES[field_name]


def validate_draft(candidate: Mapping[str, Any]) -> DraftValidation:
    """
    Validate a (possibly partially filled) candidate record.

    Args:
        candidate: Mapping of field name to value. Unknown keys (including id)
                   are ignored; missing fields are reported as violations.

    Returns:
        DraftValidation holding either the accepted RecipeDraft or a mapping
        from field name to a human-readable message (one per invalid field).
    """
    values = {name: candidate[name] for name in DRAFT_FIELDS if name in candidate}
    try:
        return DraftValidation(value=RecipeDraft(**values))
    except ValidationError as exc:
        errors: Dict[str, str] = {}
        for error in exc.errors():
            mapped = _message_for(error)
            if mapped and mapped[0] not in errors:
                errors[mapped[0]] = mapped[1]
        return DraftValidation(errors=errors)


def choice_label(choices: List[Tuple[str, str]], value: str) -> str:
    """Display label for a wire value, falling back to the value itself."""
    for choice_value, label in choices:
        if choice_value == value:
            return label
    return value
