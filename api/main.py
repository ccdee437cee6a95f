"""
Development stand-in for the recipe collection service.

This FastAPI application serves the same REST contract as the hosted
collection the Streamlit client talks to, backed by an in-memory store:
- GET /api/receita: List all recipes in insertion order
- GET /api/receita/{id}: Get one recipe
- POST /api/receita: Create a recipe (the service assigns the id)
- PUT /api/receita/{id}: Replace every field of a recipe
- DELETE /api/receita/{id}: Delete a recipe (returns the deleted record)

Bodies are validated with the same schema the client uses for its forms, so
an invalid record is rejected with 422.

Run the service with:
    uvicorn api.main:app --reload

and point the client at it with RECIPES_API_URL=http://localhost:8000.
"""

# Import config early to load .env file before any other code accesses environment variables
from receitas.config import configure_logging

import logging
import time
from typing import List

from fastapi import FastAPI, HTTPException, status

from receitas.models import Recipe, RecipeDraft
from receitas.store import RecipeStore

logger = logging.getLogger(__name__)

# Track app start time for uptime calculation
_APP_START_TIME = time.time()

app = FastAPI(
    title="Receitas Collection Service",
    description="In-memory recipe collection for local development of the Receitas client",
    version="1.0.0",
    tags_metadata=[
        {
            "name": "receitas",
            "description": "Create, read, replace and delete recipes.",
        },
        {
            "name": "health",
            "description": "Health check and monitoring endpoints.",
        },
    ],
)

configure_logging()

store = RecipeStore()


def _not_found(recipe_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Recipe '{recipe_id}' not found."
    )


@app.get(
    "/api/receita",
    response_model=List[Recipe],
    tags=["receitas"],
    summary="List recipes",
)
def list_recipes() -> List[Recipe]:
    """Return every recipe in insertion order."""
    return store.list()


@app.get(
    "/api/receita/{recipe_id}",
    response_model=Recipe,
    tags=["receitas"],
    summary="Get one recipe",
)
def get_recipe(recipe_id: str) -> Recipe:
    recipe = store.get(recipe_id)
    if recipe is None:
        raise _not_found(recipe_id)
    return recipe


@app.post(
    "/api/receita",
    response_model=Recipe,
    status_code=status.HTTP_201_CREATED,
    tags=["receitas"],
    summary="Create a recipe",
)
def create_recipe(payload: RecipeDraft) -> Recipe:
    """
    Create a recipe from a body without identifier.

    Returns:
        The stored recipe including its newly assigned id.
    """
    recipe = store.create(payload)
    logger.info("Created recipe %s (%r)", recipe.id, recipe.titulo)
    return recipe


@app.put(
    "/api/receita/{recipe_id}",
    response_model=Recipe,
    tags=["receitas"],
    summary="Replace a recipe",
)
def replace_recipe(recipe_id: str, payload: RecipeDraft) -> Recipe:
    """
    Replace every field of an existing recipe.

    The id in the path is authoritative; an id in the body is ignored.

    Raises:
        HTTPException 404: If no recipe has this id
    """
    recipe = store.replace(recipe_id, payload)
    if recipe is None:
        raise _not_found(recipe_id)
    logger.info("Replaced recipe %s", recipe_id)
    return recipe


@app.delete(
    "/api/receita/{recipe_id}",
    response_model=Recipe,
    tags=["receitas"],
    summary="Delete a recipe",
)
def delete_recipe(recipe_id: str) -> Recipe:
    recipe = store.delete(recipe_id)
    if recipe is None:
        raise _not_found(recipe_id)
    logger.info("Deleted recipe %s", recipe_id)
    return recipe


@app.get("/health", tags=["health"])
def health():
    """
    Health check endpoint for monitoring and status checks.

    Returns:
        Dictionary with status, service metadata, uptime and record count.
    """
    return {
        "status": "ok",
        "name": "Receitas Collection Service",
        "version": "1.0.0",
        "uptime_seconds": int(time.time() - _APP_START_TIME),
        "recipe_count": len(store.list()),
    }


@app.get("/")
def root():
    """Root endpoint providing service information."""
    return {
        "name": "Receitas Collection Service",
        "version": "1.0.0",
        "docs": "/docs",
    }
