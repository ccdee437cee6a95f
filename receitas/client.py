"""
REST client for the recipe collection service.

This module is the single place where HTTP calls to the collection service are
made. Every view goes through RecipeClient.

Key principles:
- Success is decided only by the HTTP status class (2xx)
- Transport failures, non-2xx responses and malformed bodies all surface as
  RecipeServiceError, so call sites handle one exception type
- list/get responses are validated against the Recipe schema before they are
  returned; create/replace responses are informational only
- No retries and, unless configured, no client-side timeout

Endpoints:
    GET    /api/receita        -> list of Recipe
    GET    /api/receita/{id}   -> Recipe
    POST   /api/receita        -> created Recipe (body without id)
    PUT    /api/receita/{id}   -> updated Recipe (full body)
    DELETE /api/receita/{id}   -> empty / status only
"""

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests
from pydantic import ValidationError

from receitas.models import Recipe, RecipeDraft

logger = logging.getLogger(__name__)

COLLECTION_PATH = "/api/receita"

# Failure kinds
KIND_TRANSPORT = "transport"
KIND_STATUS = "status"
KIND_SHAPE = "shape"


class RecipeServiceError(Exception):
    """
    Raised when a call to the collection service does not succeed.

    Attributes:
        kind: "transport" (request could not complete), "status" (non-2xx
              response) or "shape" (body does not match the recipe schema)
        status_code: HTTP status when a response was received
        method: HTTP method of the failed call
        path: Request path of the failed call
    """

    def __init__(
        self,
        message: str,
        kind: str,
        status_code: Optional[int] = None,
        method: Optional[str] = None,
        path: Optional[str] = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.status_code = status_code
        self.method = method
        self.path = path


def recipe_path(recipe_id: str) -> str:
    """Path of a single recipe; the identifier is percent-encoded but otherwise passed through."""
    return f"{COLLECTION_PATH}/{quote(str(recipe_id), safe='')}"


def is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


class RecipeClient:
    """
    Thin client over the collection service.

    Args:
        base_url: Service base URL, e.g. http://localhost:8000
        timeout: Optional timeout in seconds; None relies on the transport default
        session: Object exposing request(method, url, json=..., timeout=...).
                 Defaults to a new requests.Session.
    """

    def __init__(self, base_url: str, timeout: Optional[float] = None, session: Any = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()

    def _request(self, method: str, path: str, payload: Optional[Dict[str, Any]] = None):
        url = f"{self.base_url}{path}"
        logger.debug("%s %s", method, url)
        try:
            response = self.session.request(method, url, json=payload, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise RecipeServiceError(
                f"Could not reach the collection service: {e}",
                kind=KIND_TRANSPORT,
                method=method,
                path=path,
            ) from e

        if not is_success(response.status_code):
            logger.warning("%s %s returned HTTP %d", method, path, response.status_code)
            raise RecipeServiceError(
                f"Collection service returned HTTP {response.status_code}",
                kind=KIND_STATUS,
                status_code=response.status_code,
                method=method,
                path=path,
            )
        return response

    def _shape_error(self, method: str, path: str, status_code: int, detail: Any) -> RecipeServiceError:
        logger.warning("%s %s returned an unexpected body: %s", method, path, detail)
        return RecipeServiceError(
            "Collection service returned a malformed recipe payload",
            kind=KIND_SHAPE,
            status_code=status_code,
            method=method,
            path=path,
        )

    def _parse_recipe(self, response, method: str, path: str) -> Recipe:
        try:
            return Recipe.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise self._shape_error(method, path, response.status_code, e) from e

    def _parse_optional_recipe(self, response, method: str, path: str) -> Optional[Recipe]:
        # Writes succeed on status alone; the echoed record is best-effort
        try:
            return Recipe.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.debug("%s %s: ignoring unparseable response body: %s", method, path, e)
            return None

    def list_recipes(self) -> List[Recipe]:
        """
        Read the entire collection.

        Returns:
            Recipes in server response order.

        Raises:
            RecipeServiceError: On transport failure, non-2xx status, or if any
                                element does not match the recipe schema.
        """
        response = self._request("GET", COLLECTION_PATH)
        try:
            data = response.json()
        except ValueError as e:
            raise self._shape_error("GET", COLLECTION_PATH, response.status_code, e) from e
        if not isinstance(data, list):
            raise self._shape_error(
                "GET", COLLECTION_PATH, response.status_code, f"expected a list, got {type(data).__name__}"
            )
        try:
            return [Recipe.model_validate(item) for item in data]
        except ValidationError as e:
            raise self._shape_error("GET", COLLECTION_PATH, response.status_code, e) from e

    def get_recipe(self, recipe_id: str) -> Recipe:
        """Read one recipe by identifier. Raises RecipeServiceError on any failure."""
        path = recipe_path(recipe_id)
        response = self._request("GET", path)
        return self._parse_recipe(response, "GET", path)

    def create_recipe(self, draft: RecipeDraft) -> Optional[Recipe]:
        """
        Create a recipe. The body never carries an identifier.

        Returns:
            The created Recipe as echoed by the service, or None if the echo
            could not be parsed (the create still succeeded).
        """
        payload = draft.model_dump(include=set(RecipeDraft.model_fields))
        response = self._request("POST", COLLECTION_PATH, payload)
        logger.info("Created recipe %r", draft.titulo)
        return self._parse_optional_recipe(response, "POST", COLLECTION_PATH)

    def replace_recipe(self, recipe_id: str, recipe: Recipe) -> Optional[Recipe]:
        """
        Fully replace the recipe addressed by recipe_id with the given record.

        Returns:
            The updated Recipe as echoed by the service, or None if unparseable.
        """
        path = recipe_path(recipe_id)
        response = self._request("PUT", path, recipe.model_dump())
        logger.info("Replaced recipe %s", recipe_id)
        return self._parse_optional_recipe(response, "PUT", path)

    def delete_recipe(self, recipe_id: str) -> None:
        """Delete the recipe addressed by recipe_id. Any 2xx counts as success."""
        path = recipe_path(recipe_id)
        self._request("DELETE", path)
        logger.info("Deleted recipe %s", recipe_id)
