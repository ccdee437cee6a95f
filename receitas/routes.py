"""
Navigation paths between the views.

    /              Collection View
    /new           Creation View
    /editar/{id}   Edit View (id is the opaque recipe identifier)

The identifier is the only thing handed from one view to another; it is
passed through as-is.
"""

from dataclasses import dataclass
from typing import Optional

COLLECTION_ROUTE = "/"
NEW_ROUTE = "/new"
EDIT_PREFIX = "/editar/"

VIEW_COLLECTION = "collection"
VIEW_NEW = "new"
VIEW_EDIT = "edit"


@dataclass(frozen=True)
class Route:
    view: str
    recipe_id: Optional[str] = None


def edit_route(recipe_id: str) -> str:
    return f"{EDIT_PREFIX}{recipe_id}"


def parse_route(path: Optional[str]) -> Route:
    """
    Resolve a navigation path to a view.

    Unknown or empty paths (and /editar/ without an id) resolve to the
    Collection View.
    """
    if not path:
        return Route(VIEW_COLLECTION)
    if path.rstrip("/") == NEW_ROUTE:
        return Route(VIEW_NEW)
    if path.startswith(EDIT_PREFIX):
        recipe_id = path[len(EDIT_PREFIX):]
        if recipe_id:
            return Route(VIEW_EDIT, recipe_id)
    return Route(VIEW_COLLECTION)
