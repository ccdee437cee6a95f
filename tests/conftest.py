"""Shared fixtures: sample recipes and an in-process collection service."""

import pytest
from fastapi.testclient import TestClient

from api.main import app, store
from receitas.client import RecipeClient


@pytest.fixture
def bolo_values():
    return {
        "titulo": "Bolo",
        "tipo": "lanche",
        "num_pessoas": 8,
        "nivel_dificuldade": "facil",
        "lista_ingredientes": "3 cenouras\n4 ovos",
        "preparacao": "Bata tudo e asse por 40 minutos.",
    }


@pytest.fixture
def sopa_values():
    return {
        "titulo": "Sopa de legumes",
        "tipo": "jantar",
        "num_pessoas": 4,
        "nivel_dificuldade": "medio",
        "lista_ingredientes": "2 batatas\n1 cenoura\n1 chuchu",
        "preparacao": "Cozinhe os legumes e bata no liquidificador.",
    }


@pytest.fixture
def service():
    """TestClient for the development collection service, with an empty store."""
    store.clear()
    yield TestClient(app)
    store.clear()


@pytest.fixture
def live_client(service):
    """RecipeClient talking to the development service in-process."""
    return RecipeClient("http://testserver", session=service)
