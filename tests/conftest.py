"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from shoplist.config import Settings, get_settings
from shoplist.main import app

# =============================================================================
# Ingredient Line Fixtures
# =============================================================================


@pytest.fixture
def recipe_lines():
    """Ingredient lines as pasted from a typical recipe."""
    return [
        "- 2 cups flour",
        "• 1/2 tsp salt, chopped",
        "400g chicken breast",
        "water",
        "",
        "a pinch of salt",
        "2-3 onions, sliced",
        "1 cup water",
        "3) ¾ cup sugar",
    ]


@pytest.fixture
def structured_ingredients():
    """Recipe ingredients in the name/quantity/notes object format."""
    return [
        {"name": "flour", "quantity": "2 cups"},
        {"name": "butter", "quantity": "1 tbsp", "notes": "room temperature"},
        {"name": "eggs"},
        {"quantity": "1"},
    ]


# =============================================================================
# API Fixtures
# =============================================================================


@pytest.fixture
def client():
    """Test client for the FastAPI app."""
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def small_import_limit():
    """Override settings so imports are capped at two items."""
    app.dependency_overrides[get_settings] = lambda: Settings(max_import_items=2)
    yield
    app.dependency_overrides.pop(get_settings, None)


@pytest.fixture
def small_batch_limit():
    """Override settings so parse-batch accepts at most two lines."""
    app.dependency_overrides[get_settings] = lambda: Settings(max_batch_lines=2)
    yield
    app.dependency_overrides.pop(get_settings, None)
