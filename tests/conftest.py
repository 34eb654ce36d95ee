"""
Shared fixtures: raw TheMealDB records and a mocked recipe source.
"""

from unittest.mock import Mock

import pytest

from mealfinder.connectors.base import BaseRecipeSource
from mealfinder.models import MealDetail, MealSummary

ARRABIATA_INSTRUCTIONS = (
    "Bring a large pot of water to a boil. Add kosher salt to the boiling water, "
    "then add the pasta. Cook according to the package instructions, about 9 minutes.\r\n"
    "In a large skillet over medium-high heat, add the olive oil and heat until the oil "
    "starts to shimmer. Add the garlic and cook, stirring, until fragrant, 1 to 2 minutes."
)


def _slot_fields(pairs):
    fields = {}
    for i in range(1, 21):
        ingredient, measure = pairs[i - 1] if i <= len(pairs) else ("", "")
        fields[f"strIngredient{i}"] = ingredient
        fields[f"strMeasure{i}"] = measure
    return fields


@pytest.fixture
def arrabiata_raw():
    """The search.php record for 'Spicy Arrabiata Penne'."""
    record = {
        "idMeal": "52771",
        "strMeal": "Spicy Arrabiata Penne",
        "strCategory": "Vegetarian",
        "strArea": "Italian",
        "strInstructions": ARRABIATA_INSTRUCTIONS,
        "strMealThumb": "https://www.themealdb.com/images/media/meals/ustsqw1468250014.jpg",
        "strTags": "Pasta,Curry",
    }
    record.update(_slot_fields([
        ("penne rigate", "1 pound"),
        ("olive oil", "1/4 cup"),
        ("garlic", "3 cloves"),
        ("chopped tomatoes", "1 tin "),
        ("red chilli flakes", "1/2 teaspoon"),
        ("italian seasoning", "1/2 teaspoon"),
        ("basil", "6 leaves"),
        ("Parmigiano-Reggiano", "sprinkling"),
    ]))
    return record


@pytest.fixture
def arrabiata(arrabiata_raw):
    return MealDetail.model_validate(arrabiata_raw)


@pytest.fixture
def salmon_summary():
    """A filter.php record: id, name and thumbnail only."""
    return MealSummary.model_validate({
        "idMeal": "52959",
        "strMeal": "Baked salmon with fennel & tomatoes",
        "strMealThumb": "https://www.themealdb.com/images/media/meals/1548772327.jpg",
    })


@pytest.fixture
def source():
    """A recipe source mock with harmless defaults."""
    mock_source = Mock(spec=BaseRecipeSource)
    mock_source.list_categories.return_value = ["Beef", "Seafood", "Vegetarian"]
    mock_source.search_by_name.return_value = []
    mock_source.filter_by_category.return_value = []
    mock_source.lookup_by_id.return_value = None
    return mock_source
