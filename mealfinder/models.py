"""
Meal models for the Meal Finder system.

This module defines the canonical meal schemas used throughout the app.
The connector parses raw TheMealDB JSON into these models; everything above the
connector (cards, detail modal, orchestrator) works with the models only.

# NOTE: TheMealDB uses camel-cased "str"/"id" prefixed keys (idMeal, strMeal, ...).
    Those keys are accepted as aliases, while Python code reads the snake-case
    field names.

Field availability per endpoint:
- search.php returns the full record (MealDetail shape)
- filter.php returns only idMeal, strMeal and strMealThumb
- lookup.php returns the full record
"""

from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Ingredient/measure slots are numbered 1..INGREDIENT_SLOT_COUNT in the API
INGREDIENT_SLOT_COUNT = 20


class MealSummary(BaseModel):
    """
    Partial recipe record returned by list/search/filter endpoints.

    Every field is optional because the filter endpoint omits most of them.
    """
    id: Optional[str] = Field(None, alias="idMeal", description="TheMealDB meal identifier")
    name: Optional[str] = Field(None, alias="strMeal", description="Meal title")
    thumbnail: Optional[str] = Field(None, alias="strMealThumb", description="URL to meal image")
    category: Optional[str] = Field(None, alias="strCategory", description="Meal category (e.g., 'Seafood')")
    area: Optional[str] = Field(None, alias="strArea", description="Cuisine area (e.g., 'Italian')")
    instructions: Optional[str] = Field(None, alias="strInstructions", description="Cooking instructions")

    model_config = ConfigDict(
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )

    @property
    def has_instructions(self) -> bool:
        """True when the record carries non-empty instructions text."""
        return bool(self.instructions)


class Ingredient(BaseModel):
    """A single ingredient line shown in the detail modal."""
    name: str
    measure: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    def display(self) -> str:
        if self.measure:
            return f"{self.name} - {self.measure}"
        return self.name


class IngredientSlot(BaseModel):
    """One numbered (ingredient, measure) pair from a full meal record."""
    index: int = Field(..., ge=1, le=INGREDIENT_SLOT_COUNT)
    ingredient: Optional[str] = None
    measure: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    def to_ingredient(self) -> Optional[Ingredient]:
        """
        Convert the slot to an Ingredient.

        Returns:
            None for blank slots. The measure is only kept when it is non-blank.
        """
        if not self.ingredient or not self.ingredient.strip():
            return None
        measure = self.measure if self.measure and self.measure.strip() else None
        return Ingredient(name=self.ingredient, measure=measure)


def empty_ingredient_slots() -> Tuple[IngredientSlot, ...]:
    return tuple(IngredientSlot(index=i) for i in range(1, INGREDIENT_SLOT_COUNT + 1))


class MealDetail(MealSummary):
    """
    Full recipe record: MealSummary plus the fixed ingredient slots.

    Raw strIngredientN/strMeasureN keys are folded into ingredient_slots when
    the model is built, so the rest of the app iterates a fixed-size tuple
    instead of looking up keys by index.
    """
    ingredient_slots: Tuple[IngredientSlot, ...] = Field(default_factory=empty_ingredient_slots)

    @model_validator(mode="before")
    @classmethod
    def _collect_ingredient_slots(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "ingredient_slots" in data:
            return data
        data = dict(data)
        data["ingredient_slots"] = tuple(
            IngredientSlot(
                index=i,
                ingredient=data.pop(f"strIngredient{i}", None),
                measure=data.pop(f"strMeasure{i}", None),
            )
            for i in range(1, INGREDIENT_SLOT_COUNT + 1)
        )
        return data

    @field_validator("ingredient_slots")
    @classmethod
    def _check_slot_layout(cls, slots: Tuple[IngredientSlot, ...]) -> Tuple[IngredientSlot, ...]:
        if [slot.index for slot in slots] != list(range(1, INGREDIENT_SLOT_COUNT + 1)):
            raise ValueError(
                f"ingredient_slots must hold slots 1..{INGREDIENT_SLOT_COUNT} in order"
            )
        return slots


class Category(BaseModel):
    """Category entry from list.php?c=list."""
    name: Optional[str] = Field(None, alias="strCategory")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")
