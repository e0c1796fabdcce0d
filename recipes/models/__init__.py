from .recipe import Recipe
from .recipe_step import RecipeStep
from .step_output_use import StepOutputUse
from .ingredient import Ingredient

__all__ = [
    "Recipe",
    "RecipeStep",
    "StepOutputUse",
    "Ingredient",
]
