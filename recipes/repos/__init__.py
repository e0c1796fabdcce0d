from .step_repo import StepRepo, IngredientRepo
from .step_output_use_repo import StepOutputUseRepo

__all__ = ["StepRepo", "IngredientRepo", "StepOutputUseRepo"]
