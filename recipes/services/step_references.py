"""Creation-time checks for the steps a new or edited step uses output from."""

import logging

from django.db import transaction

from recipes.repos import IngredientRepo, StepOutputUseRepo, StepRepo
from recipes.services.step_dependencies import StepDependencyService

logger = logging.getLogger(__name__)

INVALID_STEP_NUMBER_ERROR = "Invalid step number"
SELF_REFERENCE_ERROR = "Cannot reference the current step"
FORWARD_REFERENCE_ERROR = "Can only reference previous steps"
STEP_CONTENT_REQUIREMENT_ERROR = "Add at least 1 ingredient or 1 step output use before saving this step."
INGREDIENT_NAME_ERROR = "Every ingredient needs a name"


def validate_step_reference(reference, current_step_num, highest_step_num):
    """Check one referenced step number against the step that will use it."""
    if reference <= 0:
        return {"valid": False, "error": INVALID_STEP_NUMBER_ERROR}
    if reference == current_step_num:
        return {"valid": False, "error": SELF_REFERENCE_ERROR}
    if reference > highest_step_num:
        return {"valid": False, "error": FORWARD_REFERENCE_ERROR}
    return {"valid": True}


def validate_new_step_references(next_step_num, highest_step_num, references):
    """Validate references left to right and report the first failure."""
    for reference in references:
        result = validate_step_reference(reference, next_step_num, highest_step_num)
        if not result["valid"]:
            return result
    return {"valid": True}


def unique_references(references):
    """Drop repeated references and return them in step order."""
    return sorted(set(references))


class StepReferenceService:
    """Create steps and replace the steps they use output from."""

    def __init__(self, step_repo=None, edge_repo=None, ingredient_repo=None, dependency_service=None):
        self.step_repo = step_repo or StepRepo()
        self.edge_repo = edge_repo or StepOutputUseRepo()
        self.ingredient_repo = ingredient_repo or IngredientRepo()
        self.dependency_service = dependency_service or StepDependencyService(
            step_repo=self.step_repo, edge_repo=self.edge_repo
        )

    @transaction.atomic
    def create_step(self, recipe_id, description, step_title=None, references=(), ingredients=()):
        """Append a step after the current last step.

        Returns {"valid": True, "step": RecipeStep} or {"valid": False, "error": ...}.
        """
        if not self.step_repo.lock_recipe(recipe_id):
            return {"valid": False, "error": "Recipe does not exist"}

        highest = self.step_repo.highest_step_num(recipe_id)
        next_step_num = highest + 1
        references = list(references)
        ingredients = list(ingredients)

        result = validate_new_step_references(next_step_num, highest, references)
        if not result["valid"]:
            logger.debug("Refused step %s for recipe %s: %s", next_step_num, recipe_id, result["error"])
            return result

        uses = unique_references(references)
        if not uses and not ingredients:
            return {"valid": False, "error": STEP_CONTENT_REQUIREMENT_ERROR}
        if any(not str(ingredient.get("name") or "").strip() for ingredient in ingredients):
            return {"valid": False, "error": INGREDIENT_NAME_ERROR}

        step = self.step_repo.create_step(
            recipe_id,
            next_step_num,
            description=description.strip(),
            step_title=(step_title or "").strip() or None,
        )
        self.ingredient_repo.create_for_step(recipe_id, next_step_num, ingredients)
        self.edge_repo.create_for_input(recipe_id, next_step_num, uses)

        self.dependency_service.verify_integrity(recipe_id)
        logger.info(
            "Created step %s for recipe %s using output of %s", next_step_num, recipe_id, uses or "no steps"
        )
        return {"valid": True, "step": step}

    @transaction.atomic
    def update_step_output_uses(self, recipe_id, step_num, references):
        """Replace the steps `step_num` uses output from.

        Returns {"valid": True} or {"valid": False, "error": ...}.
        """
        if not self.step_repo.lock_recipe(recipe_id) or self.step_repo.get_step(recipe_id, step_num) is None:
            return {"valid": False, "error": f"Step {step_num} does not exist"}

        references = list(references)
        result = validate_new_step_references(step_num, step_num - 1, references)
        if not result["valid"]:
            logger.debug("Refused uses for step %s of recipe %s: %s", step_num, recipe_id, result["error"])
            return result

        uses = unique_references(references)
        if not uses and not self.ingredient_repo.count_for_step(recipe_id, step_num):
            return {"valid": False, "error": STEP_CONTENT_REQUIREMENT_ERROR}

        self.edge_repo.delete_for_input(recipe_id, step_num)
        self.edge_repo.create_for_input(recipe_id, step_num, uses)

        self.dependency_service.verify_integrity(recipe_id)
        logger.info("Step %s of recipe %s now uses output of %s", step_num, recipe_id, uses or "no steps")
        return {"valid": True}
