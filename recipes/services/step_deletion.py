"""Deletion of recipe steps that no later step depends on."""

import logging

from django.db import transaction

from recipes.repos import IngredientRepo, StepOutputUseRepo, StepRepo
from recipes.services.step_dependencies import StepDependencyService
from recipes.utils.formatting import format_step_list

logger = logging.getLogger(__name__)


class StepDeletionService:
    """Validate and perform step deletion, shifting later steps down by one."""

    def __init__(self, dependency_service=None, step_repo=None, edge_repo=None, ingredient_repo=None):
        self.step_repo = step_repo or StepRepo()
        self.edge_repo = edge_repo or StepOutputUseRepo()
        self.ingredient_repo = ingredient_repo or IngredientRepo()
        self.dependency_service = dependency_service or StepDependencyService(
            step_repo=self.step_repo, edge_repo=self.edge_repo
        )

    def validate_step_deletion(self, recipe_id, step_num):
        """Return {"valid": True} or {"valid": False, "error": ...} naming the dependents."""
        dependents = self.dependency_service.check_step_usage(recipe_id, step_num)
        if not dependents:
            return {"valid": True}

        dependent_nums = sorted(dep["input_step_num"] for dep in dependents)
        return {
            "valid": False,
            "error": (
                f"Cannot delete Step {step_num} because it is used by "
                f"{format_step_list(dependent_nums)}"
            ),
        }

    @transaction.atomic
    def delete_step(self, recipe_id, step_num):
        """Delete a step and close the gap it leaves in the numbering.

        Returns the same shape as `validate_step_deletion`. Nothing is changed
        when the step is still used by a later step.
        """
        if not self.step_repo.lock_recipe(recipe_id) or self.step_repo.get_step(recipe_id, step_num) is None:
            return {"valid": False, "error": f"Step {step_num} does not exist"}

        result = self.validate_step_deletion(recipe_id, step_num)
        if not result["valid"]:
            logger.debug("Refused to delete step %s of recipe %s: %s", step_num, recipe_id, result["error"])
            return result

        highest = self.step_repo.highest_step_num(recipe_id)

        self.edge_repo.delete_touching(recipe_id, step_num)
        self.ingredient_repo.delete(recipe_id, step_num=step_num)
        self.step_repo.delete(recipe_id, step_num=step_num)

        shift = {num: num - 1 for num in range(step_num + 1, highest + 1)}
        self.step_repo.renumber(recipe_id, shift)
        self.ingredient_repo.renumber(recipe_id, shift)
        self.edge_repo.renumber(recipe_id, shift)

        self.dependency_service.verify_integrity(recipe_id)
        logger.info("Deleted step %s of recipe %s; shifted %d later steps", step_num, recipe_id, len(shift))
        return {"valid": True}
