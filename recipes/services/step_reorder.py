"""Moving steps up or down while keeping every dependency edge pointing forward."""

import logging

from django.db import transaction

from recipes.repos import IngredientRepo, StepOutputUseRepo, StepRepo
from recipes.services.step_dependencies import StepDependencyService
from recipes.utils.formatting import agree, format_step_list

logger = logging.getLogger(__name__)

DIRECTION_UP = "up"
DIRECTION_DOWN = "down"
DIRECTIONS = (DIRECTION_UP, DIRECTION_DOWN)


class StepReorderService:
    """Validate moves and swap adjacent steps, rewriting the edges that mention them."""

    def __init__(self, dependency_service=None, step_repo=None, edge_repo=None, ingredient_repo=None):
        self.step_repo = step_repo or StepRepo()
        self.edge_repo = edge_repo or StepOutputUseRepo()
        self.ingredient_repo = ingredient_repo or IngredientRepo()
        self.dependency_service = dependency_service or StepDependencyService(
            step_repo=self.step_repo, edge_repo=self.edge_repo
        )

    def validate_step_reorder(self, recipe_id, current_step_num, new_position):
        """Check that moving a step to `new_position` keeps its edges pointing forward.

        Moving later is blocked by steps that use its output and would end up
        at or before it. Moving earlier is blocked by steps whose output it
        uses and which would end up at or after it.
        """
        if new_position > current_step_num:
            blocking = sorted(
                dep["input_step_num"]
                for dep in self.dependency_service.check_step_usage(recipe_id, current_step_num)
                if dep["input_step_num"] <= new_position
            )
            if blocking:
                return {
                    "valid": False,
                    "error": (
                        f"Cannot move Step {current_step_num} to position {new_position} because "
                        f"{format_step_list(blocking)} {agree(blocking, 'uses', 'use')} its output"
                    ),
                }
        elif new_position < current_step_num:
            blocking = sorted(
                dep["output_step_num"]
                for dep in self.dependency_service.load_step_dependencies(recipe_id, current_step_num)
                if dep["output_step_num"] >= new_position
            )
            if blocking:
                return {
                    "valid": False,
                    "error": (
                        f"Cannot move Step {current_step_num} to position {new_position} because "
                        f"it uses output from {format_step_list(blocking)}"
                    ),
                }
        return {"valid": True}

    @transaction.atomic
    def reorder_step(self, recipe_id, step_num, direction):
        """Swap a step with its neighbour above (`up`) or below (`down`).

        Returns {"success": True} or {"success": False, "error": ...}; a
        refused move leaves every step and edge untouched.
        """
        if direction not in DIRECTIONS:
            return {"success": False, "error": f"Unknown direction: {direction}"}

        if not self.step_repo.lock_recipe(recipe_id) or self.step_repo.get_step(recipe_id, step_num) is None:
            return {"success": False, "error": f"Step {step_num} does not exist"}

        target = step_num - 1 if direction == DIRECTION_UP else step_num + 1
        if self.step_repo.get_step(recipe_id, target) is None:
            where = "first" if direction == DIRECTION_UP else "last"
            return {"success": False, "error": f"Step {step_num} is already the {where} step"}

        result = self.validate_step_reorder(recipe_id, step_num, target)
        if not result["valid"]:
            logger.debug("Refused to move step %s of recipe %s %s: %s", step_num, recipe_id, direction, result["error"])
            return {"success": False, "error": result["error"]}

        swap = {step_num: target, target: step_num}
        self.step_repo.renumber(recipe_id, swap)
        self.ingredient_repo.renumber(recipe_id, swap)
        rewritten = self.edge_repo.renumber(recipe_id, swap)

        self.dependency_service.verify_integrity(recipe_id)
        logger.info(
            "Moved step %s of recipe %s %s to %s; rewrote %d edges",
            step_num, recipe_id, direction, target, rewritten,
        )
        return {"success": True}
