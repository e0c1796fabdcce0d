"""Read-only queries over the dependency edges between recipe steps."""

import logging

from django.db import IntegrityError

from recipes.repos import StepOutputUseRepo, StepRepo

logger = logging.getLogger(__name__)


class StepDependencyService:
    """Answer "what does this step use" and "what uses this step".

    Missing recipes and missing steps are not errors here: they simply have
    no edges, so every query returns an empty list for them.
    """

    def __init__(self, step_repo=None, edge_repo=None):
        self.step_repo = step_repo or StepRepo()
        self.edge_repo = edge_repo or StepOutputUseRepo()

    def load_step_dependencies(self, recipe_id, step_num):
        """Steps whose output `step_num` uses, ordered by their step number.

        Each item is {"output_step_num": int, "step_title": str | None}.
        """
        return self.edge_repo.list_inputs_of(recipe_id, step_num)

    def check_step_usage(self, recipe_id, step_num):
        """Steps that use the output of `step_num`, ordered by their step number.

        Each item is {"input_step_num": int, "step_title": str | None}.
        """
        return self.edge_repo.list_consumers_of(recipe_id, step_num)

    def load_recipe_edges(self, recipe_id):
        """All edges of a recipe ordered by consumer, then producer."""
        return self.edge_repo.list_for_recipe(recipe_id)

    def available_previous_steps(self, recipe_id, step_num):
        """Steps a step at `step_num` may reference."""
        return self.step_repo.list_before(recipe_id, step_num)

    def verify_integrity(self, recipe_id):
        """Raise IntegrityError if the ordinals or the edges are inconsistent."""
        try:
            self.step_repo.verify_contiguous(recipe_id)
            self.edge_repo.verify_edges(
                recipe_id, self.step_repo.highest_step_num(recipe_id)
            )
        except IntegrityError as error:
            logger.error("Step graph integrity check failed: %s", error)
            raise
