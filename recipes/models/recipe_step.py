"""Model representing an individual recipe step with ordering."""

from django.db import models
from .recipe import Recipe

STEP_TITLE_MAX_LENGTH = 200
STEP_DESCRIPTION_MAX_LENGTH = 5000


class RecipeStep(models.Model):
    """Ordered instruction step for a recipe.

    `step_num` is both the position of the step and the identifier that
    StepOutputUse rows point at, so it may only be changed by the reorder
    and deletion services, which rewrite the edges in the same transaction.
    """
    recipe = models.ForeignKey(
        Recipe,
        on_delete=models.CASCADE,
        db_column='recipe_id',
        related_name='steps'
    )

    # position (PK component), 1..N within the recipe
    step_num = models.PositiveIntegerField()

    step_title = models.CharField(max_length=STEP_TITLE_MAX_LENGTH, blank=True, null=True)

    description = models.TextField(max_length=STEP_DESCRIPTION_MAX_LENGTH)

    class Meta:
        """Uniqueness and ordering constraints for steps."""
        # Composite PK simulation: enforce uniqueness at DB level
        unique_together = (
            ('recipe', 'step_num'),
        )

        constraints = [
            models.CheckConstraint(
                condition=models.Q(step_num__gt=0),
                name="recipe_step_step_num_gt_0"
            ),
        ]

        ordering = ["recipe", "step_num"]
        db_table = "recipe_step"

    def __str__(self):
        """Readable snippet of the step for admin/debugging."""
        if self.step_title:
            return f"Step {self.step_num}: {self.step_title}"
        return f"Step {self.step_num}: {self.description[:30]}..."
