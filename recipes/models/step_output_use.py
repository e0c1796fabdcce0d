"""Dependency edge between two steps of the same recipe."""

from django.db import models
from .recipe import Recipe


class StepOutputUse(models.Model):
    """The step at `input_step_num` uses the output of the step at `output_step_num`.

    Both ends are step ordinals rather than foreign keys to RecipeStep rows,
    so the rows have to be rewritten whenever a step changes position.
    An edge always points forward: output_step_num < input_step_num.
    """
    recipe = models.ForeignKey(
        Recipe,
        on_delete=models.CASCADE,
        db_column='recipe_id',
        related_name='step_output_uses'
    )

    # producing step
    output_step_num = models.PositiveIntegerField()

    # consuming step
    input_step_num = models.PositiveIntegerField()

    class Meta:
        unique_together = (
            ('recipe', 'output_step_num', 'input_step_num'),
        )

        indexes = [
            models.Index(fields=['recipe', 'output_step_num'], name='step_output_use_output_idx'),
            models.Index(fields=['recipe', 'input_step_num'], name='step_output_use_input_idx'),
        ]

        constraints = [
            models.CheckConstraint(
                condition=models.Q(output_step_num__lt=models.F('input_step_num')),
                name="step_output_use_points_forward"
            ),
        ]

        db_table = "step_output_use"

    def __str__(self):
        return f"Step {self.input_step_num} uses output of Step {self.output_step_num}"
