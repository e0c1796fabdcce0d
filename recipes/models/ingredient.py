"""Model for ingredients used by a single recipe step."""

from django.db import models
from .recipe import Recipe


class Ingredient(models.Model):
    """Ingredient used by one step, addressed by (recipe, step_num)."""
    recipe = models.ForeignKey(
        Recipe,
        on_delete=models.CASCADE,
        db_column='recipe_id',
        related_name='ingredients'
    )

    # ordinal of the step using this ingredient; moves with the step
    step_num = models.PositiveIntegerField()

    name = models.CharField(max_length=100)

    # position within the step's ingredient list
    position = models.PositiveIntegerField(default=1)

    quantity = models.DecimalField(
        max_digits=10,
        decimal_places=3,
        null=True,
        blank=True
    )

    unit = models.CharField(max_length=50, null=True, blank=True)

    class Meta:
        """Position constraints for ingredients."""
        constraints = [
            models.CheckConstraint(
                condition=models.Q(position__gt=0),
                name='ingredient_position_gt_0'
            ),
            models.CheckConstraint(
                condition=models.Q(step_num__gt=0),
                name='ingredient_step_num_gt_0'
            ),
        ]
        indexes = [
            models.Index(fields=['recipe', 'step_num'], name='ingredient_recipe_step_idx'),
        ]
        ordering = ["recipe", "step_num", "position"]
        db_table = "ingredient"

    def save(self, *args, **kwargs):
        """Normalise name to lowercase before saving."""
        if self.name:
            self.name = self.name.strip().lower()
        super().save(*args, **kwargs)

    def __str__(self):
        """Readable ingredient string with quantity when available."""
        return f"{self.name} ({self.quantity or ''} {self.unit or ''})"
