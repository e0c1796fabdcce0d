import uuid
from django.conf import settings
from django.db import models

"""
Recipe model

A recipe owns an ordered list of RecipeStep rows and the StepOutputUse rows
that connect them. Everything below a recipe is scoped by its id:
- `author` is the only user allowed to edit the steps.
- `title` is required, `description` is optional free text.
- `created_at/updated_at` track lifecycle times.

`Recipe.step_count`:
- Number of steps currently attached. Because ordinals are contiguous this is
  also the highest step number, and `step_count + 1` is where the next step goes.
"""

class Recipe(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='recipes',
        db_column='author_id'
    )

    title = models.CharField(max_length=200)
    description = models.TextField(max_length=2000, blank=True, null=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'recipe'

    def __str__(self):
        return self.title

    @property
    def step_count(self):
        return self.steps.count()
