"""Repository helpers for recipe steps and the ingredients attached to them."""

from typing import Any, Dict, Iterable, List, Mapping, Optional
from django.core.exceptions import ValidationError
from django.db import IntegrityError
from django.db.models import F, Max
from recipes.db_accessor import DB_Accessor
from recipes.models import Ingredient, Recipe, RecipeStep


class StepRepo(DB_Accessor):
    """Repository for RecipeStep rows, including ordinal renumbering."""
    def __init__(self) -> None:
        """Initialise with the RecipeStep model."""
        super().__init__(RecipeStep)

    def lock_recipe(self, recipe_id: Any) -> bool:
        """Take a row lock on the recipe for the current transaction.

        Returns False when the recipe does not exist, including ids that are
        not valid recipe keys. Backends without SELECT ... FOR UPDATE (SQLite)
        ignore the lock.
        """
        try:
            locked = Recipe.objects.select_for_update().filter(id=recipe_id).values_list("id", flat=True)
        except ValidationError:
            return False
        return bool(list(locked))

    def get_step(self, recipe_id: Any, step_num: int) -> Optional[RecipeStep]:
        return self.scoped(recipe_id, step_num=step_num).first()

    def list_step_nums(self, recipe_id: Any) -> List[int]:
        """Return all ordinals of the recipe in ascending order."""
        return list(
            self.scoped(recipe_id).order_by("step_num").values_list("step_num", flat=True)
        )

    def highest_step_num(self, recipe_id: Any) -> int:
        """Return the largest ordinal in the recipe, 0 when it has no steps."""
        return self.scoped(recipe_id).aggregate(highest=Max("step_num"))["highest"] or 0

    def list_before(self, recipe_id: Any, step_num: int) -> List[Dict[str, Any]]:
        """Return steps positioned before `step_num` as plain dicts."""
        return self.list(
            recipe_id,
            filters={"step_num__lt": step_num},
            order_by=("step_num",),
            fields=("step_num", "step_title"),
        )

    def create_step(
        self,
        recipe_id: Any,
        step_num: int,
        description: str,
        step_title: Optional[str] = None,
    ) -> RecipeStep:
        """Create a step at the given ordinal."""
        return self.create(
            recipe_id,
            step_num=step_num,
            step_title=step_title,
            description=description,
        )

    def renumber(self, recipe_id: Any, mapping: Mapping[int, int]) -> int:
        """Move steps to new ordinals in two statements.

        Affected rows are first parked above the highest ordinal so that the
        unique (recipe, step_num) constraint never sees two rows on the same
        number, then mapped to their final ordinals.
        """
        if not mapping:
            return 0
        offset = self.highest_step_num(recipe_id) + 1
        parked = self.scoped(recipe_id, step_num__in=list(mapping)).update(
            step_num=F("step_num") + offset
        )
        self.remap(
            self.scoped(recipe_id, step_num__gte=offset),
            "step_num",
            mapping,
            offset=offset,
        )
        return parked

    def verify_contiguous(self, recipe_id: Any) -> None:
        """Raise IntegrityError unless the ordinals are exactly 1..N."""
        nums = self.list_step_nums(recipe_id)
        if nums != list(range(1, len(nums) + 1)):
            raise IntegrityError(
                f"Recipe {recipe_id} has non-contiguous step numbers: {nums}"
            )


class IngredientRepo(DB_Accessor):
    """Repository for step ingredients, addressed by (recipe, step_num)."""
    def __init__(self) -> None:
        """Initialise with the Ingredient model."""
        super().__init__(Ingredient)

    def count_for_step(self, recipe_id: Any, step_num: int) -> int:
        return self.count(recipe_id, step_num=step_num)

    def create_for_step(
        self, recipe_id: Any, step_num: int, ingredients: Iterable[Mapping[str, Any]]
    ) -> List[Ingredient]:
        """Create the given ingredients for a step, numbering positions from 1."""
        created = []
        for position, data in enumerate(ingredients, start=1):
            ingredient = Ingredient(
                recipe_id=recipe_id,
                step_num=step_num,
                position=position,
                name=data["name"],
                quantity=data.get("quantity"),
                unit=data.get("unit") or None,
            )
            ingredient.save()
            created.append(ingredient)
        return created

    def renumber(self, recipe_id: Any, mapping: Mapping[int, int]) -> int:
        """Move ingredients along with their steps."""
        return self.remap(
            self.scoped(recipe_id, step_num__in=list(mapping)), "step_num", mapping
        )
