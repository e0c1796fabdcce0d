"""Repository helpers for step output uses (dependency edges between steps)."""

from typing import Any, Dict, Iterable, List, Mapping
from django.db import IntegrityError
from django.db.models import F, Max, OuterRef, Q, QuerySet, Subquery
from recipes.db_accessor import DB_Accessor
from recipes.models import RecipeStep, StepOutputUse


class StepOutputUseRepo(DB_Accessor):
    """Repository for StepOutputUse rows.

    The edges reference steps by ordinal, so the step titles shown next to
    an edge are joined in with a correlated subquery on (recipe, step_num).
    """
    def __init__(self) -> None:
        """Initialise with the StepOutputUse model."""
        super().__init__(StepOutputUse)

    def _with_title(self, qs: QuerySet, step_field: str) -> QuerySet:
        title = RecipeStep.objects.filter(
            recipe_id=OuterRef("recipe_id"),
            step_num=OuterRef(step_field),
        ).values("step_title")[:1]
        return qs.annotate(step_title=Subquery(title))

    def list_inputs_of(self, recipe_id: Any, step_num: int) -> List[Dict[str, Any]]:
        """Edges consumed by `step_num`, with the producing step's title."""
        qs = self._with_title(self.scoped(recipe_id, input_step_num=step_num), "output_step_num")
        return list(qs.order_by("output_step_num").values("output_step_num", "step_title"))

    def list_consumers_of(self, recipe_id: Any, step_num: int) -> List[Dict[str, Any]]:
        """Edges produced by `step_num`, with the consuming step's title."""
        qs = self._with_title(self.scoped(recipe_id, output_step_num=step_num), "input_step_num")
        return list(qs.order_by("input_step_num").values("input_step_num", "step_title"))

    def list_for_recipe(self, recipe_id: Any) -> List[Dict[str, Any]]:
        """Every edge of the recipe, grouped by consumer, with the producer's title."""
        qs = self._with_title(self.scoped(recipe_id), "output_step_num")
        return list(
            qs.order_by("input_step_num", "output_step_num").values(
                "id", "output_step_num", "input_step_num", "step_title"
            )
        )

    def create_for_input(
        self, recipe_id: Any, input_step_num: int, output_step_nums: Iterable[int]
    ) -> int:
        """Create one edge per producer for the consuming step."""
        edges = [
            StepOutputUse(
                recipe_id=recipe_id,
                output_step_num=output_step_num,
                input_step_num=input_step_num,
            )
            for output_step_num in output_step_nums
        ]
        if not edges:
            return 0
        return len(self.model.objects.bulk_create(edges))

    def delete_for_input(self, recipe_id: Any, input_step_num: int) -> int:
        """Detach every edge consumed by the step."""
        return self.delete(recipe_id, input_step_num=input_step_num)

    def delete_touching(self, recipe_id: Any, step_num: int) -> int:
        """Remove every edge with the step on either end."""
        count, _ = self.scoped(recipe_id).filter(
            Q(output_step_num=step_num) | Q(input_step_num=step_num)
        ).delete()
        return count

    def renumber(self, recipe_id: Any, mapping: Mapping[int, int]) -> int:
        """Rewrite both endpoints of every edge that mentions a remapped ordinal.

        Rows keep their ids. They are parked above the largest endpoint first
        so that the unique (recipe, output, input) constraint holds after each
        statement, then mapped to their final ordinals.
        """
        if not mapping:
            return 0
        keys = list(mapping)
        touched = self.scoped(recipe_id).filter(
            Q(output_step_num__in=keys) | Q(input_step_num__in=keys)
        )
        ids = list(touched.values_list("id", flat=True))
        if not ids:
            return 0
        offset = (self.scoped(recipe_id).aggregate(top=Max("input_step_num"))["top"] or 0) + 1
        rows = self.model.objects.filter(id__in=ids)
        rows.update(
            output_step_num=F("output_step_num") + offset,
            input_step_num=F("input_step_num") + offset,
        )
        rows.update(
            output_step_num=self.remap_expression("output_step_num", mapping, offset=offset),
            input_step_num=self.remap_expression("input_step_num", mapping, offset=offset),
        )
        return len(ids)

    def verify_edges(self, recipe_id: Any, highest_step_num: int) -> None:
        """Raise IntegrityError for a backward edge or one pointing at a missing step."""
        broken = self.scoped(recipe_id).filter(
            Q(output_step_num__gte=F("input_step_num"))
            | Q(output_step_num__lt=1)
            | Q(input_step_num__gt=highest_step_num)
        )
        bad = list(broken.values_list("output_step_num", "input_step_num"))
        if bad:
            raise IntegrityError(
                f"Recipe {recipe_id} has invalid step output uses: {bad}"
            )
