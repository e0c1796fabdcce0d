from typing import Any, Dict, List, Mapping, Optional, Sequence, Type
from django.core.exceptions import ValidationError
from django.db.models import Case, F, IntegerField, Model, QuerySet, Value, When


class DB_Accessor:
    """Generic data accessor for rows that belong to a single recipe.

    Every query goes through `scoped()`, which always filters by recipe id, so
    nothing built on top of it can read or write across recipes.
    """

    def __init__(self, model: Type[Model]) -> None:
        self.model = model

    def scoped(self, recipe_id: Any, **filters: Any) -> QuerySet:
        """Return rows of one recipe matching the extra filters.

        An id that is not a valid recipe key names no recipe, so it gives an
        empty queryset.
        """
        try:
            qs = self.model.objects.filter(recipe_id=recipe_id)
        except ValidationError:
            return self.model.objects.none()
        return qs.filter(**filters)

    def list(
        self,
        recipe_id: Any,
        *,
        filters: Optional[Mapping[str, Any]] = None,
        order_by: Sequence[str] = (),
        fields: Sequence[str] = (),
    ) -> QuerySet | List[Dict[str, Any]]:
        """Return a filtered queryset (or list of dicts when fields are given)."""
        qs: QuerySet = self.scoped(recipe_id, **(filters or {}))
        qs = qs.order_by(*order_by) if order_by else qs
        return list(qs.values(*fields)) if fields else qs

    def count(self, recipe_id: Any, **filters: Any) -> int:
        return self.scoped(recipe_id, **filters).count()

    def exists(self, recipe_id: Any, **filters: Any) -> bool:
        return self.scoped(recipe_id, **filters).exists()

    def create(self, recipe_id: Any, **data: Any) -> Model:
        """Create and return a new row for the recipe."""
        return self.model.objects.create(recipe_id=recipe_id, **data)

    def delete(self, recipe_id: Any, **lookup: Any) -> int:
        """Delete rows matching lookup; return count deleted."""
        count, _ = self.scoped(recipe_id, **lookup).delete()
        return count

    def remap(
        self,
        queryset: QuerySet,
        field: str,
        mapping: Mapping[int, int],
        *,
        offset: int = 0,
    ) -> int:
        """Rewrite `field` on every row of `queryset` through `mapping`.

        Values are read as `stored - offset`; values missing from the mapping
        keep their (un-offset) value. Runs as a single UPDATE statement.
        """
        if not mapping:
            return 0
        return queryset.update(**{field: self.remap_expression(field, mapping, offset=offset)})

    @staticmethod
    def remap_expression(field: str, mapping: Mapping[int, int], *, offset: int = 0) -> Case:
        whens = [
            When(**{field: old + offset}, then=Value(new))
            for old, new in sorted(mapping.items())
        ]
        return Case(*whens, default=F(field) - offset, output_field=IntegerField())
