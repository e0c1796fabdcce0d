from django.test import TestCase

from recipes.db_accessor import DB_Accessor
from recipes.models import RecipeStep
from recipes.tests.helpers import make_recipe, make_steps


class DBAccessorTests(TestCase):

    def setUp(self):
        self.recipe = make_recipe()
        self.other = make_recipe()
        make_steps(self.recipe, 3)
        make_steps(self.other, 2)
        self.repo = DB_Accessor(RecipeStep)

    # ---------- scoped() / list() ----------

    def test_scoped_only_sees_one_recipe(self):
        self.assertEqual(self.repo.scoped(self.recipe.id).count(), 3)
        self.assertEqual(self.repo.scoped(self.other.id).count(), 2)

    def test_scoped_malformed_recipe_id_is_empty(self):
        self.assertEqual(list(self.repo.scoped("not-a-uuid", step_num=1)), [])
        self.assertEqual(self.repo.count("not-a-uuid"), 0)
        self.assertEqual(self.repo.delete("not-a-uuid", step_num=1), 0)
        self.assertEqual(RecipeStep.objects.count(), 5)

    def test_list_filters(self):
        qs = self.repo.list(self.recipe.id, filters={"step_num__gte": 2})
        self.assertEqual(qs.count(), 2)

    def test_list_order_by(self):
        qs = self.repo.list(self.recipe.id, order_by=["-step_num"])
        self.assertEqual(list(qs.values_list("step_num", flat=True)), [3, 2, 1])

    def test_list_with_fields_returns_dicts(self):
        result = self.repo.list(self.recipe.id, order_by=["step_num"], fields=["step_num"])
        self.assertEqual(result, [{"step_num": 1}, {"step_num": 2}, {"step_num": 3}])

    # ---------- count() / exists() ----------

    def test_count_and_exists(self):
        self.assertEqual(self.repo.count(self.recipe.id, step_num=2), 1)
        self.assertTrue(self.repo.exists(self.recipe.id, step_num=3))
        self.assertFalse(self.repo.exists(self.other.id, step_num=3))

    # ---------- create() / delete() ----------

    def test_create_sets_recipe(self):
        created = self.repo.create(self.other.id, step_num=3, description="X")
        self.assertEqual(created.recipe_id, self.other.id)

    def test_delete_is_scoped(self):
        deleted = self.repo.delete(self.recipe.id, step_num=1)
        self.assertEqual(deleted, 1)
        self.assertTrue(self.repo.exists(self.other.id, step_num=1))

    # ---------- remap() ----------

    def test_remap_with_empty_mapping_is_noop(self):
        self.assertEqual(self.repo.remap(self.repo.scoped(self.recipe.id), "step_num", {}), 0)

    def test_remap_applies_offset_and_mapping(self):
        self.repo.scoped(self.recipe.id, step_num=1).update(step_num=11)

        updated = self.repo.remap(
            self.repo.scoped(self.recipe.id, step_num__gte=10), "step_num", {1: 4}, offset=10
        )

        self.assertEqual(updated, 1)
        nums = list(self.repo.scoped(self.recipe.id).order_by("step_num").values_list("step_num", flat=True))
        self.assertEqual(nums, [2, 3, 4])

    def test_remap_leaves_unmapped_values_minus_offset(self):
        self.repo.scoped(self.recipe.id, step_num=3).update(step_num=13)

        self.repo.remap(
            self.repo.scoped(self.recipe.id, step_num__gte=10), "step_num", {1: 4}, offset=10
        )

        self.assertTrue(self.repo.exists(self.recipe.id, step_num=3))
