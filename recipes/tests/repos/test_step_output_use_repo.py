from django.db import IntegrityError
from django.test import TestCase

from recipes.models import StepOutputUse
from recipes.repos import StepOutputUseRepo
from recipes.tests.helpers import add_edge, edge_rows, make_recipe, make_steps


class StepOutputUseRepoTestCase(TestCase):
    def setUp(self):
        self.recipe = make_recipe()
        make_steps(self.recipe, 4, titles=["Prep", None, "Bake", "Serve"])
        self.repo = StepOutputUseRepo()

    def test_list_inputs_of_orders_by_producer_with_titles(self):
        add_edge(self.recipe, 2, 4)
        add_edge(self.recipe, 1, 4)
        self.assertEqual(
            self.repo.list_inputs_of(self.recipe.id, 4),
            [
                {"output_step_num": 1, "step_title": "Prep"},
                {"output_step_num": 2, "step_title": None},
            ],
        )

    def test_list_consumers_of_orders_by_consumer_with_titles(self):
        add_edge(self.recipe, 1, 4)
        add_edge(self.recipe, 1, 3)
        self.assertEqual(
            self.repo.list_consumers_of(self.recipe.id, 1),
            [
                {"input_step_num": 3, "step_title": "Bake"},
                {"input_step_num": 4, "step_title": "Serve"},
            ],
        )

    def test_list_for_recipe_groups_by_consumer(self):
        e1 = add_edge(self.recipe, 2, 4)
        e2 = add_edge(self.recipe, 1, 3)
        e3 = add_edge(self.recipe, 1, 4)
        rows = self.repo.list_for_recipe(self.recipe.id)
        self.assertEqual([r["id"] for r in rows], [e2.id, e3.id, e1.id])
        self.assertEqual(rows[2]["step_title"], None)
        self.assertEqual(rows[0]["step_title"], "Prep")

    def test_create_for_input_and_delete_for_input(self):
        self.assertEqual(self.repo.create_for_input(self.recipe.id, 4, [1, 3]), 2)
        self.assertEqual(self.repo.create_for_input(self.recipe.id, 4, []), 0)
        self.assertEqual(edge_rows(self.recipe), [(1, 4), (3, 4)])
        self.assertEqual(self.repo.delete_for_input(self.recipe.id, 4), 2)
        self.assertEqual(edge_rows(self.recipe), [])

    def test_delete_touching_removes_both_directions(self):
        add_edge(self.recipe, 1, 2)
        add_edge(self.recipe, 2, 3)
        add_edge(self.recipe, 1, 3)
        self.repo.delete_touching(self.recipe.id, 2)
        self.assertEqual(edge_rows(self.recipe), [(1, 3)])

    def test_renumber_swaps_parallel_edges_without_collision(self):
        to_two = add_edge(self.recipe, 1, 2)
        to_three = add_edge(self.recipe, 1, 3)
        rewritten = self.repo.renumber(self.recipe.id, {2: 3, 3: 2})
        self.assertEqual(rewritten, 2)
        self.assertEqual(StepOutputUse.objects.get(id=to_two.id).input_step_num, 3)
        self.assertEqual(StepOutputUse.objects.get(id=to_three.id).input_step_num, 2)

    def test_renumber_rewrites_both_endpoints(self):
        add_edge(self.recipe, 2, 4)
        add_edge(self.recipe, 1, 3)
        self.repo.renumber(self.recipe.id, {2: 3, 3: 2})
        self.assertEqual(edge_rows(self.recipe), [(1, 2), (3, 4)])

    def test_renumber_without_touched_edges(self):
        add_edge(self.recipe, 1, 2)
        self.assertEqual(self.repo.renumber(self.recipe.id, {3: 4, 4: 3}), 0)
        self.assertEqual(edge_rows(self.recipe), [(1, 2)])

    def test_verify_edges_accepts_valid_graph(self):
        add_edge(self.recipe, 1, 4)
        self.repo.verify_edges(self.recipe.id, 4)

    def test_verify_edges_rejects_edge_to_missing_step(self):
        add_edge(self.recipe, 1, 9)
        with self.assertRaises(IntegrityError):
            self.repo.verify_edges(self.recipe.id, 4)
