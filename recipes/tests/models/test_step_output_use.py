from django.db import IntegrityError, transaction
from django.test import TestCase

from recipes.models import StepOutputUse
from recipes.tests.helpers import add_edge, make_recipe, make_steps


class StepOutputUseModelTestCase(TestCase):
    def setUp(self):
        self.recipe = make_recipe()
        make_steps(self.recipe, 3)

    def test_forward_edge_can_be_created(self):
        edge = add_edge(self.recipe, 1, 3)
        self.assertEqual(edge.output_step_num, 1)
        self.assertEqual(edge.input_step_num, 3)
        self.assertEqual(str(edge), "Step 3 uses output of Step 1")

    def test_backward_edge_rejected(self):
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                add_edge(self.recipe, 3, 1)

    def test_self_edge_rejected(self):
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                add_edge(self.recipe, 2, 2)

    def test_duplicate_edge_rejected(self):
        add_edge(self.recipe, 1, 2)
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                add_edge(self.recipe, 1, 2)

    def test_edges_removed_with_recipe(self):
        add_edge(self.recipe, 1, 2)
        self.recipe.delete()
        self.assertEqual(StepOutputUse.objects.count(), 0)
