import django.db.models.deletion
import uuid
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Recipe",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("title", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True, max_length=2000, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("author", models.ForeignKey(db_column="author_id", on_delete=django.db.models.deletion.CASCADE, related_name="recipes", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "recipe",
            },
        ),
        migrations.CreateModel(
            name="RecipeStep",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("step_num", models.PositiveIntegerField()),
                ("step_title", models.CharField(blank=True, max_length=200, null=True)),
                ("description", models.TextField(max_length=5000)),
                ("recipe", models.ForeignKey(db_column="recipe_id", on_delete=django.db.models.deletion.CASCADE, related_name="steps", to="recipes.recipe")),
            ],
            options={
                "db_table": "recipe_step",
                "ordering": ["recipe", "step_num"],
                "constraints": [
                    models.CheckConstraint(condition=models.Q(("step_num__gt", 0)), name="recipe_step_step_num_gt_0"),
                ],
                "unique_together": {("recipe", "step_num")},
            },
        ),
        migrations.CreateModel(
            name="StepOutputUse",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("output_step_num", models.PositiveIntegerField()),
                ("input_step_num", models.PositiveIntegerField()),
                ("recipe", models.ForeignKey(db_column="recipe_id", on_delete=django.db.models.deletion.CASCADE, related_name="step_output_uses", to="recipes.recipe")),
            ],
            options={
                "db_table": "step_output_use",
                "indexes": [
                    models.Index(fields=["recipe", "output_step_num"], name="step_output_use_output_idx"),
                    models.Index(fields=["recipe", "input_step_num"], name="step_output_use_input_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(condition=models.Q(("output_step_num__lt", models.F("input_step_num"))), name="step_output_use_points_forward"),
                ],
                "unique_together": {("recipe", "output_step_num", "input_step_num")},
            },
        ),
        migrations.CreateModel(
            name="Ingredient",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("step_num", models.PositiveIntegerField()),
                ("name", models.CharField(max_length=100)),
                ("position", models.PositiveIntegerField(default=1)),
                ("quantity", models.DecimalField(blank=True, decimal_places=3, max_digits=10, null=True)),
                ("unit", models.CharField(blank=True, max_length=50, null=True)),
                ("recipe", models.ForeignKey(db_column="recipe_id", on_delete=django.db.models.deletion.CASCADE, related_name="ingredients", to="recipes.recipe")),
            ],
            options={
                "db_table": "ingredient",
                "ordering": ["recipe", "step_num", "position"],
                "indexes": [
                    models.Index(fields=["recipe", "step_num"], name="ingredient_recipe_step_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(condition=models.Q(("position__gt", 0)), name="ingredient_position_gt_0"),
                    models.CheckConstraint(condition=models.Q(("step_num__gt", 0)), name="ingredient_step_num_gt_0"),
                ],
            },
        ),
    ]
