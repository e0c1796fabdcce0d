import uuid

from django.contrib.auth import get_user_model

from recipes.models import Ingredient, Recipe, RecipeStep, StepOutputUse


def make_user(**kwargs):
    username = kwargs.pop("username", "johndoe")
    password = kwargs.pop("password", "Password123")
    email = kwargs.pop(
        "email",
        f"{username}_{uuid.uuid4().hex[:6]}@example.org"
    )
    return get_user_model().objects.create_user(
        username=username,
        email=email,
        password=password,
        **kwargs,
    )


def make_recipe(*, author=None, title="test recipe", description="desc", **extra):
    """
    creates and returns a recipe. a user is created when no author is given.
    """
    if author is None:
        author = make_user(username=f"chef_{uuid.uuid4().hex[:6]}")
    return Recipe.objects.create(
        author=author,
        title=title,
        description=description,
        **extra,
    )


def make_steps(recipe, count, titles=None):
    """Create steps 1..count. Titles default to "Title <n>"; pass None entries for untitled steps."""
    steps = []
    for num in range(1, count + 1):
        title = titles[num - 1] if titles is not None else f"Title {num}"
        steps.append(
            RecipeStep.objects.create(
                recipe=recipe,
                step_num=num,
                step_title=title,
                description=f"Do thing {num}",
            )
        )
    return steps


def add_edge(recipe, output_step_num, input_step_num):
    return StepOutputUse.objects.create(
        recipe=recipe,
        output_step_num=output_step_num,
        input_step_num=input_step_num,
    )


def add_ingredient(recipe, step_num, name="salt", position=1):
    return Ingredient.objects.create(
        recipe=recipe,
        step_num=step_num,
        name=name,
        position=position,
    )


def step_rows(recipe):
    """(step_num, step_title) pairs in ordinal order."""
    return list(
        RecipeStep.objects.filter(recipe=recipe)
        .order_by("step_num")
        .values_list("step_num", "step_title")
    )


def edge_rows(recipe):
    """(output_step_num, input_step_num) pairs ordered by consumer then producer."""
    return list(
        StepOutputUse.objects.filter(recipe=recipe)
        .order_by("input_step_num", "output_step_num")
        .values_list("output_step_num", "input_step_num")
    )


def snapshot(recipe):
    """Every step and edge row of the recipe, including primary keys."""
    return (
        list(
            RecipeStep.objects.filter(recipe=recipe)
            .order_by("id")
            .values_list("id", "step_num", "step_title", "description")
        ),
        list(
            StepOutputUse.objects.filter(recipe=recipe)
            .order_by("id")
            .values_list("id", "output_step_num", "input_step_num")
        ),
        list(
            Ingredient.objects.filter(recipe=recipe)
            .order_by("id")
            .values_list("id", "step_num", "name")
        ),
    )
