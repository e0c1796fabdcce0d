import logging

from django.db import IntegrityError
from django.shortcuts import get_object_or_404
from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from recipes.models import Recipe
from recipes.permissions import IsRecipeAuthor
from recipes.serializers import (
    StepCreateSerializer,
    StepDependencySerializer,
    StepDependentSerializer,
    StepOutputUseSerializer,
    StepReorderSerializer,
    StepSerializer,
    StepUsesSerializer,
)
from recipes.services import (
    StepDeletionService,
    StepDependencyService,
    StepReferenceService,
    StepReorderService,
)

logger = logging.getLogger(__name__)

__all__ = [
    "RecipeStepEdgesApi",
    "StepDependenciesApi",
    "StepCreateApi",
    "StepUsesApi",
    "StepReorderApi",
    "StepDeleteApi",
]


def _failure(message):
    return Response({"errors": {"general": message}}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


class RecipeStepApiView(APIView):
    """Base view resolving the recipe from the URL and checking authorship."""
    permission_classes = [permissions.IsAuthenticated, IsRecipeAuthor]

    def get_recipe(self, request, recipe_id):
        recipe = get_object_or_404(Recipe, id=recipe_id)
        self.check_object_permissions(request, recipe)
        return recipe


class RecipeStepEdgesApi(RecipeStepApiView):
    """List every step output use of a recipe."""

    def get(self, request, recipe_id):
        recipe = self.get_recipe(request, recipe_id)
        edges = StepDependencyService().load_recipe_edges(recipe.id)
        return Response(StepOutputUseSerializer(edges, many=True).data)


class StepDependenciesApi(RecipeStepApiView):
    """Show what a step uses and what uses it."""

    def get(self, request, recipe_id, step_num):
        recipe = self.get_recipe(request, recipe_id)
        service = StepDependencyService()
        return Response({
            "dependencies": StepDependencySerializer(
                service.load_step_dependencies(recipe.id, step_num), many=True
            ).data,
            "dependents": StepDependentSerializer(
                service.check_step_usage(recipe.id, step_num), many=True
            ).data,
            "available_steps": service.available_previous_steps(recipe.id, step_num),
        })


class StepCreateApi(RecipeStepApiView):
    """Append a step to the recipe."""

    def post(self, request, recipe_id):
        recipe = self.get_recipe(request, recipe_id)
        serializer = StepCreateSerializer(data=request.data)
        if not serializer.is_valid():
            return Response({"errors": serializer.errors}, status=status.HTTP_400_BAD_REQUEST)

        data = serializer.validated_data
        try:
            result = StepReferenceService().create_step(
                recipe.id,
                description=data["description"],
                step_title=data.get("step_title"),
                references=data["uses_steps"],
                ingredients=data["ingredients"],
            )
        except IntegrityError:
            logger.exception("Failed to create step for recipe %s", recipe.id)
            return _failure("Failed to create step. Please try again.")

        if not result["valid"]:
            return Response({"errors": {"uses_steps": result["error"]}}, status=status.HTTP_400_BAD_REQUEST)
        return Response(StepSerializer(result["step"]).data, status=status.HTTP_201_CREATED)


class StepUsesApi(RecipeStepApiView):
    """Replace the steps a step uses output from."""

    def put(self, request, recipe_id, step_num):
        recipe = self.get_recipe(request, recipe_id)
        serializer = StepUsesSerializer(data=request.data)
        if not serializer.is_valid():
            return Response({"errors": serializer.errors}, status=status.HTTP_400_BAD_REQUEST)

        try:
            result = StepReferenceService().update_step_output_uses(
                recipe.id, step_num, serializer.validated_data["uses_steps"]
            )
        except IntegrityError:
            logger.exception("Failed to update step %s of recipe %s", step_num, recipe.id)
            return _failure("Failed to update step. Please try again.")

        if not result["valid"]:
            return Response({"errors": {"uses_steps": result["error"]}}, status=status.HTTP_400_BAD_REQUEST)
        return Response({"success": True})


class StepReorderApi(RecipeStepApiView):
    """Move a step one position up or down."""

    def post(self, request, recipe_id, step_num):
        recipe = self.get_recipe(request, recipe_id)
        serializer = StepReorderSerializer(data=request.data)
        if not serializer.is_valid():
            return Response({"errors": serializer.errors}, status=status.HTTP_400_BAD_REQUEST)

        try:
            result = StepReorderService().reorder_step(
                recipe.id, step_num, serializer.validated_data["direction"]
            )
        except IntegrityError:
            logger.exception("Failed to reorder step %s of recipe %s", step_num, recipe.id)
            return _failure("Failed to reorder step. Please try again.")

        if not result["success"]:
            return Response({"errors": {"reorder": result["error"]}}, status=status.HTTP_400_BAD_REQUEST)
        return Response({"success": True})


class StepDeleteApi(RecipeStepApiView):
    """Delete a step nothing depends on."""

    def delete(self, request, recipe_id, step_num):
        recipe = self.get_recipe(request, recipe_id)
        try:
            result = StepDeletionService().delete_step(recipe.id, step_num)
        except IntegrityError:
            logger.exception("Failed to delete step %s of recipe %s", step_num, recipe.id)
            return _failure("Failed to delete step. Please try again.")

        if not result["valid"]:
            return Response({"errors": {"step_deletion": result["error"]}}, status=status.HTTP_400_BAD_REQUEST)
        return Response(status=status.HTTP_204_NO_CONTENT)
