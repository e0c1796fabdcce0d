from decimal import Decimal

from rest_framework import serializers

from recipes.models.recipe_step import STEP_DESCRIPTION_MAX_LENGTH, STEP_TITLE_MAX_LENGTH
from recipes.services.step_reorder import DIRECTIONS


class IngredientInputSerializer(serializers.Serializer):
    """One ingredient supplied with a new step."""
    name = serializers.CharField(max_length=100)
    quantity = serializers.DecimalField(
        max_digits=10,
        decimal_places=3,
        min_value=Decimal("0.001"),
        max_value=Decimal("99999"),
        required=False,
        allow_null=True,
    )
    unit = serializers.CharField(max_length=50, required=False, allow_blank=True, allow_null=True)


class StepCreateSerializer(serializers.Serializer):
    """Payload for appending a step to a recipe."""
    step_title = serializers.CharField(
        max_length=STEP_TITLE_MAX_LENGTH, required=False, allow_blank=True, allow_null=True
    )
    description = serializers.CharField(max_length=STEP_DESCRIPTION_MAX_LENGTH)
    uses_steps = serializers.ListField(child=serializers.IntegerField(), required=False, default=list)
    ingredients = IngredientInputSerializer(many=True, required=False, default=list)


class StepUsesSerializer(serializers.Serializer):
    """Payload replacing the steps a step uses output from."""
    uses_steps = serializers.ListField(child=serializers.IntegerField(), allow_empty=True)


class StepReorderSerializer(serializers.Serializer):
    direction = serializers.ChoiceField(choices=DIRECTIONS)


class StepSerializer(serializers.Serializer):
    """Read-only view of a created step."""
    step_num = serializers.IntegerField(read_only=True)
    step_title = serializers.CharField(read_only=True, allow_null=True)
    description = serializers.CharField(read_only=True)


class StepOutputUseSerializer(serializers.Serializer):
    """Edge of the recipe graph annotated with the producing step's title."""
    id = serializers.IntegerField(read_only=True)
    output_step_num = serializers.IntegerField(read_only=True)
    input_step_num = serializers.IntegerField(read_only=True)
    step_title = serializers.CharField(read_only=True, allow_null=True)


class StepDependencySerializer(serializers.Serializer):
    """A step this step uses output from."""
    output_step_num = serializers.IntegerField(read_only=True)
    step_title = serializers.CharField(read_only=True, allow_null=True)


class StepDependentSerializer(serializers.Serializer):
    """A step that uses this step's output."""
    input_step_num = serializers.IntegerField(read_only=True)
    step_title = serializers.CharField(read_only=True, allow_null=True)
