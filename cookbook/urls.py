"""
URL configuration for the cookbook project.

Only the recipe step API is routed; pages and authentication flows live
outside this project.
"""
from django.urls import path
from recipes.views import (
    RecipeStepEdgesApi,
    StepCreateApi,
    StepDeleteApi,
    StepDependenciesApi,
    StepReorderApi,
    StepUsesApi,
)

urlpatterns = [
    path('api/recipes/<uuid:recipe_id>/steps/', StepCreateApi.as_view(), name='step_create_api'),
    path('api/recipes/<uuid:recipe_id>/steps/edges/', RecipeStepEdgesApi.as_view(), name='step_edges_api'),
    path('api/recipes/<uuid:recipe_id>/steps/<int:step_num>/', StepDeleteApi.as_view(), name='step_delete_api'),
    path('api/recipes/<uuid:recipe_id>/steps/<int:step_num>/dependencies/', StepDependenciesApi.as_view(), name='step_dependencies_api'),
    path('api/recipes/<uuid:recipe_id>/steps/<int:step_num>/uses/', StepUsesApi.as_view(), name='step_uses_api'),
    path('api/recipes/<uuid:recipe_id>/steps/<int:step_num>/reorder/', StepReorderApi.as_view(), name='step_reorder_api'),
]
