from django.apps import AppConfig

class RecipesConfig(AppConfig):
    """Django app config for recipes, their steps and step dependencies."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'recipes'
    verbose_name = 'Recipes'
