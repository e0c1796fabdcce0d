from rest_framework import permissions


class IsRecipeAuthor(permissions.BasePermission):
    """Only the author of a recipe may read or change its steps."""
    message = "You can only edit steps of your own recipes."

    def has_object_permission(self, request, view, obj):
        return obj.author_id == getattr(request.user, "id", None)
