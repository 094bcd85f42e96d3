from rest_framework import permissions

from core.results import Forbidden


class RolePermission(permissions.BasePermission):
    """
    Checks whether the authenticated user has one of the required role(s).
    Usage:
        permission_classes = [RolePermission]
        required_roles = ["Owner"]                      # every method
        required_roles = {"POST": ["Owner"]}            # per method, others open
    """
    message = "Your role is not allowed to do this."

    def get_required_roles(self, request, view):
        roles = getattr(view, "required_roles", None) or []
        if isinstance(roles, dict):
            return roles.get(request.method, [])
        return roles

    def has_permission(self, request, view):
        required_roles = self.get_required_roles(request, view)
        if not required_roles:
            return True
        user = request.user
        return bool(user and user.is_authenticated and user.role in required_roles)


def owner_id_of(resource):
    """Restaurants carry owner_id; dishes are owned through their restaurant."""
    if hasattr(resource, "owner_id"):
        return resource.owner_id
    restaurant = getattr(resource, "restaurant", None)
    if restaurant is not None:
        return restaurant.owner_id
    return None


def owns(principal, resource) -> bool:
    if principal is None or resource is None:
        return False
    owner_id = owner_id_of(resource)
    return owner_id is not None and owner_id == principal.id


def assert_owns(principal, resource, message: str) -> None:
    # role is never enough, only the owner id counts
    if not owns(principal, resource):
        raise Forbidden(message)
