from rest_framework.permissions import IsAuthenticated

from .authentication import CustomJWTAuthentication
from .permissions import RolePermission


def role_required(*roles):
    """
    Class decorator to apply CustomJWTAuthentication + IsAuthenticated + RolePermission
    to any APIView subclass, restricted to the given role(s).
    """
    def decorator(view_class):
        class Wrapped(view_class):
            authentication_classes = [CustomJWTAuthentication]
            permission_classes = [IsAuthenticated, RolePermission]
            required_roles = list(roles)

        Wrapped.__name__ = view_class.__name__
        Wrapped.__qualname__ = view_class.__qualname__
        Wrapped.__doc__ = view_class.__doc__
        return Wrapped

    return decorator
