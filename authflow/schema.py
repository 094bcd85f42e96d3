# authflow/schema.py
from drf_spectacular.extensions import OpenApiAuthenticationExtension


def _bearer_jwt():
    return {
        "type": "http",
        "scheme": "bearer",
        "bearerFormat": "JWT",
    }


class CustomJWTAuthenticationScheme(OpenApiAuthenticationExtension):
    target_class = "authflow.authentication.CustomJWTAuthentication"
    name = "BearerJWT"
    priority = 1

    def get_security_definition(self, auto_schema):
        return _bearer_jwt()
