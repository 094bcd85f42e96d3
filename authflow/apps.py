from django.apps import AppConfig


class AuthflowConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "authflow"

    def ready(self):
        # registers the OpenAPI auth scheme for CustomJWTAuthentication
        from . import schema  # noqa: F401
