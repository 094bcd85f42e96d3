from .account_views import CreateAccountView, UserProfileView, MeView  # noqa: F401
from .jwt_views import LogInView  # noqa: F401
from .email_views import VerifyEmailView  # noqa: F401
