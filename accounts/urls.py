from django.urls import path
from .views import CreateAccountView, LogInView, UserProfileView, MeView, VerifyEmailView

urlpatterns = [
    path("create-account/", CreateAccountView.as_view(), name="create-account"),
    path("login/", LogInView.as_view(), name="login"),
    path("verify-email/", VerifyEmailView.as_view(), name="verify-email"),
    path("me/", MeView.as_view(), name="me"),
    path("users/<int:user_id>/", UserProfileView.as_view(), name="user-profile"),
]
