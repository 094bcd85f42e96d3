import logging

from django.db import transaction
from django.utils import timezone

from authflow.services.mail import MailService
from authflow.services.tokens import issue_token_for_user
from core.results import Conflict, Forbidden, InvalidCredentials, NotFound, service_operation
from .models import User, UserRole, Verification

logger = logging.getLogger(__name__)


class VerificationService:
    """
    One-time email verification codes.

    A user holds at most one pending Verification: issuing a new code
    replaces the previous one, consuming a code deletes it.
    """

    @staticmethod
    def create_verification(user: User) -> str:
        Verification.objects.filter(user=user).delete()
        verification = Verification.objects.create(user=user)
        return verification.code

    @staticmethod
    @service_operation("Could not verify email")
    def consume_verification(code: str):
        verification = Verification.objects.filter(code=code).only("id", "user_id").first()
        if not verification:
            raise NotFound("Verification not found")

        with transaction.atomic():
            # the delete count decides the winner when the same code is submitted twice
            deleted, _ = Verification.objects.filter(pk=verification.pk).delete()
            if not deleted:
                raise NotFound("Verification not found")
            User.objects.filter(pk=verification.user_id).update(verified=True, updated_at=timezone.now())

        logger.info("User %s verified their email", verification.user_id)
        return {}


class UserService:
    def __init__(self, mailer: MailService | None = None):
        self.mailer = mailer or MailService()

    def _send_verification(self, email: str, code: str) -> None:
        # fire-and-forget, MailService never raises
        self.mailer.send_verification_email(email, code)

    @service_operation("Could not create account")
    def create_account(self, email: str, password: str, role: str, requester: User | None = None):
        if role == UserRole.ADMIN and not (requester and requester.is_authenticated and requester.is_admin):
            raise Forbidden("Only Admin can create admin account")

        email = User.objects.normalize_email(email)
        if User.objects.filter(email=email).exists():
            raise Conflict("There is a user with that email already")

        with transaction.atomic():
            user = User.objects.create_user(email=email, password=password, role=role)
            code = VerificationService.create_verification(user)

        self._send_verification(user.email, code)
        logger.info("Account %s created with role %s", user.id, role)
        return {}

    @service_operation("Could not log user in")
    def login(self, email: str, password: str):
        user = User.objects.filter(email=User.objects.normalize_email(email)).first()
        if not user:
            raise NotFound("User not found")
        if not user.check_password(password):
            raise InvalidCredentials("Wrong password")
        return {"token": issue_token_for_user(user)}

    @service_operation("User not found")
    def find_by_id(self, user_id: int):
        user = User.objects.filter(pk=user_id).first()
        if not user:
            raise NotFound("User not found")
        return {"user": user}

    @service_operation("Could not update profile")
    def edit_profile(self, user_id: int, email: str | None = None, password: str | None = None):
        user = User.objects.get(pk=user_id)
        code = None

        with transaction.atomic():
            email_changed = False
            if email:
                email = User.objects.normalize_email(email)
                email_changed = email != user.email
            if email_changed:
                user.email = email
                user.verified = False
            if password:
                user.set_password(password)
            user.save()

            # re-verification only on a real email change, never on password-only edits
            if email_changed:
                code = VerificationService.create_verification(user)

        if code:
            self._send_verification(user.email, code)
        return {"user": user}

    @service_operation("Could not delete account")
    def delete_account(self, user_id: int):
        user = User.objects.get(pk=user_id)
        user.delete()
        logger.info("Account %s deleted", user_id)
        return {}

    def verify_email(self, code: str):
        return VerificationService.consume_verification(code)
