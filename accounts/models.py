import uuid

from django.contrib.auth.models import AbstractBaseUser, BaseUserManager
from django.db import models

from authflow.services.credentials import hash_password, check_password


class UserRole(models.TextChoices):
    ADMIN = "Admin", "Admin"
    CLIENT = "Client", "Client"
    OWNER = "Owner", "Owner"
    DELIVERY = "Delivery", "Delivery"


class UserManager(BaseUserManager):
    def create_user(self, email, password=None, role=UserRole.CLIENT, **extra_fields):
        if not email:
            raise ValueError("User must have an email")

        user = self.model(email=self.normalize_email(email), role=role, **extra_fields)
        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()

        user.save(using=self._db)
        return user

    def create_superuser(self, email, password, **extra_fields):
        extra_fields.setdefault("verified", True)
        return self.create_user(email=email, password=password, role=UserRole.ADMIN, **extra_fields)


class User(AbstractBaseUser):
    email = models.EmailField(unique=True)
    role = models.CharField(max_length=20, choices=UserRole.choices)
    verified = models.BooleanField(default=False)

    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = UserManager()

    USERNAME_FIELD = "email"
    EMAIL_FIELD = "email"
    REQUIRED_FIELDS = ["role"]

    def __str__(self):
        return self.email

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    # last encoded value that came from set_password or the database
    _encoded_password = None

    @classmethod
    def from_db(cls, db, field_names, values):
        instance = super().from_db(db, field_names, values)
        instance._encoded_password = instance.__dict__.get("password")
        return instance

    def refresh_from_db(self, using=None, fields=None, **kwargs):
        super().refresh_from_db(using=using, fields=fields, **kwargs)
        if fields is None or "password" in fields:
            self._encoded_password = self.__dict__.get("password")

    def set_password(self, raw_password):
        self.password = hash_password(raw_password)
        self._password = raw_password
        self._encoded_password = self.password

    def set_unusable_password(self):
        super().set_unusable_password()
        self._encoded_password = self.password

    def check_password(self, raw_password) -> bool:
        return check_password(raw_password, self.password)

    def save(self, *args, **kwargs):
        # anything assigned straight to .password is raw, whatever it looks like
        password = self.__dict__.get("password")  # None while the field is deferred
        if password and password != self._encoded_password:
            self.set_password(password)
        super().save(*args, **kwargs)
        self._encoded_password = self.__dict__.get("password")


def generate_verification_code() -> str:
    return uuid.uuid4().hex


class Verification(models.Model):
    """One pending email verification per user, consumed once."""
    code = models.CharField(max_length=64, unique=True, default=generate_verification_code)
    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name="verification")
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return f"{self.user} - {self.code}"
