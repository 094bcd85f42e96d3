import pytest

from accounts.models import User
from authflow.services.credentials import check_password, hash_password


def test_hash_is_bcrypt_and_checks():
    hashed = hash_password("12345")

    assert hashed != "12345"
    assert hashed.startswith("bcrypt_sha256$")
    assert check_password("12345", hashed)
    assert not check_password("wrong", hashed)


@pytest.mark.django_db
def test_hash_looking_raw_password_is_still_hashed(user_factory):
    user = user_factory()
    user.password = "pbkdf2_sha256$1$salt$notahash"
    user.save()

    user.refresh_from_db()
    assert user.password != "pbkdf2_sha256$1$salt$notahash"
    assert user.password.startswith("bcrypt_sha256$")
    assert user.check_password("pbkdf2_sha256$1$salt$notahash")


@pytest.mark.django_db
def test_loaded_user_is_not_rehashed_on_save(user_factory):
    user_factory(email="loaded@example.com", password="12345")
    user = User.objects.get(email="loaded@example.com")
    stored = user.password

    user.verified = True
    user.save()

    user.refresh_from_db()
    assert user.password == stored
    assert user.check_password("12345")


@pytest.mark.django_db
def test_user_password_is_hashed_once_on_save(user_factory):
    user = user_factory(password="12345")
    stored = user.password

    user.save()
    user.refresh_from_db()

    assert user.password == stored
    assert user.check_password("12345")


@pytest.mark.django_db
def test_password_change_is_rehashed():
    user = User.objects.create_user(email="change@example.com", password="old-pass")
    user.password = "new-pass"
    user.save()

    user.refresh_from_db()
    assert user.check_password("new-pass")
    assert not user.check_password("old-pass")


@pytest.mark.django_db
def test_user_without_password_is_unusable():
    user = User.objects.create_user(email="nopass@example.com")
    user.refresh_from_db()

    assert not user.has_usable_password()


@pytest.mark.django_db
def test_saving_without_loaded_password_keeps_hash(user_factory):
    user_factory(email="deferred@example.com", password="12345")
    user = User.objects.only("id", "email").get(email="deferred@example.com")

    user.email = "moved@example.com"
    user.save()

    assert User.objects.get(email="moved@example.com").check_password("12345")
