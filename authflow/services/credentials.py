import logging

from django.contrib.auth.hashers import make_password, check_password as django_check_password

from core.results import InternalFailure

logger = logging.getLogger(__name__)


def hash_password(raw: str) -> str:
    try:
        return make_password(raw)
    except Exception as exc:
        logger.exception("Password hashing failed")
        raise InternalFailure("Could not hash password") from exc


def check_password(raw: str, password_hash: str) -> bool:
    try:
        return django_check_password(raw, password_hash)
    except Exception as exc:
        logger.exception("Password check failed")
        raise InternalFailure("Could not check password") from exc
