import enum
import logging
from dataclasses import dataclass, field
from functools import wraps

logger = logging.getLogger(__name__)


# ─── Error taxonomy ──────────────────────────────────────────────────────────

class ErrorKind(enum.Enum):
    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"
    CONFLICT = "conflict"
    INVALID_CREDENTIALS = "invalid_credentials"
    INVALID_INPUT = "invalid_input"
    INTERNAL = "internal"


class ServiceError(Exception):
    """Base class for expected service failures. The message is shown to the caller as is."""
    kind = ErrorKind.INTERNAL

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(ServiceError):
    kind = ErrorKind.NOT_FOUND


class Forbidden(ServiceError):
    kind = ErrorKind.FORBIDDEN


class Conflict(ServiceError):
    kind = ErrorKind.CONFLICT


class InvalidCredentials(ServiceError):
    kind = ErrorKind.INVALID_CREDENTIALS


class InternalFailure(ServiceError):
    kind = ErrorKind.INTERNAL


# ─── Result ──────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Result:
    ok: bool
    error: str | None = None
    kind: ErrorKind | None = None
    data: dict = field(default_factory=dict)

    @classmethod
    def success(cls, **data) -> "Result":
        return cls(ok=True, data=data)

    @classmethod
    def failure(cls, kind: ErrorKind, error: str) -> "Result":
        return cls(ok=False, error=error, kind=kind)

    def to_dict(self) -> dict:
        return {"ok": self.ok, "error": self.error, **self.data}


def service_operation(default_error: str):
    """
    Wrap a service method so it always returns a Result.

    - a returned Result passes through untouched
    - a returned dict becomes Result.success(**dict)
    - a ServiceError becomes a typed failure carrying its own message
    - InternalFailure and anything unexpected are logged and reported as `default_error`
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                outcome = func(*args, **kwargs)
            except InternalFailure:
                logger.exception("%s failed", func.__qualname__)
                return Result.failure(ErrorKind.INTERNAL, default_error)
            except ServiceError as exc:
                return Result.failure(exc.kind, exc.message)
            except Exception:
                logger.exception("%s failed", func.__qualname__)
                return Result.failure(ErrorKind.INTERNAL, default_error)

            if isinstance(outcome, Result):
                return outcome
            return Result.success(**(outcome or {}))
        return wrapper
    return decorator
