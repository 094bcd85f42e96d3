from rest_framework import status
from rest_framework.response import Response

from .results import ErrorKind, Result

ERROR_STATUS = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.INVALID_CREDENTIALS: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def result_response(result: Result, success_status=status.HTTP_200_OK, serialize=None) -> Response:
    """
    Render a service Result as {"ok", "error", ...payload}.
    `serialize` turns the success payload (model instances) into plain data.
    """
    if not result.ok:
        return Response(result.to_dict(), status=ERROR_STATUS[result.kind])

    data = serialize(result.data) if serialize else result.data
    return Response({"ok": True, "error": None, **data}, status=success_status)


def invalid_input_response(serializer) -> Response:
    """Render serializer errors as a typed failure with the first message."""
    error = _first_error(serializer.errors)
    return result_response(Result.failure(ErrorKind.INVALID_INPUT, error))


def _first_error(errors) -> str:
    if isinstance(errors, dict):
        for field_name, value in errors.items():
            message = _first_error(value)
            if field_name == "non_field_errors":
                return message
            return f"{field_name}: {message}"
    if isinstance(errors, list):
        for entry in errors:
            if entry:
                return _first_error(entry)
    return str(errors)
