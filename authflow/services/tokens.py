from rest_framework_simplejwt.exceptions import InvalidToken, TokenError
from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.tokens import AccessToken


def sign_token(payload: dict) -> str:
    """
    Issue a signed access token carrying the principal id.
    - payload: {"id": <user id>}
    """
    token = AccessToken()
    token[api_settings.USER_ID_CLAIM] = payload["id"]
    return str(token)


def issue_token_for_user(user) -> str:
    return sign_token({"id": user.id})


def verify_token(token: str) -> dict:
    """
    Validate signature + expiry and return {"id": <user id>}.
    Raises InvalidToken on anything else.
    """
    try:
        validated = AccessToken(token)
    except TokenError as exc:
        raise InvalidToken(str(exc)) from exc

    user_id = validated.get(api_settings.USER_ID_CLAIM)
    if user_id is None:
        raise InvalidToken("Token contained no recognizable user identification")
    return {"id": user_id}
