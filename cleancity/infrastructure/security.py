"""Verification of access tokens issued by the authentication provider."""

from jose import JWTError, jwt

from cleancity.config import get_settings


def decode_access_token(token: str) -> dict:
    settings = get_settings()
    options = {"verify_aud": bool(settings.jwt_audience)}
    try:
        return jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience or None,
            options=options,
        )
    except JWTError as exc:
        raise ValueError("Could not validate credentials") from exc
