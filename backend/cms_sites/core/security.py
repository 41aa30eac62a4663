from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt

from cms_sites.core.config import settings


class TokenDecodeError(Exception):
    pass


def create_admin_token(subject: str, *, scopes: list[str] | None = None, expires_minutes: int = 30) -> str:
    # Admin tokens are normally minted by the host application's identity service.
    data: dict[str, Any] = {
        'sub': subject,
        'scope': ' '.join(scopes if scopes is not None else [settings.ADMIN_SCOPE]),
        'exp': datetime.now(UTC) + timedelta(minutes=expires_minutes),
    }
    return jwt.encode(data, settings.ADMIN_JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_admin_token(token: str) -> dict[str, Any]:
    try:
        payload = jwt.decode(token, settings.ADMIN_JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except JWTError as exc:
        raise TokenDecodeError('Invalid admin token') from exc

    if not payload.get('sub'):
        raise TokenDecodeError('Admin token has no subject')
    return payload


def token_scopes(payload: dict[str, Any]) -> set[str]:
    return {item for item in str(payload.get('scope') or '').split() if item}
