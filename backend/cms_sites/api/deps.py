from typing import Any

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from cms_sites.core.config import settings
from cms_sites.core.security import TokenDecodeError, decode_admin_token, token_scopes


bearer_scheme = HTTPBearer(auto_error=False)


def get_admin_claims(credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme)) -> dict[str, Any]:
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail='Not authenticated',
            headers={'WWW-Authenticate': 'Bearer'},
        )
    try:
        return decode_admin_token(credentials.credentials)
    except TokenDecodeError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail='Invalid admin token') from exc


def require_site_admin(claims: dict[str, Any] = Depends(get_admin_claims)) -> dict[str, Any]:
    if settings.ADMIN_SCOPE not in token_scopes(claims):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail='Insufficient scope for site administration')
    return claims
