from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from meeting_access.shared.auth.jwt_service import JWTService
from meeting_access.shared.exceptions.auth import UnauthorizedException

security = HTTPBearer(auto_error=False)


def get_requester_id(
    credentials: HTTPAuthorizationCredentials | None,
    jwt_service: JWTService,
) -> str:
    if credentials is None:
        raise UnauthorizedException('Missing authorization header')

    if credentials.scheme.lower() != 'bearer':
        raise UnauthorizedException('Invalid authorization header format')

    return jwt_service.verify_access_token(credentials.credentials)
