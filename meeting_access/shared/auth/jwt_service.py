import jwt
from pydantic import SecretStr

from meeting_access.shared.exceptions.auth import UnauthorizedException


class JWTService:
    """Verifies access tokens minted by the auth service. Tokens are never issued here."""

    def __init__(
        self,
        secret_key: SecretStr,
        algorithm: str,
        leeway_seconds: int = 0,
    ):
        self._secret_key = secret_key.get_secret_value()
        self._algorithm = algorithm
        self._leeway_seconds = leeway_seconds

    def decode_token(self, token: str) -> dict[str, int | str]:
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                leeway=self._leeway_seconds,
                options={'require': ['exp', 'sub']},
            )
            return payload
        except jwt.ExpiredSignatureError as e:
            raise UnauthorizedException('Token expired') from e
        except jwt.InvalidTokenError as e:
            raise UnauthorizedException('Invalid token') from e

    def verify_access_token(self, token: str) -> str:
        payload = self.decode_token(token)
        if payload.get('type') != 'access':
            raise UnauthorizedException('Invalid token type')
        subject = payload.get('sub')
        if not subject:
            raise UnauthorizedException('Token has no subject')
        return str(subject)
