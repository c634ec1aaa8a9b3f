from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class JWTConfig(BaseSettings):
    """Verification settings for app access tokens issued by the auth service."""

    model_config = SettingsConfigDict(
        env_prefix='JWT_',
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',
    )

    secret_key: SecretStr = SecretStr('secret')
    algorithm: str = 'HS256'
    leeway_seconds: int = 0


class RedisConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix='REDIS_',
        env_file='.env',
        extra='ignore',
    )
    host: str = 'localhost'
    port: int = 6379
    password: SecretStr | None = None
    db: int = 0
    socket_timeout_seconds: float = 2.0

    @property
    def url(self) -> str:
        if self.password:
            return f'redis://:{self.password.get_secret_value()}@{self.host}:{self.port}/{self.db}'
        return f'redis://{self.host}:{self.port}/{self.db}'
