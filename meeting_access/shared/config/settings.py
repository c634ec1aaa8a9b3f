from pydantic_settings import BaseSettings, SettingsConfigDict

from meeting_access.shared.config.base import JWTConfig, RedisConfig


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',
    )

    redis: RedisConfig = RedisConfig()
    jwt: JWTConfig = JWTConfig()

    app_name: str = 'Meeting Access'
    debug: bool = False
    log_level: str = 'INFO'
    frontend_url: str = 'http://localhost:3000'


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
