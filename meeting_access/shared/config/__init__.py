from meeting_access.shared.config.base import JWTConfig, RedisConfig
from meeting_access.shared.config.settings import Settings, get_settings

__all__ = [
    'JWTConfig',
    'RedisConfig',
    'Settings',
    'get_settings',
]
