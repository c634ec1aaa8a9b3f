from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = Path(__file__).parent.parent.parent.parent / '.env'


class RateLimitConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix='RATE_LIMIT_',
        env_file=ENV_FILE,
        extra='ignore',
    )

    backend: Literal['memory', 'redis'] = 'memory'
    max_requests: int = 10
    window_seconds: int = 60


class ProvisioningModuleConfig(BaseSettings):
    rate_limit: RateLimitConfig = RateLimitConfig()
