from pathlib import Path

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = Path(__file__).parent.parent.parent.parent / '.env'


class ZoomSdkConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix='ZOOM_SDK_',
        env_file=ENV_FILE,
        extra='ignore',
    )

    sdk_key: str = ''
    sdk_secret: SecretStr = SecretStr('')

    # Zoom rejects signatures dated ahead of its own clock
    clock_skew_seconds: int = 30
    token_validity_seconds: int = 120


class ZoomModuleConfig(BaseSettings):
    sdk: ZoomSdkConfig = ZoomSdkConfig()
