from dishka import Provider, Scope, provide

from meeting_access.modules.zoom.config import ZoomModuleConfig, ZoomSdkConfig
from meeting_access.modules.zoom.infrastructure.signature import \
    SignatureIssuer


class ZoomModuleProvider(Provider):
    @provide(scope=Scope.APP)
    def get_zoom_config(self) -> ZoomModuleConfig:
        return ZoomModuleConfig()

    @provide(scope=Scope.APP)
    def get_zoom_sdk_config(self, config: ZoomModuleConfig) -> ZoomSdkConfig:
        return config.sdk

    @provide(scope=Scope.APP)
    def get_signature_issuer(self, config: ZoomSdkConfig) -> SignatureIssuer:
        return SignatureIssuer(config)
