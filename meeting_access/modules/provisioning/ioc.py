from dishka import Provider, Scope, provide
from redis.asyncio import Redis

from meeting_access.modules.google_meet.application import \
    CalendarLinkProvisioner
from meeting_access.modules.provisioning.application.interactors import \
    RequestSessionInteractor
from meeting_access.modules.provisioning.application.interfaces import \
    IRateLimiter
from meeting_access.modules.provisioning.config import (
    ProvisioningModuleConfig, RateLimitConfig)
from meeting_access.modules.provisioning.infrastructure.rate_limit import (
    InMemoryRateLimiter, RedisRateLimiter)
from meeting_access.modules.zoom.infrastructure.signature import \
    SignatureIssuer


class ProvisioningModuleProvider(Provider):
    @provide(scope=Scope.APP)
    def get_provisioning_config(self) -> ProvisioningModuleConfig:
        return ProvisioningModuleConfig()

    @provide(scope=Scope.APP)
    def get_rate_limit_config(self, config: ProvisioningModuleConfig) -> RateLimitConfig:
        return config.rate_limit

    @provide(scope=Scope.APP, provides=IRateLimiter)
    def get_rate_limiter(self, config: RateLimitConfig, redis: Redis) -> IRateLimiter:
        if config.backend == 'redis':
            return RedisRateLimiter(
                redis,
                max_requests=config.max_requests,
                window_seconds=config.window_seconds,
            )
        return InMemoryRateLimiter(
            max_requests=config.max_requests,
            window_seconds=config.window_seconds,
        )

    @provide(scope=Scope.REQUEST)
    def get_request_session_interactor(
        self,
        calendar_provisioner: CalendarLinkProvisioner,
        signature_issuer: SignatureIssuer,
        rate_limiter: IRateLimiter,
        config: RateLimitConfig,
    ) -> RequestSessionInteractor:
        return RequestSessionInteractor(
            calendar_provisioner=calendar_provisioner,
            signature_issuer=signature_issuer,
            rate_limiter=rate_limiter,
            rate_limit_window_seconds=config.window_seconds,
        )
