from collections.abc import AsyncIterable

from dishka import Provider, Scope, from_context, provide
from redis.asyncio import Redis

from meeting_access.shared.auth.jwt_service import JWTService
from meeting_access.shared.config import Settings


class SharedInfrastructureProvider(Provider):
    settings = from_context(provides=Settings, scope=Scope.APP)

    @provide(scope=Scope.APP)
    async def get_redis(self, settings: Settings) -> AsyncIterable[Redis]:
        redis = Redis.from_url(
            settings.redis.url,
            decode_responses=True,
            socket_timeout=settings.redis.socket_timeout_seconds,
        )
        yield redis
        await redis.aclose()

    @provide(scope=Scope.APP)
    def get_jwt_service(self, settings: Settings) -> JWTService:
        return JWTService(
            secret_key=settings.jwt.secret_key,
            algorithm=settings.jwt.algorithm,
            leeway_seconds=settings.jwt.leeway_seconds,
        )
