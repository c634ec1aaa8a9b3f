import logging

import uvicorn
from dishka import AsyncContainer
from dishka.integrations import fastapi as fastapi_integration
from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from meeting_access.ioc import create_container
from meeting_access.modules.provisioning.presentation.api.sessions.router import \
    router as sessions_router
from meeting_access.modules.zoom.infrastructure.signature import \
    SignatureIssuer
from meeting_access.shared.config import get_settings
from meeting_access.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)

    container = container or create_container(settings)

    app = FastAPI(title=settings.app_name, debug=settings.debug)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    fastapi_integration.setup_dishka(container, app)
    app.include_router(sessions_router)

    @app.on_event('startup')
    async def startup_event():
        # Missing SDK secrets abort startup instead of failing per request
        await container.get(SignatureIssuer)
        logger.info('Signing configuration loaded')

    @app.on_event('shutdown')
    async def shutdown_event():
        await container.close()
        logger.info('Container closed')

    return app


if __name__ == '__main__':
    uvicorn.run(
        'meeting_access.main:create_app',
        factory=True,
        host='0.0.0.0',
        port=8000,
        log_level='info',
    )
