import logging
from datetime import UTC, datetime
from typing import Annotated

from dishka import FromDishka
from dishka.integrations.fastapi import inject
from fastapi import APIRouter, Depends, Header, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials

from meeting_access.modules.google_meet.domain.entities import ProvisionedLink
from meeting_access.modules.provisioning.application.interactors import \
    RequestSessionInteractor
from meeting_access.modules.provisioning.domain.entities import (
    MeetingRequest, MeetingRole, OAuthCredential, Platform)
from meeting_access.modules.provisioning.presentation.api.sessions.schemas import (
    CreateSessionRequest, HealthResponse, JoinCredentialResponse,
    ProvisionedLinkResponse, SessionResponse)
from meeting_access.shared.auth import JWTService, get_requester_id, security
from meeting_access.shared.exceptions import (ConfigurationException,
                                              InvalidRequestException,
                                              MissingAuthorizationException,
                                              ProvisioningException,
                                              RateLimitedException,
                                              UnauthorizedException,
                                              UpstreamAuthException,
                                              UpstreamUnavailableException)

logger = logging.getLogger(__name__)

router = APIRouter(prefix='/api/v1/sessions', tags=['Sessions'])

STATUS_BY_EXCEPTION: dict[type[ProvisioningException], int] = {
    InvalidRequestException: status.HTTP_400_BAD_REQUEST,
    MissingAuthorizationException: status.HTTP_401_UNAUTHORIZED,
    UpstreamAuthException: status.HTTP_502_BAD_GATEWAY,
    UpstreamUnavailableException: status.HTTP_503_SERVICE_UNAVAILABLE,
    RateLimitedException: status.HTTP_429_TOO_MANY_REQUESTS,
    ConfigurationException: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def to_http_exception(error: ProvisioningException) -> HTTPException:
    status_code = STATUS_BY_EXCEPTION.get(type(error), status.HTTP_500_INTERNAL_SERVER_ERROR)
    headers = None
    if isinstance(error, RateLimitedException):
        headers = {'Retry-After': str(error.retry_after)}
    return HTTPException(status_code=status_code, detail=error.message, headers=headers)


@router.get('/health', summary='Provisioning health', response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status='ok', platforms=[platform.value for platform in Platform])


@router.post('', summary='Provision access to a conferencing session', response_model=SessionResponse)
@inject
async def create_session(
    body: CreateSessionRequest,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    jwt_service: FromDishka[JWTService],
    interactor: FromDishka[RequestSessionInteractor],
    x_calendar_token: Annotated[str | None, Header()] = None,
    x_calendar_token_expires_at: Annotated[datetime | None, Header()] = None,
) -> SessionResponse:
    try:
        requester_id = get_requester_id(credentials, jwt_service)
    except UnauthorizedException as e:
        logger.warning(f'Rejected session request: {e.message}')
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail='Invalid authentication credentials',
        )

    request = MeetingRequest(
        platform=body.platform,
        requester_id=requester_id,
        role=MeetingRole[body.role.upper()],
        desired_start=body.desired_start or datetime.now(UTC),
        duration_seconds=body.duration_seconds,
        meeting_number=body.meeting_number,
        summary=body.summary,
        description=body.description,
        attendees=tuple(body.attendees),
        idempotency_key=body.idempotency_key,
    )
    credential = None
    if x_calendar_token:
        credential = OAuthCredential(
            access_token=x_calendar_token,
            expires_at=x_calendar_token_expires_at,
        )

    try:
        result = await interactor(body.platform, request, credential)
    except ProvisioningException as e:
        logger.warning(f'Session request from {requester_id} failed: {type(e).__name__}: {e.message}')
        raise to_http_exception(e)

    if isinstance(result, ProvisionedLink):
        return ProvisionedLinkResponse(
            join_url=result.join_url,
            calendar_event_id=result.calendar_event_id,
            expires_at=result.expires_at,
            html_link=result.html_link,
        )
    return JoinCredentialResponse(
        sdk_key=result.sdk_key,
        meeting_number=result.meeting_number,
        timestamp=result.timestamp,
        role=int(result.role),
        signature=result.signature,
        token=result.token,
        valid_until=result.valid_until,
    )
