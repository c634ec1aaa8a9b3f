import logging
from datetime import UTC, datetime

from meeting_access.modules.provisioning.application.dtos import SessionResult
from meeting_access.modules.provisioning.application.interfaces import (
    ICalendarLinkProvisioner, IRateLimiter, ISignatureIssuer)
from meeting_access.modules.provisioning.domain.entities import (
    MeetingRequest, MeetingRole, OAuthCredential, Platform)
from meeting_access.modules.zoom.domain.entities import \
    normalize_meeting_number
from meeting_access.shared.exceptions import (InvalidRequestException,
                                              MissingAuthorizationException,
                                              RateLimitedException)

logger = logging.getLogger(__name__)


class RequestSessionInteractor:
    def __init__(
        self,
        calendar_provisioner: ICalendarLinkProvisioner,
        signature_issuer: ISignatureIssuer,
        rate_limiter: IRateLimiter,
        rate_limit_window_seconds: int,
    ):
        self._calendar = calendar_provisioner
        self._issuer = signature_issuer
        self._rate_limiter = rate_limiter
        self._retry_after = rate_limit_window_seconds

    @staticmethod
    def _validate(platform: Platform, request: MeetingRequest) -> None:
        if not isinstance(platform, Platform):
            raise InvalidRequestException(f'Unsupported platform: {platform!r}')
        if request.platform != platform:
            raise InvalidRequestException('Request platform does not match the requested platform')

        if not isinstance(request.requester_id, str) or not request.requester_id.strip():
            raise InvalidRequestException('requester_id is required')

        if not isinstance(request.role, MeetingRole):
            raise InvalidRequestException(f'Unsupported role: {request.role!r}')

        duration = request.duration_seconds
        if isinstance(duration, bool) or not isinstance(duration, int) or duration <= 0:
            raise InvalidRequestException('duration_seconds must be a positive integer')

        start = request.desired_start
        if not isinstance(start, datetime) or start.utcoffset() is None:
            raise InvalidRequestException('desired_start must be a timezone-aware datetime')

        if platform is Platform.ZOOM:
            normalize_meeting_number(request.meeting_number)

    async def __call__(
        self,
        platform: Platform,
        request: MeetingRequest,
        credential: OAuthCredential | None = None,
    ) -> SessionResult:
        self._validate(platform, request)

        if platform is Platform.GOOGLE_MEET:
            if credential is None or not credential.access_token:
                raise MissingAuthorizationException('Google Meet requires an OAuth credential')
            if credential.is_expired(datetime.now(UTC)):
                raise MissingAuthorizationException('OAuth credential has expired')

        if not await self._rate_limiter.check_and_increment(f'provisioning:{request.requester_id}'):
            raise RateLimitedException(
                'Too many provisioning requests',
                retry_after=self._retry_after,
            )

        logger.info(f'Provisioning {platform.value} session for requester {request.requester_id}')

        if platform is Platform.GOOGLE_MEET:
            return await self._calendar.provision(credential, request)
        return self._issuer.issue(request.meeting_number, request.role)
