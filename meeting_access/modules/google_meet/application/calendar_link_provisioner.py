import asyncio
import base64
import hashlib
import logging
import time
from datetime import datetime, timedelta, timezone

import httpx

from meeting_access.modules.google_meet.domain.entities import ProvisionedLink
from meeting_access.modules.google_meet.infrastructure.calendar import \
    GoogleCalendarService
from meeting_access.modules.provisioning.application.interfaces import \
    ICalendarLinkProvisioner
from meeting_access.modules.provisioning.domain.entities import (
    MeetingRequest, OAuthCredential)
from meeting_access.shared.exceptions import (InvalidRequestException,
                                              UpstreamAuthException,
                                              UpstreamUnavailableException)

logger = logging.getLogger(__name__)


def event_id_for_key(idempotency_key: str) -> str:
    # Calendar event ids are limited to base32hex characters (a-v, 0-9)
    digest = hashlib.sha256(idempotency_key.encode()).digest()
    return base64.b32hexencode(digest).decode().rstrip('=').lower()


class CalendarLinkProvisioner(ICalendarLinkProvisioner):
    def __init__(
        self,
        calendar_service: GoogleCalendarService,
        default_summary: str = 'Meeting',
        timeout_seconds: float = 10.0,
    ):
        self.calendar_service = calendar_service
        self.default_summary = default_summary
        self.timeout_seconds = timeout_seconds

    @staticmethod
    def _event_window(request: MeetingRequest) -> tuple[datetime, datetime]:
        start = request.desired_start
        if not isinstance(start, datetime) or start.tzinfo is None or start.utcoffset() is None:
            raise InvalidRequestException('desired_start must be a timezone-aware datetime')

        duration = request.duration_seconds
        if isinstance(duration, bool) or not isinstance(duration, int) or duration <= 0:
            raise InvalidRequestException('duration_seconds must be a positive integer')

        start = start.astimezone(timezone.utc)
        return start, start + timedelta(seconds=duration)

    async def provision(
        self,
        credential: OAuthCredential,
        request: MeetingRequest,
    ) -> ProvisionedLink:
        start, end = self._event_window(request)

        if request.idempotency_key:
            request_id = request.idempotency_key
            event_id = event_id_for_key(request.idempotency_key)
        else:
            request_id = f'meet-{time.time_ns()}'
            event_id = None

        try:
            async with asyncio.timeout(self.timeout_seconds):
                event = await self._create_or_replay(credential, request, start, end, request_id, event_id)
        except TimeoutError as e:
            logger.warning(f'Calendar API timed out after {self.timeout_seconds}s')
            raise UpstreamUnavailableException('Calendar service timed out') from e
        except httpx.HTTPStatusError as e:
            raise self._map_status_error(e) from e
        except httpx.TimeoutException as e:
            logger.warning(f'Calendar API request timed out: {e!r}')
            raise UpstreamUnavailableException('Calendar service timed out') from e
        except httpx.RequestError as e:
            logger.warning(f'Calendar API request failed: {e!r}')
            raise UpstreamUnavailableException('Calendar service is unavailable') from e
        except ValueError as e:
            logger.warning(f'Calendar API returned a malformed body: {e!r}')
            raise UpstreamUnavailableException('Calendar service returned a malformed response') from e

        join_url = GoogleCalendarService.extract_meet_link(event)
        if not join_url:
            status_code = (
                event.get('conferenceData', {})
                .get('createRequest', {})
                .get('status', {})
                .get('statusCode')
            )
            logger.warning(f'Event {event.get("id")} has no Meet link yet (conference status: {status_code})')
            raise UpstreamUnavailableException('Calendar service did not return a conference link')

        event_id = event.get('id')
        if not event_id:
            raise UpstreamUnavailableException('Calendar service returned an event without id')

        logger.info(f'Provisioned Meet link for requester {request.requester_id}, event {event_id}')

        return ProvisionedLink(
            join_url=join_url,
            calendar_event_id=event_id,
            expires_at=end,
            html_link=event.get('htmlLink'),
        )

    async def _create_or_replay(
        self,
        credential: OAuthCredential,
        request: MeetingRequest,
        start: datetime,
        end: datetime,
        request_id: str,
        event_id: str | None,
    ) -> dict:
        try:
            return await self.calendar_service.create_event_with_meet(
                access_token=credential.access_token,
                summary=request.summary or self.default_summary,
                start_time=start,
                end_time=end,
                request_id=request_id,
                description=request.description,
                attendees=list(request.attendees),
                event_id=event_id,
            )
        except httpx.HTTPStatusError as e:
            if e.response.status_code != 409 or event_id is None:
                raise
            logger.info(f'Event {event_id} already exists, returning the existing event')
            return await self.calendar_service.get_event_by_id(credential.access_token, event_id)

    @staticmethod
    def _map_status_error(error: httpx.HTTPStatusError) -> Exception:
        status_code = error.response.status_code
        logger.error(f'Calendar API responded with {status_code}')

        if status_code in (401, 403):
            return UpstreamAuthException(
                'Calendar service rejected the credential',
                status_code=status_code,
            )
        if status_code == 429 or status_code >= 500:
            return UpstreamUnavailableException(f'Calendar service responded with {status_code}')
        return InvalidRequestException(f'Calendar service rejected the request ({status_code})')
