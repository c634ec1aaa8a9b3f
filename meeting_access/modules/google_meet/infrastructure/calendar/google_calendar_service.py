"""Google Calendar Service for creating events with Meet conferences."""
import logging
from datetime import datetime
from typing import Optional
from urllib.parse import quote

import httpx

logger = logging.getLogger(__name__)


class GoogleCalendarService:
    """Service to interact with Google Calendar API."""

    CALENDAR_API_BASE = 'https://www.googleapis.com/calendar/v3'

    def __init__(
        self,
        api_base: str = CALENDAR_API_BASE,
        calendar_id: str = 'primary',
        timeout_seconds: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_base = api_base.rstrip('/')
        self.calendar_id = calendar_id
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    @property
    def _events_url(self) -> str:
        return f'{self.api_base}/calendars/{quote(self.calendar_id, safe="")}/events'

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout_seconds, transport=self._transport)

    @staticmethod
    def _event_from(response: httpx.Response) -> dict:
        # Raises ValueError for bodies that are not a JSON object
        event = response.json()
        if not isinstance(event, dict):
            raise ValueError(f'Expected a JSON object, got {type(event).__name__}')
        return event

    @staticmethod
    def extract_meet_link(event: dict) -> Optional[str]:
        """Extract the Meet join URL generated for an event."""
        conf_data = event.get('conferenceData') or {}
        for entry_point in conf_data.get('entryPoints', []):
            if entry_point.get('entryPointType') == 'video' and entry_point.get('uri'):
                return entry_point['uri']

        # Legacy field, still populated for hangoutsMeet conferences
        return event.get('hangoutLink') or None

    async def get_event_by_id(self, access_token: str, event_id: str) -> dict:
        """Get a specific calendar event by ID."""
        async with self._client() as client:
            response = await client.get(
                f'{self._events_url}/{quote(event_id, safe="")}',
                headers={'Authorization': f'Bearer {access_token}'},
                params={'conferenceDataVersion': '1'},
            )
            response.raise_for_status()
            return self._event_from(response)

    async def create_event_with_meet(
        self,
        access_token: str,
        summary: str,
        start_time: datetime,
        end_time: datetime,
        request_id: str,
        description: str = '',
        attendees: Optional[list[str]] = None,
        event_id: Optional[str] = None,
    ) -> dict:
        """Create a calendar event with automatic Google Meet link.

        ``request_id`` tags the conference create request; Google returns the
        same conference for repeated requests with the same id. When
        ``event_id`` is given the event itself is created under that id, so a
        replay fails with 409 instead of producing a second event.
        """
        event_body = {
            'summary': summary,
            'description': description,
            'start': {
                'dateTime': start_time.isoformat(),
                'timeZone': 'UTC',
            },
            'end': {
                'dateTime': end_time.isoformat(),
                'timeZone': 'UTC',
            },
            'conferenceData': {
                'createRequest': {
                    'requestId': request_id,
                    'conferenceSolutionKey': {'type': 'hangoutsMeet'},
                },
            },
        }

        if attendees:
            event_body['attendees'] = [{'email': email} for email in attendees]
        if event_id:
            event_body['id'] = event_id

        async with self._client() as client:
            response = await client.post(
                self._events_url,
                headers={'Authorization': f'Bearer {access_token}'},
                params={'conferenceDataVersion': '1'},
                json=event_body,
            )
            response.raise_for_status()
            event = self._event_from(response)

        logger.info(f'Created calendar event {event.get("id")}')
        return event
