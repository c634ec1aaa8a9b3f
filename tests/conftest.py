"""Shared fixtures for the provisioning tests."""
from __future__ import annotations

import json
from datetime import datetime, timezone

import httpx
import pytest
from pydantic import SecretStr

from meeting_access.modules.google_meet.infrastructure.calendar import \
    GoogleCalendarService
from meeting_access.modules.provisioning.domain.entities import (
    MeetingRequest, MeetingRole, OAuthCredential, Platform)
from meeting_access.modules.zoom.config import ZoomSdkConfig
from meeting_access.modules.zoom.infrastructure.signature import \
    SignatureIssuer

SDK_KEY = 'test-sdk-key'
SDK_SECRET = 'test-sdk-secret'
FIXED_NOW = 1_700_000_000.0
MEET_URL = 'https://meet.google.com/abc-defg-hij'


class FakeClock:
    def __init__(self, now: float = FIXED_NOW) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class CalendarStub:
    """Records calendar API calls and answers with queued responses."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.responses: list[httpx.Response] = []

    def queue(self, status_code: int, payload: dict | None = None) -> None:
        self.responses.append(httpx.Response(status_code, json=payload or {}))

    def queue_raw(self, status_code: int, content: bytes, content_type: str = 'application/json') -> None:
        self.responses.append(
            httpx.Response(status_code, content=content, headers={'Content-Type': content_type})
        )

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.responses:
            raise AssertionError(f'Unexpected calendar call: {request.method} {request.url}')
        return self.responses.pop(0)

    def body(self, index: int = 0) -> dict:
        return json.loads(self.requests[index].content)


def meet_event(event_id: str = 'evt123', uri: str = MEET_URL) -> dict:
    return {
        'id': event_id,
        'htmlLink': f'https://calendar.google.com/event?eid={event_id}',
        'hangoutLink': uri,
        'conferenceData': {
            'entryPoints': [
                {'entryPointType': 'video', 'uri': uri},
                {'entryPointType': 'phone', 'uri': 'tel:+1-555-0100'},
            ],
        },
    }


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def zoom_config() -> ZoomSdkConfig:
    return ZoomSdkConfig(sdk_key=SDK_KEY, sdk_secret=SecretStr(SDK_SECRET))


@pytest.fixture
def issuer(zoom_config: ZoomSdkConfig, clock: FakeClock) -> SignatureIssuer:
    return SignatureIssuer(zoom_config, clock=clock)


@pytest.fixture
def calendar_stub() -> CalendarStub:
    return CalendarStub()


@pytest.fixture
def calendar_service(calendar_stub: CalendarStub) -> GoogleCalendarService:
    return GoogleCalendarService(transport=httpx.MockTransport(calendar_stub.handler))


@pytest.fixture
def credential() -> OAuthCredential:
    return OAuthCredential(access_token='ya29.test-token')


@pytest.fixture
def start() -> datetime:
    return datetime(2026, 11, 2, 15, 0, tzinfo=timezone.utc)


@pytest.fixture
def meet_request(start: datetime) -> MeetingRequest:
    return MeetingRequest(
        platform=Platform.GOOGLE_MEET,
        requester_id='user-1',
        role=MeetingRole.HOST,
        desired_start=start,
        duration_seconds=1800,
        summary='Sprint review',
        attendees=('a@example.com',),
    )


@pytest.fixture
def zoom_request(start: datetime) -> MeetingRequest:
    return MeetingRequest(
        platform=Platform.ZOOM,
        requester_id='user-1',
        role=MeetingRole.HOST,
        desired_start=start,
        duration_seconds=1800,
        meeting_number='12345678',
    )
